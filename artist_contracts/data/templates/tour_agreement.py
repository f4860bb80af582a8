"""Tour/Performance Agreement

For live performances and touring: dates, venues, fees, rider and travel.
"""

from artist_contracts.models.template import (
    FieldType,
    FieldValidation,
    OptionalClause,
    SelectOption,
    TemplateCategory,
    TemplateContent,
    TemplateDefinition,
    TemplateField,
    TemplateSection,
)

TOUR_AGREEMENT = TemplateDefinition(
    name="Tour/Performance Agreement",
    description=(
        "For live performances and touring. Covers dates, venues, fees, technical "
        "requirements, and travel provisions."
    ),
    category=TemplateCategory.TOURING,
    is_active=True,
    sort_order=3,
    version=1,
    fields=[
        # Artist
        TemplateField(
            id="artist_name",
            label="Artist/Performer Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., The Night Owls",
            group="Artist Details",
        ),
        TemplateField(
            id="artist_address",
            label="Artist Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Artist Details",
        ),
        TemplateField(
            id="artist_email",
            label="Artist Contact Email",
            type=FieldType.EMAIL,
            required=True,
            group="Artist Details",
        ),
        TemplateField(
            id="artist_manager",
            label="Manager/Representative Name",
            type=FieldType.TEXT,
            required=False,
            group="Artist Details",
        ),
        # Promoter/venue
        TemplateField(
            id="promoter_name",
            label="Promoter/Venue Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Live Nation UK",
            group="Promoter/Venue Details",
        ),
        TemplateField(
            id="promoter_address",
            label="Promoter Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Promoter/Venue Details",
        ),
        TemplateField(
            id="promoter_email",
            label="Promoter Contact Email",
            type=FieldType.EMAIL,
            required=True,
            group="Promoter/Venue Details",
        ),
        # Performance
        TemplateField(
            id="venue_name",
            label="Venue Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., O2 Academy Brixton",
            group="Performance Details",
        ),
        TemplateField(
            id="venue_address",
            label="Venue Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Performance Details",
        ),
        TemplateField(
            id="performance_date",
            label="Performance Date",
            type=FieldType.DATE,
            required=True,
            group="Performance Details",
        ),
        TemplateField(
            id="doors_time",
            label="Doors Open Time",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., 7:00 PM",
            group="Performance Details",
        ),
        TemplateField(
            id="set_time",
            label="Set Start Time",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., 9:00 PM",
            group="Performance Details",
        ),
        TemplateField(
            id="set_length",
            label="Set Length (minutes)",
            type=FieldType.NUMBER,
            required=True,
            default_value=60,
            validation=FieldValidation(min=15, max=180),
            group="Performance Details",
        ),
        # Financial
        TemplateField(
            id="performance_fee",
            label="Performance Fee",
            type=FieldType.CURRENCY,
            required=True,
            group="Financial Terms",
        ),
        TemplateField(
            id="deposit_amount",
            label="Deposit Amount",
            type=FieldType.CURRENCY,
            required=False,
            help_text="Amount due upon signing",
            group="Financial Terms",
        ),
        TemplateField(
            id="ticket_price",
            label="Ticket Price",
            type=FieldType.CURRENCY,
            required=False,
            group="Financial Terms",
        ),
        TemplateField(
            id="venue_capacity",
            label="Venue Capacity",
            type=FieldType.NUMBER,
            required=False,
            group="Financial Terms",
        ),
    ],
    optional_clauses=[
        OptionalClause(
            id="rider",
            name="Technical Rider",
            description="Technical and hospitality requirements",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="sound_requirements",
                    label="Sound System Requirements",
                    type=FieldType.TEXTAREA,
                    required=True,
                    placeholder="e.g., Full PA system, monitors, microphones...",
                ),
                TemplateField(
                    id="backline_requirements",
                    label="Backline Requirements",
                    type=FieldType.TEXTAREA,
                    required=False,
                    placeholder="e.g., Drum kit, amplifiers, keyboard...",
                ),
                TemplateField(
                    id="hospitality_requirements",
                    label="Hospitality Requirements",
                    type=FieldType.TEXTAREA,
                    required=False,
                    placeholder="e.g., Dressing room, refreshments, meals...",
                ),
            ],
        ),
        OptionalClause(
            id="travel",
            name="Travel and Accommodation",
            description="Travel and lodging provisions",
            default_enabled=False,
            fields=[
                TemplateField(
                    id="travel_arrangement",
                    label="Travel Arrangements",
                    type=FieldType.SELECT,
                    required=True,
                    options=[
                        SelectOption(value="artist", label="Artist arranges, Promoter reimburses"),
                        SelectOption(value="promoter", label="Promoter arranges and pays"),
                        SelectOption(value="artist_pays", label="Artist arranges and pays"),
                    ],
                ),
                TemplateField(
                    id="hotel_rooms",
                    label="Number of Hotel Rooms Required",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=2,
                    validation=FieldValidation(min=1, max=20),
                ),
            ],
        ),
        OptionalClause(
            id="merchandise",
            name="Merchandise Rights",
            description="Artist merchandise sales at venue",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="merch_split",
                    label="Artist Merchandise Percentage",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=80,
                    validation=FieldValidation(min=0, max=100),
                    help_text="Artist keeps this percentage, venue/promoter keeps the rest",
                ),
            ],
        ),
        OptionalClause(
            id="cancellation",
            name="Cancellation Terms",
            description="Terms for cancellation by either party",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="artist_cancel_notice",
                    label="Artist Cancellation Notice (days)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=30,
                    validation=FieldValidation(min=7, max=90),
                ),
                TemplateField(
                    id="promoter_cancel_notice",
                    label="Promoter Cancellation Notice (days)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=14,
                    validation=FieldValidation(min=7, max=90),
                ),
            ],
        ),
    ],
    content=TemplateContent(
        title="PERFORMANCE AGREEMENT",
        sections=[
            TemplateSection(
                id="parties",
                heading="1. PARTIES",
                content="""This Performance Agreement ("Agreement") is entered into by and between:

{{artist_name}} ("Artist")
Address: {{artist_address}}
Email: {{artist_email}}
Manager: {{artist_manager}}

AND

{{promoter_name}} ("Promoter")
Address: {{promoter_address}}
Email: {{promoter_email}}""",
            ),
            TemplateSection(
                id="engagement",
                heading="2. ENGAGEMENT",
                content="""Promoter hereby engages Artist to perform at:

Venue: {{venue_name}}
Address: {{venue_address}}
Date: {{performance_date}}
Doors: {{doors_time}}
Set Time: {{set_time}}
Set Length: {{set_length}} minutes

Artist agrees to perform their scheduled set in a professional manner consistent with their usual standard of performance.""",
            ),
            TemplateSection(
                id="compensation",
                heading="3. COMPENSATION",
                content="""Promoter agrees to pay Artist a performance fee of {{performance_fee}}.

Deposit: A deposit of {{deposit_amount}} is due upon execution of this Agreement.

Balance: The remaining balance shall be paid in full on the day of the performance, prior to Artist taking the stage.

All payments shall be made in GBP by bank transfer or certified funds.""",
            ),
            TemplateSection(
                id="tickets",
                heading="4. TICKETS AND CAPACITY",
                content="""Ticket Price: {{ticket_price}}
Venue Capacity: {{venue_capacity}}

Promoter shall be responsible for all ticket sales and marketing. Artist shall receive {{venue_capacity}} complimentary tickets upon request.""",
            ),
            TemplateSection(
                id="rider_section",
                heading="5. TECHNICAL RIDER",
                content="""Promoter agrees to provide the following technical requirements:

SOUND SYSTEM:
{{sound_requirements}}

BACKLINE:
{{backline_requirements}}

HOSPITALITY:
{{hospitality_requirements}}

Any failure to meet these requirements may result in a reduction of the performance fee at Artist's discretion.""",
                is_optional=True,
                clause_id="rider",
            ),
            TemplateSection(
                id="travel_section",
                heading="6. TRAVEL AND ACCOMMODATION",
                content="""Travel Arrangements: {{travel_arrangement}}

Accommodation: Promoter shall provide {{hotel_rooms}} hotel room(s) of at least 4-star quality for the night of the performance.

All travel and accommodation expenses shall be settled in accordance with the arrangement specified above.""",
                is_optional=True,
                clause_id="travel",
            ),
            TemplateSection(
                id="merchandise_section",
                heading="7. MERCHANDISE",
                content="""Artist shall have the exclusive right to sell merchandise at the venue.

Revenue Split: Artist retains {{merch_split}}% of all merchandise sales.

Promoter shall provide a suitable merchandise area with adequate lighting and security.""",
                is_optional=True,
                clause_id="merchandise",
            ),
            TemplateSection(
                id="cancellation_section",
                heading="8. CANCELLATION",
                content="""Artist Cancellation: Artist may cancel with {{artist_cancel_notice}} days written notice, with full return of any deposits.

Promoter Cancellation: Promoter may cancel with {{promoter_cancel_notice}} days written notice, subject to payment of 50% of the performance fee.

Cancellation with less than 7 days notice by either party shall result in payment of the full performance fee to the non-cancelling party.

Force Majeure: Neither party shall be liable for cancellation due to events beyond their reasonable control.""",
                is_optional=True,
                clause_id="cancellation",
            ),
            TemplateSection(
                id="insurance",
                heading="9. INSURANCE AND LIABILITY",
                content="""Promoter shall maintain adequate public liability insurance for the venue and event.

Artist shall be responsible for insuring their own equipment.

Each party shall indemnify the other against claims arising from their own negligence or breach of this Agreement.""",
            ),
            TemplateSection(
                id="general",
                heading="10. GENERAL PROVISIONS",
                content="""Entire Agreement: This Agreement constitutes the entire understanding between the parties.

Amendments: This Agreement may only be amended in writing signed by both parties.

Governing Law: This Agreement shall be governed by the laws of England and Wales.

Recording: No audio or video recording of the performance shall be made without Artist's prior written consent.""",
            ),
            TemplateSection(
                id="signatures",
                heading="11. SIGNATURES",
                content="""IN WITNESS WHEREOF, the parties have executed this Agreement.


_____________________________
{{artist_name}} (Artist)
Date: _______________


_____________________________
{{promoter_name}} (Promoter)
Date: _______________""",
            ),
        ],
    ),
)
