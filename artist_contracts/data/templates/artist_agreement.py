"""Artist Collaboration Agreement

For two artists working on a joint release: revenue splits, rights,
credits, optional exclusivity and termination terms.
"""

from datetime import date

from artist_contracts.models.template import (
    FieldType,
    FieldValidation,
    OptionalClause,
    SelectOption,
    TemplateCategory,
    TemplateContent,
    TemplateDefinition,
    TemplateField,
    TemplateFormData,
    TemplateSection,
)

TERRITORY_OPTIONS = [
    SelectOption(value="worldwide", label="Worldwide"),
    SelectOption(value="uk", label="United Kingdom only"),
    SelectOption(value="europe", label="Europe"),
    SelectOption(value="north_america", label="North America"),
    SelectOption(value="custom", label="Custom (specify in project description)"),
]

ARTIST_AGREEMENT = TemplateDefinition(
    name="Artist Collaboration Agreement",
    description=(
        "For artists collaborating on a track or project. Covers revenue splits, "
        "ownership, credits, exclusivity and termination."
    ),
    category=TemplateCategory.ARTIST,
    is_active=True,
    sort_order=1,
    version=1,
    fields=[
        # Party A
        TemplateField(
            id="party_a_name",
            label="Party A Name",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., Jane Smith p/k/a "J. Melody"',
            group="Party A",
        ),
        TemplateField(
            id="party_a_address",
            label="Party A Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Party A",
        ),
        TemplateField(
            id="party_a_email",
            label="Party A Email",
            type=FieldType.EMAIL,
            required=True,
            group="Party A",
        ),
        # Party B
        TemplateField(
            id="party_b_name",
            label="Party B Name",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., John Doe p/k/a "DJ Thunder"',
            group="Party B",
        ),
        TemplateField(
            id="party_b_address",
            label="Party B Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Party B",
        ),
        TemplateField(
            id="party_b_email",
            label="Party B Email",
            type=FieldType.EMAIL,
            required=True,
            group="Party B",
        ),
        # Project
        TemplateField(
            id="project_title",
            label="Project Title",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., "Midnight Sessions" (single)',
            group="Project Details",
        ),
        TemplateField(
            id="project_description",
            label="Project Description",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="Describe the collaboration and each party's contribution...",
            group="Project Details",
        ),
        TemplateField(
            id="effective_date",
            label="Effective Date",
            type=FieldType.DATE,
            required=True,
            group="Project Details",
        ),
        TemplateField(
            id="delivery_date",
            label="Target Delivery Date",
            type=FieldType.DATE,
            required=False,
            group="Project Details",
        ),
        # Financial
        TemplateField(
            id="party_a_split",
            label="Party A Revenue Share (%)",
            type=FieldType.NUMBER,
            required=True,
            default_value=50,
            validation=FieldValidation(min=0, max=100),
            group="Financial Terms",
        ),
        TemplateField(
            id="party_b_split",
            label="Party B Revenue Share (%)",
            type=FieldType.NUMBER,
            required=True,
            default_value=50,
            validation=FieldValidation(min=0, max=100),
            group="Financial Terms",
        ),
        TemplateField(
            id="advance_amount",
            label="Advance Payment",
            type=FieldType.CURRENCY,
            required=False,
            help_text="Any advance paid against future revenue",
            validation=FieldValidation(min=0),
            group="Financial Terms",
        ),
        # Rights
        TemplateField(
            id="territory",
            label="Territory",
            type=FieldType.SELECT,
            required=True,
            default_value="worldwide",
            options=TERRITORY_OPTIONS,
            group="Rights",
        ),
    ],
    optional_clauses=[
        OptionalClause(
            id="exclusivity",
            name="Exclusivity",
            description="Parties may not release competing collaborations for a period",
            default_enabled=False,
            fields=[
                TemplateField(
                    id="exclusivity_period",
                    label="Exclusivity Period (months)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=6,
                    validation=FieldValidation(min=1, max=24),
                ),
            ],
        ),
        OptionalClause(
            id="credit_requirements",
            name="Credit Requirements",
            description="How each party must be credited on releases",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="party_a_credit",
                    label="Party A Credit",
                    type=FieldType.TEXT,
                    required=True,
                    placeholder='e.g., "J. Melody"',
                ),
                TemplateField(
                    id="party_b_credit",
                    label="Party B Credit",
                    type=FieldType.TEXT,
                    required=True,
                    placeholder='e.g., "feat. DJ Thunder"',
                ),
            ],
        ),
        OptionalClause(
            id="termination",
            name="Termination",
            description="Terms for ending the collaboration early",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="notice_period",
                    label="Notice Period (days)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=30,
                    validation=FieldValidation(min=7, max=90),
                ),
            ],
        ),
    ],
    content=TemplateContent(
        title="ARTIST COLLABORATION AGREEMENT",
        sections=[
            TemplateSection(
                id="parties",
                heading="1. PARTIES",
                content="""This Artist Collaboration Agreement ("Agreement") is entered into as of {{effective_date}} by and between:

{{party_a_name}} ("Party A")
Address: {{party_a_address}}
Email: {{party_a_email}}

AND

{{party_b_name}} ("Party B")
Address: {{party_b_address}}
Email: {{party_b_email}}

(each a "Party" and together the "Parties").""",
            ),
            TemplateSection(
                id="project",
                heading="2. PROJECT",
                content="""The Parties agree to collaborate on the following project (the "Project"):

Title: {{project_title}}

Description:
{{project_description}}

The Parties shall use reasonable efforts to complete and deliver the Project by {{delivery_date}}.""",
            ),
            TemplateSection(
                id="revenue",
                heading="3. REVENUE SHARING",
                content="""All net revenue arising from the exploitation of the Project, including streaming, downloads, physical sales, synchronisation and performance income, shall be divided as follows:

Party A: {{party_a_split}}%
Party B: {{party_b_split}}%

An advance of {{advance_amount}} shall be recoupable from Party B's share before any revenue is distributed.

Each Party shall account to the other within 60 days of the end of each calendar half-year.""",
            ),
            TemplateSection(
                id="rights",
                heading="4. RIGHTS AND OWNERSHIP",
                content="""The master recording and underlying composition of the Project shall be jointly owned by the Parties in the same proportions as the revenue shares set out above.

Territory: {{territory}}

Neither Party may license, sell or otherwise exploit the Project in a manner that prejudices the other Party's share without prior written consent.""",
            ),
            TemplateSection(
                id="exclusivity_section",
                heading="5. EXCLUSIVITY",
                content="""For a period of {{exclusivity_period}} months from the release of the Project, neither Party shall release a competing collaboration with a third party that uses substantially similar material.

This restriction does not apply to either Party's solo work.""",
                is_optional=True,
                clause_id="exclusivity",
            ),
            TemplateSection(
                id="credits_section",
                heading="6. CREDITS",
                content="""The Parties shall be credited on all releases, metadata and promotional materials as follows:

Party A: {{party_a_credit}}
Party B: {{party_b_credit}}

Inadvertent failure to credit shall not be a breach, provided it is corrected on future releases once notified.""",
                is_optional=True,
                clause_id="credit_requirements",
            ),
            TemplateSection(
                id="termination_section",
                heading="7. TERMINATION",
                content="""Either Party may terminate this Agreement by giving {{notice_period}} days written notice to the other Party.

Termination shall not affect the revenue shares, credits or ownership of any work completed before the termination date.""",
                is_optional=True,
                clause_id="termination",
            ),
            TemplateSection(
                id="general",
                heading="8. GENERAL PROVISIONS",
                content="""Entire Agreement: This Agreement constitutes the entire understanding between the Parties.

Amendments: This Agreement may only be amended in writing signed by both Parties.

Governing Law: This Agreement shall be governed by the laws of England and Wales.

Severability: If any provision is found unenforceable, the remaining provisions shall continue in effect.""",
            ),
            TemplateSection(
                id="signatures",
                heading="9. SIGNATURES",
                content="""IN WITNESS WHEREOF, the Parties have executed this Agreement as of the date first written above.


_____________________________
{{party_a_name}} (Party A)
Date: _______________


_____________________________
{{party_b_name}} (Party B)
Date: _______________""",
            ),
        ],
    ),
)

ARTIST_AGREEMENT_SAMPLE_DATA = TemplateFormData(
    fields={
        "party_a_name": 'Jane Smith p/k/a "J. Melody"',
        "party_a_address": "12 Abbey Road, London NW8 9AY",
        "party_a_email": "jane@example.com",
        "party_b_name": 'John Doe p/k/a "DJ Thunder"',
        "party_b_address": "48 Canal Street, Manchester M1 3WD",
        "party_b_email": "john@example.com",
        "project_title": "Midnight Sessions",
        "project_description": "A four-track EP blending acoustic songwriting with electronic production.",
        "effective_date": date(2025, 1, 15),
        "delivery_date": date(2025, 4, 30),
        "party_a_split": 50,
        "party_b_split": 50,
        "advance_amount": 2500,
        "territory": "worldwide",
        "party_a_credit": "J. Melody",
        "party_b_credit": "feat. DJ Thunder",
        "notice_period": 30,
    },
    enabled_clauses=["credit_requirements", "termination"],
)
