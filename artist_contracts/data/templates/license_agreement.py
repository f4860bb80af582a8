"""Music License Agreement

For licensing music or content: usage rights, territories and royalties.
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

LICENSE_AGREEMENT = TemplateDefinition(
    name="Music License Agreement",
    description=(
        "For licensing music or content. Covers exclusive/non-exclusive rights, "
        "sync, mechanical, and usage restrictions."
    ),
    category=TemplateCategory.LICENSING,
    is_active=True,
    sort_order=2,
    version=1,
    fields=[
        # Licensor (rights holder)
        TemplateField(
            id="licensor_name",
            label="Licensor Name (Rights Holder)",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Jane Smith Music Ltd",
            group="Licensor Details",
        ),
        TemplateField(
            id="licensor_address",
            label="Licensor Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Licensor Details",
        ),
        TemplateField(
            id="licensor_email",
            label="Licensor Email",
            type=FieldType.EMAIL,
            required=True,
            group="Licensor Details",
        ),
        # Licensee
        TemplateField(
            id="licensee_name",
            label="Licensee Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Production Company Inc",
            group="Licensee Details",
        ),
        TemplateField(
            id="licensee_address",
            label="Licensee Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Licensee Details",
        ),
        TemplateField(
            id="licensee_email",
            label="Licensee Email",
            type=FieldType.EMAIL,
            required=True,
            group="Licensee Details",
        ),
        # Licensed work
        TemplateField(
            id="work_title",
            label="Work Title",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., "Summer Vibes"',
            group="Licensed Work",
        ),
        TemplateField(
            id="work_description",
            label="Work Description",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="Describe the work being licensed...",
            group="Licensed Work",
        ),
        # License terms
        TemplateField(
            id="license_type",
            label="License Type",
            type=FieldType.SELECT,
            required=True,
            default_value="non_exclusive",
            options=[
                SelectOption(value="exclusive", label="Exclusive"),
                SelectOption(value="non_exclusive", label="Non-Exclusive"),
                SelectOption(value="sync", label="Synchronization (Sync)"),
                SelectOption(value="mechanical", label="Mechanical"),
                SelectOption(value="master", label="Master Use"),
            ],
            group="License Terms",
        ),
        TemplateField(
            id="permitted_use",
            label="Permitted Use",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="e.g., Background music in promotional video, streaming platforms...",
            help_text="Describe exactly how the licensee may use the work",
            group="License Terms",
        ),
        # Territory and duration
        TemplateField(
            id="territory",
            label="Territory",
            type=FieldType.SELECT,
            required=True,
            default_value="worldwide",
            options=[
                SelectOption(value="worldwide", label="Worldwide"),
                SelectOption(value="uk", label="United Kingdom only"),
                SelectOption(value="europe", label="Europe"),
                SelectOption(value="north_america", label="North America"),
                SelectOption(value="custom", label="Custom (specify in permitted use)"),
            ],
            group="Territory & Duration",
        ),
        TemplateField(
            id="effective_date",
            label="License Start Date",
            type=FieldType.DATE,
            required=True,
            group="Territory & Duration",
        ),
        TemplateField(
            id="expiry_date",
            label="License End Date",
            type=FieldType.DATE,
            required=False,
            help_text="Leave blank for perpetual license",
            group="Territory & Duration",
        ),
        # Fees
        TemplateField(
            id="license_fee",
            label="License Fee",
            type=FieldType.CURRENCY,
            required=True,
            group="Financial Terms",
        ),
        TemplateField(
            id="payment_terms",
            label="Payment Terms",
            type=FieldType.SELECT,
            required=True,
            default_value="upfront",
            options=[
                SelectOption(value="upfront", label="Full payment upfront"),
                SelectOption(value="installments", label="50% upfront, 50% on delivery"),
                SelectOption(value="net_30", label="Net 30 days"),
                SelectOption(value="net_60", label="Net 60 days"),
            ],
            group="Financial Terms",
        ),
    ],
    optional_clauses=[
        OptionalClause(
            id="royalties",
            name="Ongoing Royalties",
            description="Additional royalty payments based on usage",
            default_enabled=False,
            fields=[
                TemplateField(
                    id="royalty_rate",
                    label="Royalty Rate (%)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=5,
                    validation=FieldValidation(min=0, max=100),
                ),
                TemplateField(
                    id="royalty_basis",
                    label="Royalty Basis",
                    type=FieldType.SELECT,
                    required=True,
                    options=[
                        SelectOption(value="gross", label="Gross Revenue"),
                        SelectOption(value="net", label="Net Revenue"),
                        SelectOption(value="streams", label="Per Stream/Play"),
                    ],
                ),
            ],
        ),
        OptionalClause(
            id="attribution",
            name="Attribution Requirements",
            description="Credit requirements for the licensor",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="attribution_text",
                    label="Required Credit Text",
                    type=FieldType.TEXT,
                    required=True,
                    placeholder='e.g., "Music by Jane Smith"',
                ),
            ],
        ),
        OptionalClause(
            id="restrictions",
            name="Usage Restrictions",
            description="Specific prohibited uses",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="prohibited_uses",
                    label="Prohibited Uses",
                    type=FieldType.TEXTAREA,
                    required=True,
                    placeholder="e.g., Political advertising, adult content...",
                ),
            ],
        ),
    ],
    content=TemplateContent(
        title="MUSIC LICENSE AGREEMENT",
        sections=[
            TemplateSection(
                id="parties",
                heading="1. PARTIES",
                content="""This Music License Agreement ("Agreement") is entered into as of {{effective_date}} by and between:

{{licensor_name}} ("Licensor")
Address: {{licensor_address}}
Email: {{licensor_email}}

AND

{{licensee_name}} ("Licensee")
Address: {{licensee_address}}
Email: {{licensee_email}}""",
            ),
            TemplateSection(
                id="grant",
                heading="2. GRANT OF LICENSE",
                content="""Subject to the terms of this Agreement, Licensor hereby grants to Licensee a {{license_type}} license to use the following work:

Work Title: {{work_title}}
Description: {{work_description}}

The license covers the following territory: {{territory}}

This license is effective from {{effective_date}} and shall remain in effect until {{expiry_date}}.""",
            ),
            TemplateSection(
                id="permitted_use",
                heading="3. PERMITTED USE",
                content="""Licensee may use the Work solely for the following purposes:

{{permitted_use}}

Any use beyond the scope defined above requires prior written consent from the Licensor.""",
            ),
            TemplateSection(
                id="fees",
                heading="4. LICENSE FEE AND PAYMENT",
                content="""In consideration for the rights granted herein, Licensee agrees to pay Licensor a license fee of {{license_fee}}.

Payment Terms: {{payment_terms}}

All payments shall be made in GBP unless otherwise agreed in writing.""",
            ),
            TemplateSection(
                id="royalties_section",
                heading="5. ROYALTIES",
                content="""In addition to the license fee, Licensee shall pay Licensor ongoing royalties at a rate of {{royalty_rate}}% based on {{royalty_basis}}.

Royalty payments shall be made quarterly, within 30 days of each quarter end, accompanied by a statement showing the calculation basis.""",
                is_optional=True,
                clause_id="royalties",
            ),
            TemplateSection(
                id="attribution_section",
                heading="6. ATTRIBUTION",
                content="""Licensee agrees to provide the following credit to Licensor in connection with any use of the Work:

{{attribution_text}}

This credit shall appear in all reasonable opportunities where credits are customarily displayed.""",
                is_optional=True,
                clause_id="attribution",
            ),
            TemplateSection(
                id="restrictions_section",
                heading="7. RESTRICTIONS",
                content="""The following uses of the Work are expressly prohibited:

{{prohibited_uses}}

Any violation of these restrictions shall constitute a material breach of this Agreement.""",
                is_optional=True,
                clause_id="restrictions",
            ),
            TemplateSection(
                id="ownership",
                heading="8. OWNERSHIP",
                content="""Licensor retains all ownership rights in and to the Work, including all copyrights, trademarks, and other intellectual property rights. This Agreement does not transfer any ownership rights to Licensee.

Licensee shall not register any trademarks or copyrights that incorporate the Work without Licensor's prior written consent.""",
            ),
            TemplateSection(
                id="warranties",
                heading="9. WARRANTIES AND INDEMNIFICATION",
                content="""Licensor warrants that:
a) They have the full right and authority to grant this license
b) The Work does not infringe any third-party rights
c) There are no outstanding claims against the Work

Each party agrees to indemnify the other against any claims arising from a breach of their warranties under this Agreement.""",
            ),
            TemplateSection(
                id="termination",
                heading="10. TERMINATION",
                content="""This Agreement may be terminated:
a) By mutual written agreement of the parties
b) By either party upon 30 days written notice if the other party breaches any material term
c) Automatically upon expiration of the license term

Upon termination, Licensee shall cease all use of the Work and destroy any copies in their possession.""",
            ),
            TemplateSection(
                id="general",
                heading="11. GENERAL PROVISIONS",
                content="""Entire Agreement: This Agreement constitutes the entire understanding between the parties.

Amendments: This Agreement may only be amended in writing signed by both parties.

Governing Law: This Agreement shall be governed by the laws of England and Wales.

Severability: If any provision is found unenforceable, the remaining provisions shall continue in effect.""",
            ),
            TemplateSection(
                id="signatures",
                heading="12. SIGNATURES",
                content="""IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above.


_____________________________
{{licensor_name}} (Licensor)
Date: _______________


_____________________________
{{licensee_name}} (Licensee)
Date: _______________""",
            ),
        ],
    ),
)
