"""Sample Clearance Agreement

For clearing samples: usage rights, master royalties, publishing share and
credit requirements.
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

SAMPLE_AGREEMENT = TemplateDefinition(
    name="Sample Clearance Agreement",
    description=(
        "For clearing samples. Covers sample usage rights, royalty arrangements, "
        "and credit requirements for masters and publishing."
    ),
    category=TemplateCategory.PRODUCTION,
    is_active=True,
    sort_order=4,
    version=1,
    fields=[
        # Sample owner
        TemplateField(
            id="owner_name",
            label="Sample Owner Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Original Artist LLC",
            group="Sample Owner",
        ),
        TemplateField(
            id="owner_address",
            label="Owner Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Sample Owner",
        ),
        TemplateField(
            id="owner_email",
            label="Owner Email",
            type=FieldType.EMAIL,
            required=True,
            group="Sample Owner",
        ),
        # Sampling party
        TemplateField(
            id="sampler_name",
            label="Sampling Artist Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., New Artist",
            group="Sampling Artist",
        ),
        TemplateField(
            id="sampler_address",
            label="Sampling Artist Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Sampling Artist",
        ),
        TemplateField(
            id="sampler_email",
            label="Sampling Artist Email",
            type=FieldType.EMAIL,
            required=True,
            group="Sampling Artist",
        ),
        # Original work
        TemplateField(
            id="original_title",
            label="Original Work Title",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., "Classic Groove"',
            group="Original Work",
        ),
        TemplateField(
            id="original_artist",
            label="Original Performing Artist",
            type=FieldType.TEXT,
            required=True,
            group="Original Work",
        ),
        TemplateField(
            id="original_writers",
            label="Original Songwriters",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="List all writers with ownership percentages",
            group="Original Work",
        ),
        TemplateField(
            id="sample_description",
            label="Sample Description",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="e.g., 4-bar drum loop from 0:32-0:40",
            help_text="Describe exactly what is being sampled",
            group="Original Work",
        ),
        # New work
        TemplateField(
            id="new_title",
            label="New Work Title",
            type=FieldType.TEXT,
            required=True,
            placeholder='e.g., "Modern Remix"',
            group="New Work",
        ),
        TemplateField(
            id="new_artist",
            label="New Work Artist",
            type=FieldType.TEXT,
            required=True,
            group="New Work",
        ),
        # Rights
        TemplateField(
            id="rights_type",
            label="Rights Covered",
            type=FieldType.SELECT,
            required=True,
            default_value="both",
            options=[
                SelectOption(value="master", label="Master Recording Only"),
                SelectOption(value="publishing", label="Publishing Only"),
                SelectOption(value="both", label="Both Master and Publishing"),
            ],
            group="Rights",
        ),
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
            ],
            group="Rights",
        ),
        # Financial
        TemplateField(
            id="upfront_fee",
            label="Upfront Clearance Fee",
            type=FieldType.CURRENCY,
            required=True,
            group="Financial Terms",
        ),
        TemplateField(
            id="effective_date",
            label="Effective Date",
            type=FieldType.DATE,
            required=True,
            group="Financial Terms",
        ),
    ],
    optional_clauses=[
        OptionalClause(
            id="master_royalty",
            name="Master Royalty",
            description="Ongoing royalty on master recording",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="master_royalty_rate",
                    label="Master Royalty Rate (%)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=3,
                    validation=FieldValidation(min=0, max=50),
                    help_text="Percentage of master recording royalties",
                ),
            ],
        ),
        OptionalClause(
            id="publishing_share",
            name="Publishing Share",
            description="Share of publishing/songwriting",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="publishing_percentage",
                    label="Publishing Ownership (%)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=15,
                    validation=FieldValidation(min=0, max=100),
                    help_text="Percentage of new song publishing credited to original writers",
                ),
            ],
        ),
        OptionalClause(
            id="credit",
            name="Credit Requirements",
            description="How original work must be credited",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="credit_text",
                    label="Required Credit",
                    type=FieldType.TEXT,
                    required=True,
                    placeholder='e.g., "Contains a sample of Classic Groove by Original Artist"',
                ),
            ],
        ),
        OptionalClause(
            id="restrictions",
            name="Usage Restrictions",
            description="Restrictions on how sample may be used",
            default_enabled=False,
            fields=[
                TemplateField(
                    id="restriction_details",
                    label="Restriction Details",
                    type=FieldType.TEXTAREA,
                    required=True,
                    placeholder="e.g., Not for use in advertising, political campaigns...",
                ),
            ],
        ),
    ],
    content=TemplateContent(
        title="SAMPLE CLEARANCE AGREEMENT",
        sections=[
            TemplateSection(
                id="parties",
                heading="1. PARTIES",
                content="""This Sample Clearance Agreement ("Agreement") is entered into as of {{effective_date}} by and between:

{{owner_name}} ("Owner")
Address: {{owner_address}}
Email: {{owner_email}}

AND

{{sampler_name}} ("Sampler")
Address: {{sampler_address}}
Email: {{sampler_email}}""",
            ),
            TemplateSection(
                id="original_work",
                heading="2. ORIGINAL WORK",
                content="""Owner is the rights holder of the following original work:

Title: {{original_title}}
Performing Artist: {{original_artist}}
Songwriters: {{original_writers}}

The portion being sampled is described as:
{{sample_description}}""",
            ),
            TemplateSection(
                id="new_work",
                heading="3. NEW WORK",
                content="""Sampler intends to use the above sample in the following new work:

Title: {{new_title}}
Artist: {{new_artist}}

Owner hereby grants Sampler the right to incorporate the sample into the New Work.""",
            ),
            TemplateSection(
                id="grant",
                heading="4. GRANT OF RIGHTS",
                content="""Owner grants to Sampler a non-exclusive license to use the sample in the New Work.

Rights Covered: {{rights_type}}
Territory: {{territory}}

This license permits Sampler to reproduce, distribute, and publicly perform the New Work incorporating the sample.""",
            ),
            TemplateSection(
                id="fee",
                heading="5. CLEARANCE FEE",
                content="""In consideration for the rights granted herein, Sampler agrees to pay Owner an upfront clearance fee of {{upfront_fee}}.

This fee is payable upon execution of this Agreement.""",
            ),
            TemplateSection(
                id="master_royalty_section",
                heading="6. MASTER ROYALTY",
                content="""In addition to the upfront fee, Sampler agrees to pay Owner a royalty of {{master_royalty_rate}}% of all net receipts from the exploitation of the master recording of the New Work.

Royalty statements and payments shall be rendered quarterly, within 45 days of each quarter end.""",
                is_optional=True,
                clause_id="master_royalty",
            ),
            TemplateSection(
                id="publishing_section",
                heading="7. PUBLISHING SHARE",
                content="""The original writers shall receive {{publishing_percentage}}% of the publishing/songwriting ownership of the New Work.

This share shall be administered by Owner's designated publishing administrator and shall participate in all income streams from the New Work's composition.""",
                is_optional=True,
                clause_id="publishing_share",
            ),
            TemplateSection(
                id="credit_section",
                heading="8. CREDIT",
                content="""Sampler agrees to include the following credit on all releases and in all metadata:

{{credit_text}}

Failure to include proper credit shall constitute a material breach of this Agreement.""",
                is_optional=True,
                clause_id="credit",
            ),
            TemplateSection(
                id="restrictions_section",
                heading="9. RESTRICTIONS",
                content="""The following restrictions apply to the use of the sample:

{{restriction_details}}

Any use in violation of these restrictions shall require additional clearance and fees.""",
                is_optional=True,
                clause_id="restrictions",
            ),
            TemplateSection(
                id="warranties",
                heading="10. WARRANTIES",
                content="""Owner warrants that:
a) They have full right and authority to grant the rights herein
b) The original work does not infringe any third-party rights
c) They have obtained all necessary consents from co-owners and publishers

Sampler warrants that they will comply with all terms of this Agreement.""",
            ),
            TemplateSection(
                id="general",
                heading="11. GENERAL PROVISIONS",
                content="""Entire Agreement: This Agreement constitutes the entire understanding between the parties.

Amendments: This Agreement may only be amended in writing signed by both parties.

Governing Law: This Agreement shall be governed by the laws of England and Wales.

No Assignment: Sampler may not assign this license without Owner's prior written consent.""",
            ),
            TemplateSection(
                id="signatures",
                heading="12. SIGNATURES",
                content="""IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above.


_____________________________
{{owner_name}} (Owner)
Date: _______________


_____________________________
{{sampler_name}} (Sampler)
Date: _______________""",
            ),
        ],
    ),
)
