"""Work-for-Hire Agreement

For commissioned creative work where ownership is assigned to the client.
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

WORK_FOR_HIRE_AGREEMENT = TemplateDefinition(
    name="Work-for-Hire Agreement",
    description=(
        "For commissioned creative work. Covers project scope, deliverables, payment, "
        "IP assignment, and revision terms."
    ),
    category=TemplateCategory.PRODUCTION,
    is_active=True,
    sort_order=5,
    version=1,
    fields=[
        # Client
        TemplateField(
            id="client_name",
            label="Client Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Music Production Ltd",
            group="Client Details",
        ),
        TemplateField(
            id="client_address",
            label="Client Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Client Details",
        ),
        TemplateField(
            id="client_email",
            label="Client Email",
            type=FieldType.EMAIL,
            required=True,
            group="Client Details",
        ),
        # Contractor
        TemplateField(
            id="contractor_name",
            label="Contractor Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Jane Smith (Producer)",
            group="Contractor Details",
        ),
        TemplateField(
            id="contractor_address",
            label="Contractor Address",
            type=FieldType.TEXTAREA,
            required=True,
            group="Contractor Details",
        ),
        TemplateField(
            id="contractor_email",
            label="Contractor Email",
            type=FieldType.EMAIL,
            required=True,
            group="Contractor Details",
        ),
        # Project
        TemplateField(
            id="project_title",
            label="Project Title",
            type=FieldType.TEXT,
            required=True,
            placeholder="e.g., Album Production",
            group="Project Details",
        ),
        TemplateField(
            id="project_description",
            label="Project Description",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="Describe the work to be performed...",
            group="Project Details",
        ),
        TemplateField(
            id="deliverables",
            label="Deliverables",
            type=FieldType.TEXTAREA,
            required=True,
            placeholder="List all deliverables (e.g., 10 mixed and mastered tracks, project files...)",
            group="Project Details",
        ),
        # Timeline
        TemplateField(
            id="start_date",
            label="Project Start Date",
            type=FieldType.DATE,
            required=True,
            group="Timeline",
        ),
        TemplateField(
            id="deadline",
            label="Delivery Deadline",
            type=FieldType.DATE,
            required=True,
            group="Timeline",
        ),
        # Payment
        TemplateField(
            id="total_fee",
            label="Total Project Fee",
            type=FieldType.CURRENCY,
            required=True,
            group="Payment",
        ),
        TemplateField(
            id="payment_schedule",
            label="Payment Schedule",
            type=FieldType.SELECT,
            required=True,
            default_value="milestone",
            options=[
                SelectOption(value="upfront", label="100% upfront"),
                SelectOption(value="half", label="50% upfront, 50% on delivery"),
                SelectOption(value="thirds", label="1/3 upfront, 1/3 midpoint, 1/3 on delivery"),
                SelectOption(value="milestone", label="Milestone-based"),
                SelectOption(value="completion", label="100% on completion"),
            ],
            group="Payment",
        ),
    ],
    optional_clauses=[
        OptionalClause(
            id="deposit",
            name="Deposit Terms",
            description="Upfront deposit requirements",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="deposit_amount",
                    label="Deposit Amount",
                    type=FieldType.CURRENCY,
                    required=True,
                ),
                TemplateField(
                    id="deposit_refundable",
                    label="Deposit Refundable?",
                    type=FieldType.SELECT,
                    required=True,
                    options=[
                        SelectOption(value="yes", label="Yes, fully refundable"),
                        SelectOption(value="partial", label="Partially refundable"),
                        SelectOption(value="no", label="Non-refundable"),
                    ],
                ),
            ],
        ),
        OptionalClause(
            id="revisions",
            name="Revision Terms",
            description="Number of revisions included and additional revision fees",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="included_revisions",
                    label="Revisions Included",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=2,
                    validation=FieldValidation(min=0, max=10),
                ),
                TemplateField(
                    id="revision_fee",
                    label="Additional Revision Fee",
                    type=FieldType.CURRENCY,
                    required=True,
                    help_text="Fee per additional revision beyond included amount",
                ),
            ],
        ),
        OptionalClause(
            id="credit",
            name="Credit/Attribution",
            description="Whether contractor receives credit",
            default_enabled=False,
            fields=[
                TemplateField(
                    id="credit_text",
                    label="Credit Text",
                    type=FieldType.TEXT,
                    required=True,
                    placeholder='e.g., "Produced by Jane Smith"',
                ),
            ],
        ),
        OptionalClause(
            id="kill_fee",
            name="Kill Fee",
            description="Compensation if project is cancelled",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="kill_fee_percentage",
                    label="Kill Fee (%)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=50,
                    validation=FieldValidation(min=0, max=100),
                    help_text="Percentage of total fee due if project is cancelled",
                ),
            ],
        ),
        OptionalClause(
            id="confidentiality",
            name="Confidentiality",
            description="Non-disclosure obligations",
            default_enabled=True,
            fields=[
                TemplateField(
                    id="confidentiality_period",
                    label="Confidentiality Period (months)",
                    type=FieldType.NUMBER,
                    required=True,
                    default_value=24,
                    validation=FieldValidation(min=6, max=60),
                ),
            ],
        ),
    ],
    content=TemplateContent(
        title="WORK-FOR-HIRE AGREEMENT",
        sections=[
            TemplateSection(
                id="parties",
                heading="1. PARTIES",
                content="""This Work-for-Hire Agreement ("Agreement") is entered into as of {{start_date}} by and between:

{{client_name}} ("Client")
Address: {{client_address}}
Email: {{client_email}}

AND

{{contractor_name}} ("Contractor")
Address: {{contractor_address}}
Email: {{contractor_email}}""",
            ),
            TemplateSection(
                id="engagement",
                heading="2. ENGAGEMENT",
                content="""Client hereby engages Contractor to perform the following work:

Project Title: {{project_title}}

Project Description:
{{project_description}}

This engagement begins on {{start_date}} and all deliverables must be completed by {{deadline}}.""",
            ),
            TemplateSection(
                id="deliverables",
                heading="3. DELIVERABLES",
                content="""Contractor agrees to deliver the following:

{{deliverables}}

All deliverables shall be provided in industry-standard formats as agreed between the parties.""",
            ),
            TemplateSection(
                id="payment",
                heading="4. PAYMENT",
                content="""Client agrees to pay Contractor a total fee of {{total_fee}} for the work described herein.

Payment Schedule: {{payment_schedule}}

All payments shall be made in GBP via bank transfer within 14 days of invoice.""",
            ),
            TemplateSection(
                id="deposit_section",
                heading="5. DEPOSIT",
                content="""A deposit of {{deposit_amount}} is required before work commences.

Refund Policy: {{deposit_refundable}}

Work will not begin until the deposit is received.""",
                is_optional=True,
                clause_id="deposit",
            ),
            TemplateSection(
                id="revisions_section",
                heading="6. REVISIONS",
                content="""This Agreement includes {{included_revisions}} round(s) of revisions.

Additional revisions beyond those included shall be charged at {{revision_fee}} per revision round.

Revision requests must be submitted in writing within 7 days of receiving deliverables.""",
                is_optional=True,
                clause_id="revisions",
            ),
            TemplateSection(
                id="ip_assignment",
                heading="7. INTELLECTUAL PROPERTY",
                content="""All work created under this Agreement shall be considered "work made for hire" under applicable copyright law.

Client shall own all rights, title, and interest in the deliverables, including all copyrights, from the moment of creation.

Contractor hereby assigns to Client any and all rights that may not automatically vest in Client under work-for-hire doctrine.

Contractor retains no rights to use, license, or exploit the deliverables without Client's prior written consent.""",
            ),
            TemplateSection(
                id="credit_section",
                heading="8. CREDIT",
                content="""Client agrees to credit Contractor as follows where reasonably practicable:

{{credit_text}}

Such credit shall be at Client's sole discretion and failure to provide credit shall not constitute a breach of this Agreement.""",
                is_optional=True,
                clause_id="credit",
            ),
            TemplateSection(
                id="kill_fee_section",
                heading="9. CANCELLATION AND KILL FEE",
                content="""If Client cancels the project after work has commenced, Client shall pay Contractor a kill fee equal to {{kill_fee_percentage}}% of the total fee, less any amounts already paid.

The kill fee compensates Contractor for time reserved and work performed.""",
                is_optional=True,
                clause_id="kill_fee",
            ),
            TemplateSection(
                id="confidentiality_section",
                heading="10. CONFIDENTIALITY",
                content="""Contractor agrees to keep all project information confidential for a period of {{confidentiality_period}} months from the completion or termination of this Agreement.

This includes all materials, creative direction, and business information disclosed by Client.""",
                is_optional=True,
                clause_id="confidentiality",
            ),
            TemplateSection(
                id="warranties",
                heading="11. WARRANTIES",
                content="""Contractor warrants that:
a) All work will be original and will not infringe any third-party rights
b) Contractor has the skills and experience to perform the work
c) Work will be performed in a professional manner

Client warrants that any materials provided to Contractor do not infringe third-party rights.""",
            ),
            TemplateSection(
                id="general",
                heading="12. GENERAL PROVISIONS",
                content="""Independent Contractor: Contractor is an independent contractor, not an employee.

Entire Agreement: This Agreement constitutes the entire understanding between the parties.

Amendments: This Agreement may only be amended in writing signed by both parties.

Governing Law: This Agreement shall be governed by the laws of England and Wales.""",
            ),
            TemplateSection(
                id="signatures",
                heading="13. SIGNATURES",
                content="""IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first written above.


_____________________________
{{client_name}} (Client)
Date: _______________


_____________________________
{{contractor_name}} (Contractor)
Date: _______________""",
            ),
        ],
    ),
)
