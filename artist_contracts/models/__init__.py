"""Data models"""

from artist_contracts.models.template import (
    FieldType,
    TemplateCategory,
    SelectOption,
    FieldValidation,
    TemplateField,
    OptionalClause,
    TemplateSection,
    TemplateContent,
    TemplateStructure,
    TemplateDefinition,
    ContractTemplate,
    TemplateFormData,
    RenderedSection,
    RenderedDocument,
    FormValidationResult,
    StructureValidationResult,
)
from artist_contracts.models.contract import (
    ContractDraft,
    ContractPreview,
    GeneratedContract,
)

__all__ = [
    "FieldType",
    "TemplateCategory",
    "SelectOption",
    "FieldValidation",
    "TemplateField",
    "OptionalClause",
    "TemplateSection",
    "TemplateContent",
    "TemplateStructure",
    "TemplateDefinition",
    "ContractTemplate",
    "TemplateFormData",
    "RenderedSection",
    "RenderedDocument",
    "FormValidationResult",
    "StructureValidationResult",
    "ContractDraft",
    "ContractPreview",
    "GeneratedContract",
]
