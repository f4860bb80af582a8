"""Contract template models"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Placeholder identifiers: {{party_a_name}}
IDENTIFIER_PATTERN = r"^[A-Za-z0-9_]+$"


def _reject_bool(value: Any) -> Any:
    # Lax unions would read true/false as 1/0
    if isinstance(value, bool):
        raise ValueError("boolean values are not accepted")
    return value


FieldValue = Annotated[
    Optional[Union[str, int, float, Decimal, datetime, date]],
    BeforeValidator(_reject_bool),
]


class FieldType(str, Enum):
    """Input types supported in template forms"""
    TEXT = "text"
    TEXTAREA = "textarea"
    DATE = "date"
    NUMBER = "number"
    CURRENCY = "currency"
    SELECT = "select"
    EMAIL = "email"


TEXT_LIKE_TYPES = {FieldType.TEXT, FieldType.TEXTAREA, FieldType.EMAIL, FieldType.SELECT}
NUMERIC_TYPES = {FieldType.NUMBER, FieldType.CURRENCY}


class TemplateCategory(str, Enum):
    """Template gallery categories"""
    ARTIST = "artist"
    LICENSING = "licensing"
    TOURING = "touring"
    PRODUCTION = "production"
    BUSINESS = "business"


class SelectOption(BaseModel):
    """An option of a select field"""
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FieldValidation(BaseModel):
    """Declarative validation rules for a field"""
    model_config = ConfigDict(frozen=True)

    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    pattern_message: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None


class TemplateField(BaseModel):
    """A form input; its id is the variable name referenced as {{id}}"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., pattern=IDENTIFIER_PATTERN)
    label: str
    type: FieldType
    required: bool = False
    default_value: Optional[Union[str, int, float]] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = None
    options: list[SelectOption] = []
    validation: Optional[FieldValidation] = None
    group: Optional[str] = None  # form layout only

    @model_validator(mode="after")
    def _check_options(self) -> "TemplateField":
        if self.type == FieldType.SELECT and not self.options:
            raise ValueError(f"Select field '{self.id}' must define options")
        if self.type != FieldType.SELECT and self.options:
            raise ValueError(f"Only select fields take options (field '{self.id}')")
        return self


class OptionalClause(BaseModel):
    """A togglable contract provision with its own extra fields"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    default_enabled: bool = False
    fields: list[TemplateField] = []


class TemplateSection(BaseModel):
    """One document block; heading and content may hold {{var}} placeholders"""
    model_config = ConfigDict(frozen=True)

    id: str
    heading: str
    content: str
    is_optional: bool = False
    clause_id: Optional[str] = None  # OptionalClause.id gating this section


class TemplateContent(BaseModel):
    """Document title plus ordered sections"""
    model_config = ConfigDict(frozen=True)

    title: str = ""
    sections: list[TemplateSection] = []


class TemplateStructure(BaseModel):
    """The parts of a template the engine reads.

    Partial shapes are allowed: validation only needs ``fields`` and
    ``optional_clauses``, rendering only ``content`` and ``optional_clauses``.
    """
    model_config = ConfigDict(frozen=True)

    fields: list[TemplateField] = []
    optional_clauses: list[OptionalClause] = []
    content: TemplateContent = TemplateContent()

    def all_fields(self) -> list[TemplateField]:
        """Base fields followed by every clause's fields"""
        result = list(self.fields)
        for clause in self.optional_clauses:
            result.extend(clause.fields)
        return result

    def field_types(self) -> dict[str, FieldType]:
        return {field.id: field.type for field in self.all_fields()}

    def get_clause(self, clause_id: str) -> Optional[OptionalClause]:
        for clause in self.optional_clauses:
            if clause.id == clause_id:
                return clause
        return None


class TemplateDefinition(TemplateStructure):
    """A static, versioned contract archetype"""
    name: str
    description: str = ""
    category: TemplateCategory
    version: int = 1
    sort_order: int = 0
    is_active: bool = True


class ContractTemplate(TemplateDefinition):
    """A template definition as stored"""
    id: str
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class TemplateFormData(BaseModel):
    """User-submitted field values and the set of enabled clauses"""
    fields: dict[str, FieldValue] = {}
    enabled_clauses: list[str] = []

    @field_validator("enabled_clauses")
    @classmethod
    def _dedupe_clauses(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def is_enabled(self, clause_id: Optional[str]) -> bool:
        return clause_id is not None and clause_id in self.enabled_clauses


class RenderedSection(BaseModel):
    """A section after clause filtering and substitution"""
    heading: str
    content: str


class RenderedDocument(BaseModel):
    """Final title and ordered sections, ready for HTML/text output"""
    title: str
    sections: list[RenderedSection] = []


class FormValidationResult(BaseModel):
    """Per-field errors for submitted form data"""
    valid: bool
    errors: dict[str, str] = {}


class StructureValidationResult(BaseModel):
    """Authoring-time problems found in a template definition"""
    valid: bool
    errors: list[str] = []
