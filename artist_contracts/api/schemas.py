"""Request/response schemas for the contracts API"""

from typing import Optional

from pydantic import BaseModel, Field

from artist_contracts.models import TemplateCategory, TemplateFormData
from artist_contracts.models.template import FieldValue


class TemplateSummary(BaseModel):
    """A template in the gallery list"""
    id: str
    name: str
    description: str = ""
    category: TemplateCategory
    version: int
    field_count: int = 0
    clause_count: int = 0


class TemplateListResponse(BaseModel):
    templates: list[TemplateSummary] = []


class VariablesResponse(BaseModel):
    template_id: str
    variables: list[str] = []


class FormDataRequest(BaseModel):
    """Form data to validate"""
    form_data: TemplateFormData = Field(default_factory=TemplateFormData)


class RenderRequest(BaseModel):
    """Form data to render as a preview"""
    form_data: TemplateFormData = Field(default_factory=TemplateFormData)
    include_styles: bool = True


class DraftCreateRequest(BaseModel):
    template_id: str


class DraftFieldUpdate(BaseModel):
    """Field values to set on a draft; a null value clears the field"""
    fields: dict[str, FieldValue] = Field(..., min_length=1)
    expected_version: Optional[int] = None


class ClauseToggleRequest(BaseModel):
    expected_version: Optional[int] = None


class ContractCreateRequest(BaseModel):
    """Create a contract from a template and validated form data"""
    template_id: str
    form_data: TemplateFormData
    title: Optional[str] = None
    draft_id: Optional[str] = None
