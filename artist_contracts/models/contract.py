"""Draft and generated contract models"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field

from artist_contracts.models.template import RenderedSection, TemplateFormData


def _new_id() -> str:
    return str(uuid4())


class ContractDraft(BaseModel):
    """Server-side form state for one template fill-in session.

    ``version`` increases on every save; writers pass the version they read
    to detect concurrent edits.
    """
    id: str = Field(default_factory=_new_id)
    template_id: str
    form_data: TemplateFormData = Field(default_factory=TemplateFormData)
    version: int = 1
    created_at: datetime = Field(default_factory=datetime.now)
    last_saved: datetime = Field(default_factory=datetime.now)


class ContractPreview(BaseModel):
    """A rendered, unpersisted contract"""
    template_id: str
    title: str
    sections: list[RenderedSection] = []
    html: str
    text: str
    missing_variables: list[str] = []


class GeneratedContract(BaseModel):
    """A contract created from a template"""
    id: str = Field(default_factory=_new_id)
    template_id: str
    title: str
    html: str
    text: str
    template_data: TemplateFormData
    draft_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
