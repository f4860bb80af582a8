"""Template gallery API routes: browse, inspect, validate and preview"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from artist_contracts.api.dependencies import get_db
from artist_contracts.api.schemas import (
    FormDataRequest,
    RenderRequest,
    TemplateListResponse,
    TemplateSummary,
    VariablesResponse,
)
from artist_contracts.db import DatabaseInterface
from artist_contracts.models import (
    ContractPreview,
    ContractTemplate,
    FormValidationResult,
    TemplateCategory,
)
from artist_contracts.services.exceptions import TemplateNotFoundError
from artist_contracts.services.generator import ContractGenerator
from artist_contracts.services.renderer import extract_variables

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["templates"])


def _summary(template: ContractTemplate) -> TemplateSummary:
    return TemplateSummary(
        id=template.id,
        name=template.name,
        description=template.description,
        category=template.category,
        version=template.version,
        field_count=len(template.fields),
        clause_count=len(template.optional_clauses),
    )


def _get_template(generator: ContractGenerator, template_id: str) -> ContractTemplate:
    try:
        return generator.get_template(template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=TemplateListResponse)
def list_templates(
    category: Optional[TemplateCategory] = None,
    search: Optional[str] = None,
    db: DatabaseInterface = Depends(get_db),
):
    """List active templates, optionally filtered by category or search text."""
    generator = ContractGenerator(db)
    templates = generator.list_templates(
        category=category.value if category else None,
        search=search,
    )
    return TemplateListResponse(templates=[_summary(t) for t in templates])


@router.get("/{template_id}", response_model=ContractTemplate)
def get_template(template_id: str, db: DatabaseInterface = Depends(get_db)):
    return _get_template(ContractGenerator(db), template_id)


@router.get("/{template_id}/variables", response_model=VariablesResponse)
def get_variables(template_id: str, db: DatabaseInterface = Depends(get_db)):
    """Placeholder names used by the template, in document order."""
    template = _get_template(ContractGenerator(db), template_id)
    return VariablesResponse(template_id=template.id, variables=extract_variables(template.content))


@router.post("/{template_id}/validate", response_model=FormValidationResult)
def validate_form(
    template_id: str,
    request: FormDataRequest,
    db: DatabaseInterface = Depends(get_db),
):
    try:
        return ContractGenerator(db).validate(template_id, request.form_data)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{template_id}/render", response_model=ContractPreview)
def render_preview(
    template_id: str,
    request: RenderRequest,
    db: DatabaseInterface = Depends(get_db),
):
    """Render a preview. Incomplete data is allowed; see missing_variables."""
    try:
        return ContractGenerator(db).preview(
            template_id, request.form_data, include_styles=request.include_styles
        )
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
