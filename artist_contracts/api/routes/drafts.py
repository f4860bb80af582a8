"""Draft API routes: server-side form state for the contract builder"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from artist_contracts.api.dependencies import get_db
from artist_contracts.api.schemas import (
    ClauseToggleRequest,
    DraftCreateRequest,
    DraftFieldUpdate,
)
from artist_contracts.db import DatabaseInterface
from artist_contracts.models import ContractDraft
from artist_contracts.services.drafts import DraftService
from artist_contracts.services.exceptions import (
    DraftConflictError,
    DraftNotFoundError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/drafts", tags=["drafts"])


@router.post("", response_model=ContractDraft, status_code=201)
def create_draft(request: DraftCreateRequest, db: DatabaseInterface = Depends(get_db)):
    """Start a draft pre-filled with the template's defaults."""
    try:
        return DraftService(db).start(request.template_id)
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{draft_id}", response_model=ContractDraft)
def get_draft(draft_id: str, db: DatabaseInterface = Depends(get_db)):
    try:
        return DraftService(db).get(draft_id)
    except DraftNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{draft_id}", status_code=204)
def delete_draft(draft_id: str, db: DatabaseInterface = Depends(get_db)):
    try:
        DraftService(db).discard(draft_id)
    except DraftNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{draft_id}/fields", response_model=ContractDraft)
def update_fields(
    draft_id: str,
    request: DraftFieldUpdate,
    db: DatabaseInterface = Depends(get_db),
):
    """Set field values in a single save; an unknown field id rejects the whole request."""
    try:
        return DraftService(db).update_fields(draft_id, request.fields, request.expected_version)
    except (DraftNotFoundError, TemplateNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DraftConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/{draft_id}/clauses/{clause_id}/toggle", response_model=ContractDraft)
def toggle_clause(
    draft_id: str,
    clause_id: str,
    request: ClauseToggleRequest = ClauseToggleRequest(),
    db: DatabaseInterface = Depends(get_db),
):
    try:
        return DraftService(db).toggle_clause(draft_id, clause_id, request.expected_version)
    except (DraftNotFoundError, TemplateNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DraftConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
