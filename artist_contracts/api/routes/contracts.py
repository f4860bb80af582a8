"""Contract API routes: create contracts from templates and fetch them"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from artist_contracts.api.dependencies import get_db
from artist_contracts.api.schemas import ContractCreateRequest
from artist_contracts.db import DatabaseInterface
from artist_contracts.models import GeneratedContract
from artist_contracts.services.exceptions import (
    ContractNotFoundError,
    FormValidationError,
    TemplateNotFoundError,
)
from artist_contracts.services.generator import ContractGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contracts", tags=["contracts"])


@router.post("/from-template", response_model=GeneratedContract, status_code=201)
def create_from_template(
    request: ContractCreateRequest,
    db: DatabaseInterface = Depends(get_db),
):
    """Validate the form data, render and store the contract."""
    try:
        return ContractGenerator(db).create_from_template(
            request.template_id,
            request.form_data,
            title=request.title,
            draft_id=request.draft_id,
        )
    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except FormValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "Validation failed", "errors": e.errors},
        )


@router.get("/{contract_id}", response_model=GeneratedContract)
def get_contract(contract_id: str, db: DatabaseInterface = Depends(get_db)):
    try:
        return ContractGenerator(db).get_contract(contract_id)
    except ContractNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
