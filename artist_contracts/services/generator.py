"""Contract generation service: preview and create contracts from stored templates"""

import logging
from typing import Optional

from artist_contracts.db.base import DatabaseInterface
from artist_contracts.models import (
    ContractPreview,
    ContractTemplate,
    FormValidationResult,
    GeneratedContract,
    TemplateFormData,
)
from artist_contracts.services.exceptions import (
    ContractNotFoundError,
    FormValidationError,
    TemplateNotFoundError,
)
from artist_contracts.services.output import generate_html, generate_text
from artist_contracts.services.renderer import find_unresolved, render_template_content
from artist_contracts.services.validation import validate_form_data

logger = logging.getLogger(__name__)


class ContractGenerator:
    """Service for rendering contracts from templates"""

    def __init__(self, db: DatabaseInterface):
        self.db = db

    def list_templates(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[ContractTemplate]:
        """List active templates in gallery order"""
        return self.db.list_templates(category=category, search=search)

    def get_template(self, template_id: str) -> ContractTemplate:
        template = self.db.get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def find_template(self, key: str) -> ContractTemplate:
        """Resolve a template by id, or by name ignoring case"""
        template = self.db.get_template(key)
        if template is not None:
            return template
        for candidate in self.db.list_templates(active_only=False):
            if candidate.name.lower() == key.lower():
                return candidate
        raise TemplateNotFoundError(key)

    def validate(self, template_id: str, form_data: TemplateFormData) -> FormValidationResult:
        return validate_form_data(self.get_template(template_id), form_data)

    def preview(
        self,
        template_id: str,
        form_data: TemplateFormData,
        include_styles: bool = True,
    ) -> ContractPreview:
        """Render without validating; unfilled placeholders are reported"""
        template = self.get_template(template_id)
        document = render_template_content(template, form_data)
        text = generate_text(document.title, document.sections)

        return ContractPreview(
            template_id=template.id,
            title=document.title,
            sections=document.sections,
            html=generate_html(document.title, document.sections, include_styles=include_styles),
            text=text,
            missing_variables=find_unresolved(text),
        )

    def create_from_template(
        self,
        template_id: str,
        form_data: TemplateFormData,
        title: Optional[str] = None,
        draft_id: Optional[str] = None,
    ) -> GeneratedContract:
        """Validate, render and persist a contract.

        Raises FormValidationError when the form data is invalid. A draft the
        contract was created from is discarded afterwards.
        """
        template = self.get_template(template_id)
        result = validate_form_data(template, form_data)
        if not result.valid:
            raise FormValidationError(result.errors)

        document = render_template_content(template, form_data)
        contract = GeneratedContract(
            template_id=template.id,
            title=title or document.title,
            html=generate_html(document.title, document.sections),
            text=generate_text(document.title, document.sections),
            template_data=form_data,
            draft_id=draft_id,
        )
        self.db.put_contract(contract)
        logger.info(f"Generated contract {contract.id} from template {template.name}")

        if draft_id and self.db.delete_draft(draft_id):
            logger.info(f"Discarded draft {draft_id} after contract creation")
        return contract

    def get_contract(self, contract_id: str) -> GeneratedContract:
        contract = self.db.get_contract(contract_id)
        if contract is None:
            raise ContractNotFoundError(contract_id)
        return contract
