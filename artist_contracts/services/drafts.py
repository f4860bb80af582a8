"""Server-side form drafts with optimistic versioning"""

import logging
from datetime import datetime
from typing import Any, Optional

from artist_contracts.db.base import DatabaseInterface
from artist_contracts.models import ContractDraft, ContractTemplate, TemplateFormData
from artist_contracts.services.exceptions import (
    DraftConflictError,
    DraftNotFoundError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


def default_form_data(template: ContractTemplate) -> TemplateFormData:
    """Initial form state: declared default values and default-on clauses"""
    fields = {
        field.id: field.default_value
        for field in template.all_fields()
        if field.default_value is not None
    }
    enabled = [clause.id for clause in template.optional_clauses if clause.default_enabled]
    return TemplateFormData(fields=fields, enabled_clauses=enabled)


class DraftService:
    """Create and edit contract drafts.

    Every save bumps ``version``. Writers may pass ``expected_version`` (the
    version they last read); a mismatch raises DraftConflictError instead of
    overwriting the newer save.
    """

    def __init__(self, db: DatabaseInterface):
        self.db = db

    def _template(self, template_id: str) -> ContractTemplate:
        template = self.db.get_template(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)
        return template

    def get(self, draft_id: str) -> ContractDraft:
        draft = self.db.get_draft(draft_id)
        if draft is None:
            raise DraftNotFoundError(draft_id)
        return draft

    def start(self, template_id: str) -> ContractDraft:
        template = self._template(template_id)
        draft = ContractDraft(template_id=template.id, form_data=default_form_data(template))
        self.db.put_draft(draft)
        logger.info(f"Started draft {draft.id} for template {template.name}")
        return draft

    def _save(
        self,
        draft: ContractDraft,
        form_data: TemplateFormData,
        expected_version: Optional[int],
    ) -> ContractDraft:
        if expected_version is not None and expected_version != draft.version:
            logger.warning(
                f"Draft {draft.id} conflict: expected v{expected_version}, found v{draft.version}"
            )
            raise DraftConflictError(draft.id, expected_version, draft.version)

        saved = draft.model_copy(update={
            "form_data": form_data,
            "version": draft.version + 1,
            "last_saved": datetime.now(),
        })
        self.db.put_draft(saved)
        return saved

    def update_fields(
        self,
        draft_id: str,
        fields: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> ContractDraft:
        """Set several field values in one save; None clears a field.

        Every field id is checked before anything is written, so an unknown
        id leaves the draft untouched.
        """
        draft = self.get(draft_id)
        template = self._template(draft.template_id)
        known = template.field_types()
        unknown = [field_id for field_id in fields if field_id not in known]
        if unknown:
            raise ValueError(f"Unknown field: {', '.join(unknown)}")

        merged = dict(draft.form_data.fields)
        for field_id, value in fields.items():
            if value is None:
                merged.pop(field_id, None)
            else:
                merged[field_id] = value
        form_data = TemplateFormData(fields=merged, enabled_clauses=draft.form_data.enabled_clauses)
        return self._save(draft, form_data, expected_version)

    def update_field(
        self,
        draft_id: str,
        field_id: str,
        value: Any,
        expected_version: Optional[int] = None,
    ) -> ContractDraft:
        """Set one field value; None clears it"""
        return self.update_fields(draft_id, {field_id: value}, expected_version)

    def toggle_clause(
        self,
        draft_id: str,
        clause_id: str,
        expected_version: Optional[int] = None,
    ) -> ContractDraft:
        """Flip a clause on or off; field values are kept either way"""
        draft = self.get(draft_id)
        template = self._template(draft.template_id)
        if template.get_clause(clause_id) is None:
            raise ValueError(f"Unknown clause: {clause_id}")

        enabled = list(draft.form_data.enabled_clauses)
        if clause_id in enabled:
            enabled.remove(clause_id)
        else:
            enabled.append(clause_id)
        form_data = TemplateFormData(fields=draft.form_data.fields, enabled_clauses=enabled)
        return self._save(draft, form_data, expected_version)

    def replace(
        self,
        draft_id: str,
        form_data: TemplateFormData,
        expected_version: Optional[int] = None,
    ) -> ContractDraft:
        draft = self.get(draft_id)
        template = self._template(draft.template_id)
        unknown = [c for c in form_data.enabled_clauses if template.get_clause(c) is None]
        if unknown:
            raise ValueError(f"Unknown clause: {', '.join(unknown)}")
        return self._save(draft, form_data, expected_version)

    def discard(self, draft_id: str) -> None:
        if not self.db.delete_draft(draft_id):
            raise DraftNotFoundError(draft_id)
        logger.info(f"Discarded draft {draft_id}")
