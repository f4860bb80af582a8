"""SQLite implementation of DatabaseInterface"""

import logging
import sqlite3
from typing import List, Optional

from artist_contracts.db.base import DatabaseInterface
from artist_contracts.db import sqlite as sqlite_ops
from artist_contracts.models import ContractDraft, ContractTemplate, GeneratedContract
from artist_contracts.utils.config import get_settings

logger = logging.getLogger(__name__)


class SQLiteClient(DatabaseInterface):
    """SQLite implementation of DatabaseInterface.
    Wraps sqlite.py functions and converts rows to models."""

    def init_db(self) -> None:
        sqlite_ops.init_db()

    def get_template(self, template_id: str) -> Optional[ContractTemplate]:
        row = sqlite_ops.get_template(template_id)
        return ContractTemplate.model_validate(row) if row else None

    def get_template_by_name(self, name: str) -> Optional[ContractTemplate]:
        row = sqlite_ops.get_template_by_name(name)
        return ContractTemplate.model_validate(row) if row else None

    def list_templates(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        active_only: bool = True,
    ) -> List[ContractTemplate]:
        rows = sqlite_ops.list_templates(category=category, search=search, active_only=active_only)
        return [ContractTemplate.model_validate(row) for row in rows]

    def put_template(self, template: ContractTemplate) -> str:
        return sqlite_ops.insert_template(template.model_dump(mode="json"))

    def get_draft(self, draft_id: str) -> Optional[ContractDraft]:
        row = sqlite_ops.get_draft(draft_id)
        return ContractDraft.model_validate(row) if row else None

    def put_draft(self, draft: ContractDraft) -> str:
        return sqlite_ops.insert_draft(draft.model_dump(mode="json"))

    def delete_draft(self, draft_id: str) -> bool:
        return sqlite_ops.delete_draft(draft_id)

    def get_contract(self, contract_id: str) -> Optional[GeneratedContract]:
        row = sqlite_ops.get_contract(contract_id)
        return GeneratedContract.model_validate(row) if row else None

    def put_contract(self, contract: GeneratedContract) -> str:
        return sqlite_ops.insert_contract(contract.model_dump(mode="json"))

    def get_status(self) -> dict:
        settings = get_settings()
        try:
            return {
                "mode": "sqlite",
                "path": settings.database_path,
                "templates": sqlite_ops.count_rows("contract_templates"),
                "drafts": sqlite_ops.count_rows("contract_drafts"),
                "contracts": sqlite_ops.count_rows("contracts"),
                "status": "connected",
            }
        except sqlite3.Error as e:
            logger.warning(f"SQLite status check failed: {e}")
            return {
                "mode": "sqlite",
                "path": settings.database_path,
                "status": f"error: {e}",
            }


def get_database() -> DatabaseInterface:
    """Factory: returns the configured database implementation."""
    return SQLiteClient()
