"""Abstract database interface (strategy pattern for storage backends)"""

from abc import ABC, abstractmethod
from typing import List, Optional

from artist_contracts.models import ContractDraft, ContractTemplate, GeneratedContract


class DatabaseInterface(ABC):
    """Abstract interface for template, draft and contract storage."""

    @abstractmethod
    def init_db(self) -> None:
        """Initialize database schema (create tables, indexes)."""

    # Templates

    @abstractmethod
    def get_template(self, template_id: str) -> Optional[ContractTemplate]:
        """Get template by ID."""

    @abstractmethod
    def get_template_by_name(self, name: str) -> Optional[ContractTemplate]:
        """Get template by exact name."""

    @abstractmethod
    def list_templates(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        active_only: bool = True,
    ) -> List[ContractTemplate]:
        """List templates ordered by sort_order, then name."""

    @abstractmethod
    def put_template(self, template: ContractTemplate) -> str:
        """Insert or replace a template. Returns template ID."""

    # Drafts

    @abstractmethod
    def get_draft(self, draft_id: str) -> Optional[ContractDraft]:
        """Get draft by ID."""

    @abstractmethod
    def put_draft(self, draft: ContractDraft) -> str:
        """Insert or replace a draft. Returns draft ID."""

    @abstractmethod
    def delete_draft(self, draft_id: str) -> bool:
        """Delete a draft. Returns True if it existed."""

    # Contracts

    @abstractmethod
    def get_contract(self, contract_id: str) -> Optional[GeneratedContract]:
        """Get generated contract by ID."""

    @abstractmethod
    def put_contract(self, contract: GeneratedContract) -> str:
        """Insert a generated contract. Returns contract ID."""

    @abstractmethod
    def get_status(self) -> dict:
        """Get database status info (table counts, connection status)."""
