"""SQLite database operations"""

import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from artist_contracts.utils.config import get_settings

# Columns holding JSON documents, per table
TEMPLATE_JSON_COLUMNS = ("fields", "optional_clauses", "content")
DRAFT_JSON_COLUMNS = ("form_data",)
CONTRACT_JSON_COLUMNS = ("template_data",)


def get_db_path() -> Path:
    """Get database path from settings"""
    settings = get_settings()
    return Path(settings.database_path)


@contextmanager
def get_connection():
    """Get a database connection as context manager"""
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db():
    """Initialize database with schema"""
    with get_connection() as conn:
        cursor = conn.cursor()

        # Contract templates table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS contract_templates (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                description TEXT,
                category TEXT NOT NULL,
                fields TEXT NOT NULL,
                optional_clauses TEXT NOT NULL,
                content TEXT NOT NULL,
                version INTEGER DEFAULT 1,
                sort_order INTEGER DEFAULT 0,
                is_active INTEGER DEFAULT 1,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_templates_category
            ON contract_templates(category)
        """)

        # Form drafts table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS contract_drafts (
                id TEXT PRIMARY KEY,
                template_id TEXT NOT NULL REFERENCES contract_templates(id),
                form_data TEXT NOT NULL,
                version INTEGER DEFAULT 1,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                last_saved TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Generated contracts table
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS contracts (
                id TEXT PRIMARY KEY,
                template_id TEXT NOT NULL REFERENCES contract_templates(id),
                title TEXT NOT NULL,
                html TEXT NOT NULL,
                text TEXT NOT NULL,
                template_data TEXT NOT NULL,
                draft_id TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_contracts_template
            ON contracts(template_id)
        """)


def _encode(record: dict, json_columns: tuple) -> dict:
    row = dict(record)
    for column in json_columns:
        row[column] = json.dumps(row[column])
    return row


def _decode(row: Optional[sqlite3.Row], json_columns: tuple) -> Optional[dict]:
    if row is None:
        return None
    record = dict(row)
    for column in json_columns:
        record[column] = json.loads(record[column])
    return record


def insert_template(template: dict) -> str:
    """Insert or replace a template"""
    row = _encode(template, TEMPLATE_JSON_COLUMNS)
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            INSERT OR REPLACE INTO contract_templates
            (id, name, description, category, fields, optional_clauses, content,
             version, sort_order, is_active, created_at, updated_at)
            VALUES (:id, :name, :description, :category, :fields, :optional_clauses,
                    :content, :version, :sort_order, :is_active, :created_at, :updated_at)
        """, row)
        return template['id']


def get_template(template_id: str) -> Optional[dict]:
    """Get a template by ID"""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM contract_templates WHERE id = ?", (template_id,))
        return _decode(cursor.fetchone(), TEMPLATE_JSON_COLUMNS)


def get_template_by_name(name: str) -> Optional[dict]:
    """Get a template by name"""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM contract_templates WHERE name = ?", (name,))
        return _decode(cursor.fetchone(), TEMPLATE_JSON_COLUMNS)


def list_templates(
    category: Optional[str] = None,
    search: Optional[str] = None,
    active_only: bool = True,
) -> list[dict]:
    """List templates, optionally filtered by category and name/description search"""
    clauses = []
    params: list = []
    if active_only:
        clauses.append("is_active = 1")
    if category:
        clauses.append("category = ?")
        params.append(category)
    if search:
        clauses.append("(LOWER(name) LIKE ? OR LOWER(description) LIKE ?)")
        pattern = f"%{search.lower()}%"
        params.extend([pattern, pattern])

    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute(
            f"SELECT * FROM contract_templates {where} ORDER BY sort_order, name",
            params,
        )
        return [_decode(row, TEMPLATE_JSON_COLUMNS) for row in cursor.fetchall()]


def insert_draft(draft: dict) -> str:
    """Insert or replace a draft"""
    row = _encode(draft, DRAFT_JSON_COLUMNS)
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            INSERT OR REPLACE INTO contract_drafts
            (id, template_id, form_data, version, created_at, last_saved)
            VALUES (:id, :template_id, :form_data, :version, :created_at, :last_saved)
        """, row)
        return draft['id']


def get_draft(draft_id: str) -> Optional[dict]:
    """Get a draft by ID"""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM contract_drafts WHERE id = ?", (draft_id,))
        return _decode(cursor.fetchone(), DRAFT_JSON_COLUMNS)


def delete_draft(draft_id: str) -> bool:
    """Delete a draft"""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM contract_drafts WHERE id = ?", (draft_id,))
        return cursor.rowcount > 0


def insert_contract(contract: dict) -> str:
    """Insert a generated contract"""
    row = _encode(contract, CONTRACT_JSON_COLUMNS)
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("""
            INSERT INTO contracts
            (id, template_id, title, html, text, template_data, draft_id, created_at)
            VALUES (:id, :template_id, :title, :html, :text, :template_data,
                    :draft_id, :created_at)
        """, row)
        return contract['id']


def get_contract(contract_id: str) -> Optional[dict]:
    """Get a generated contract by ID"""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM contracts WHERE id = ?", (contract_id,))
        return _decode(cursor.fetchone(), CONTRACT_JSON_COLUMNS)


def count_rows(table: str) -> int:
    """Row count of one of the known tables"""
    if table not in ("contract_templates", "contract_drafts", "contracts"):
        raise ValueError(f"Unknown table: {table}")
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute(f"SELECT COUNT(*) FROM {table}")
        return cursor.fetchone()[0]
