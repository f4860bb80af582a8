"""Database modules"""

from artist_contracts.db.sqlite import init_db, get_connection
from artist_contracts.db.base import DatabaseInterface
from artist_contracts.db.sqlite_client import SQLiteClient, get_database

__all__ = [
    "init_db",
    "get_connection",
    "DatabaseInterface",
    "SQLiteClient",
    "get_database",
]
