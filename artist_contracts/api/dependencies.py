"""Shared request dependencies"""

from artist_contracts.db import DatabaseInterface, get_database


def get_db() -> DatabaseInterface:
    """Database for the current request; overridable in tests"""
    return get_database()
