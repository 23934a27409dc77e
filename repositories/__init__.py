"""
Repository layer for database access.

All SQL and persistence logic lives here.
"""
from repositories.base import Database
from repositories.record_store import RecordStore

__all__ = [
    "Database",
    "RecordStore",
]
