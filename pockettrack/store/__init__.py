"""Database store layer - provides persistence for the application.

This module re-exports all public database functions for easy importing.
"""

from pockettrack.store.queries import (
    apply_save_plans,
    clear_snapshots,
    count_snapshots,
    delete_snapshot,
    get_all_snapshots,
    get_snapshot,
    insert_snapshot,
    insert_snapshots,
    update_snapshot,
)
from pockettrack.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "apply_save_plans",
    "clear_snapshots",
    "count_snapshots",
    "delete_snapshot",
    "get_all_snapshots",
    "get_snapshot",
    "insert_snapshot",
    "insert_snapshots",
    "update_snapshot",
]
