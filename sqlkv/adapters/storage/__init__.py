"""
Storage adapters for sqlkv.

This module contains the aiosqlite database handle and the
key-value adapter built on top of it.
"""

from .sqlite_database import SQLiteDatabase, PreparedStatement
from .sqlite_kv import SQLKVAdapter, DEFAULT_TABLE

__all__ = ["SQLiteDatabase", "PreparedStatement", "SQLKVAdapter", "DEFAULT_TABLE"]
