"""
Adapters for sqlkv.

This module contains the concrete implementations of port interfaces
that handle database I/O.
"""

from .storage import SQLiteDatabase, SQLKVAdapter

__all__ = ["SQLiteDatabase", "SQLKVAdapter"]
