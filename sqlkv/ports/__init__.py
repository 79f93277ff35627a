"""
Port interfaces for sqlkv.

This module defines the port interfaces (Protocols) that define
the contracts between the KV adapter and the database handle.
"""

from .database import DatabasePort, StatementPort
from .kvstore import KVStorePort

__all__ = ["DatabasePort", "StatementPort", "KVStorePort"]
