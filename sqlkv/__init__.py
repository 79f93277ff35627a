"""
sqlkv: key-value store interface over a relational table.
"""

__version__ = "0.1.0"
