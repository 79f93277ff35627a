"""
HTTP entry point for sqlkv.
"""

from .routes import create_app

__all__ = ["create_app"]
