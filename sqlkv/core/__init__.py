"""
Core domain models and pure functions for sqlkv.

This module contains the record models, value tagging and codec
helpers that are independent of the database and HTTP layers.
"""

from .codec import encode_binary, decode_binary
from .errors import KVError, UnsupportedValueTypeError
from .models import NEVER_EXPIRES, Record, GetOptions, PutOptions, WriteMeta, WriteResult
from .values import TextValue, BinaryValue, JsonValue, tag_value, encode_value, decode_value

__all__ = [
    "encode_binary", "decode_binary",
    "KVError", "UnsupportedValueTypeError",
    "NEVER_EXPIRES", "Record", "GetOptions", "PutOptions", "WriteMeta", "WriteResult",
    "TextValue", "BinaryValue", "JsonValue", "tag_value", "encode_value", "decode_value",
]
