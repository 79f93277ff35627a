"""
Value tagging for sqlkv.

Values accepted by put are resolved into one of three explicit variants
(text, binary, structured JSON) before they are written. Stored text is
decoded back according to the requested value type on read.
"""

import json
import math
from dataclasses import dataclass
from typing import Any, AsyncIterator, Union
from pydantic import BaseModel

from sqlkv.core.codec import decode_binary, encode_binary
from sqlkv.core.errors import UnsupportedValueTypeError

@dataclass(frozen=True)
class TextValue:
    """문자열 값 (그대로 저장)"""
    text: str

@dataclass(frozen=True)
class BinaryValue:
    """바이너리 값 (base64로 저장)"""
    data: bytes

@dataclass(frozen=True)
class JsonValue:
    """구조화 값 (JSON 직렬화하여 저장)"""
    data: Any

StoredValue = Union[TextValue, BinaryValue, JsonValue]

# JSON으로 직렬화하는 타입 (bool은 제외)
_JSON_TYPES = (dict, list, tuple, int, float, type(None))

def tag_value(value: Any) -> StoredValue:
    """
    입력 값을 저장 variant로 분류합니다.
    
    Args:
        value: put에 전달된 값
        
    Returns:
        TextValue, BinaryValue 또는 JsonValue
        
    Raises:
        UnsupportedValueTypeError: 지원하지 않는 타입
    """
    if isinstance(value, (TextValue, BinaryValue, JsonValue)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BinaryValue(bytes(value))
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, bool):
        raise UnsupportedValueTypeError(type(value))
    if isinstance(value, BaseModel):
        return JsonValue(value.model_dump(mode="json"))
    if isinstance(value, _JSON_TYPES):
        return JsonValue(value)
    raise UnsupportedValueTypeError(type(value))

def _finite_or_null(data: Any) -> Any:
    if isinstance(data, float) and not math.isfinite(data):
        return None
    if isinstance(data, dict):
        return {k: _finite_or_null(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [_finite_or_null(v) for v in data]
    return data

def _dump_json(data: Any) -> str:
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except TypeError as e:
        raise UnsupportedValueTypeError(type(data)) from e

def encode_value(value: StoredValue) -> str:
    """
    저장 variant를 value 컬럼 문자열로 변환합니다.
    
    Raises:
        UnsupportedValueTypeError: JSON 직렬화 불가능한 구조
    """
    if isinstance(value, TextValue):
        return value.text
    if isinstance(value, BinaryValue):
        return encode_binary(value.data)
    if isinstance(value, JsonValue):
        try:
            return _dump_json(value.data)
        except ValueError as e:
            if "Circular" in str(e):
                raise UnsupportedValueTypeError(type(value.data)) from e
            # NaN/Infinity는 null로 저장
            try:
                cleaned = _finite_or_null(value.data)
            except RecursionError as err:
                raise UnsupportedValueTypeError(type(value.data)) from err
            return _dump_json(cleaned)
    raise UnsupportedValueTypeError(type(value))

async def single_chunk_stream(text: str) -> AsyncIterator[str]:
    """텍스트를 한 번 내보내고 종료하는 스트림"""
    yield text

def decode_value(text: str, value_type: str) -> Any:
    """
    저장된 문자열을 요청 타입으로 디코딩합니다.
    
    Args:
        text: 저장된 문자열
        value_type: string | json | arrayBuffer | stream
        
    Returns:
        디코딩된 값
    """
    if value_type == "json":
        return json.loads(text)
    if value_type == "arrayBuffer":
        return decode_binary(text)
    if value_type == "stream":
        # stream은 base64 디코딩 없이 원문을 내보냄
        return single_chunk_stream(text)
    return text
