"""
Binary codec utilities for sqlkv.

This module converts binary buffers to and from the base64 text
representation stored in the value column.
"""

import base64
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

def encode_binary(buffer: BytesLike) -> str:
    """
    바이너리 버퍼를 base64 문자열로 변환합니다.
    
    Args:
        buffer: 변환할 바이트 버퍼
        
    Returns:
        base64 인코딩 문자열
    """
    return base64.b64encode(bytes(buffer)).decode("ascii")

def decode_binary(text: str) -> bytes:
    """
    base64 문자열을 바이트로 복원합니다.
    
    Args:
        text: base64 문자열
        
    Returns:
        디코딩된 바이트
        
    Raises:
        binascii.Error: 잘못된 base64 입력
    """
    return base64.b64decode(text, validate=True)
