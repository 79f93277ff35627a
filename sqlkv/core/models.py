"""
Core domain models for sqlkv.

This module defines the record, option and write-result models
using Pydantic v2 for type safety and validation.
"""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

# 만료 없음 표시 값
NEVER_EXPIRES = -1

# get 결과 디코딩 타입
ValueType = Literal["string", "json", "arrayBuffer", "stream"]

class Record(BaseModel):
    """KV 테이블의 한 행"""
    key: str
    value: Optional[str] = None
    expires: Optional[int] = None

class GetOptions(BaseModel):
    """get 옵션"""
    type: ValueType = "string"

class PutOptions(BaseModel):
    """put 옵션 (expiration: 절대 epoch ms, expiration_ttl: 초)"""
    model_config = ConfigDict(populate_by_name=True)
    
    expiration: Optional[float] = None
    expiration_ttl: Optional[float] = Field(default=None, alias="expirationTtl")

class WriteMeta(BaseModel):
    """쓰기 실행 메타데이터"""
    changes: int = 0
    last_row_id: Optional[int] = None
    duration: float = 0.0

class WriteResult(BaseModel):
    """쓰기 결과 (put/delete 응답)"""
    success: bool = True
    meta: WriteMeta = Field(default_factory=WriteMeta)
