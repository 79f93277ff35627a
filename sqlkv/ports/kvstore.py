"""
Key-value store port interface.

This module defines the protocol for key-value storage.
"""

from typing import Any, Mapping, Protocol, Union
from sqlkv.core.models import GetOptions, PutOptions, WriteResult

class KVStorePort(Protocol):
    """키-값 저장소 포트 인터페이스"""
    
    async def initialize(self) -> None:
        """저장소 스키마를 준비합니다."""
        ...
    
    async def get(self, key: str, options: Union[GetOptions, Mapping[str, Any], None] = None) -> Any:
        """
        키로 값을 조회합니다.
        
        Args:
            key: 조회할 키
            options: 디코딩 타입 옵션
            
        Returns:
            값 또는 None
        """
        ...
    
    async def put(self, key: str, value: Any, options: Union[PutOptions, Mapping[str, Any], None] = None) -> WriteResult:
        """
        키-값을 저장합니다.
        
        Args:
            key: 저장할 키
            value: 저장할 값
            options: 만료 옵션, None이면 만료 없음
        """
        ...
    
    async def delete(self, key: str) -> WriteResult:
        """
        키를 삭제합니다.
        
        Args:
            key: 삭제할 키
        """
        ...
