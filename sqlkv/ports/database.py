"""
Database port interface.

This module defines the protocol for a database handle that prepares
parameterized statements and executes them asynchronously.
"""

from typing import Any, Dict, Optional, Protocol
from sqlkv.core.models import WriteResult

class StatementPort(Protocol):
    """준비된 SQL 문 포트 인터페이스"""
    
    def bind(self, *params: Any) -> "StatementPort":
        """
        파라미터를 바인딩한 새 문을 반환합니다.
        
        Args:
            *params: 위치 파라미터
        """
        ...
    
    async def first(self) -> Optional[Dict[str, Any]]:
        """
        첫 번째 행을 조회합니다.
        
        Returns:
            컬럼명→값 딕셔너리 또는 None
        """
        ...
    
    async def run(self) -> WriteResult:
        """
        문을 실행하고 쓰기 결과를 반환합니다.
        """
        ...

class DatabasePort(Protocol):
    """데이터베이스 핸들 포트 인터페이스"""
    
    def prepare(self, sql: str) -> StatementPort:
        """
        SQL 문을 준비합니다.
        
        Args:
            sql: ? 플레이스홀더를 포함한 SQL
        """
        ...
