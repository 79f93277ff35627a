"""
SQLite-based database handle for sqlkv.

This module exposes a prepare/bind/first/run statement API on top
of aiosqlite, so the KV adapter can run against a local SQLite file
the same way it runs against a hosted SQL binding.
"""

import aiosqlite
import time
from typing import Any, Dict, Optional, Tuple
from sqlkv.core.models import WriteMeta, WriteResult
from sqlkv.observability.logging_setup import get_logger

log = get_logger("sqlkv.db")

class PreparedStatement:
    """준비된 SQL 문"""
    
    def __init__(self, database: "SQLiteDatabase", sql: str, params: Tuple[Any, ...] = ()):
        self.database = database
        self.sql = sql
        self.params = params
    
    def bind(self, *params: Any) -> "PreparedStatement":
        """
        파라미터를 바인딩한 새 문을 반환합니다.
        
        Args:
            *params: 위치 파라미터
            
        Returns:
            바인딩된 PreparedStatement
        """
        return PreparedStatement(self.database, self.sql, params)
    
    async def first(self) -> Optional[Dict[str, Any]]:
        """
        첫 번째 행을 조회합니다.
        
        Returns:
            컬럼명→값 딕셔너리 또는 None
        """
        async with aiosqlite.connect(self.database.path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(self.sql, self.params)
            row = await cursor.fetchone()
            await cursor.close()
            return dict(row) if row else None
    
    async def run(self) -> WriteResult:
        """
        문을 실행하고 커밋합니다.
        
        Returns:
            변경 행 수와 실행 시간을 담은 WriteResult
        """
        started = time.perf_counter()
        async with aiosqlite.connect(self.database.path) as db:
            cursor = await db.execute(self.sql, self.params)
            await db.commit()
            changes = max(cursor.rowcount, 0)
            last_row_id = cursor.lastrowid
            await cursor.close()
        duration = (time.perf_counter() - started) * 1000
        return WriteResult(
            success=True,
            meta=WriteMeta(changes=changes, last_row_id=last_row_id, duration=round(duration, 3))
        )
    
    def __repr__(self) -> str:
        return f"PreparedStatement({self.sql!r}, params={self.params!r})"

class SQLiteDatabase:
    """aiosqlite 기반 데이터베이스 핸들"""
    
    def __init__(self, path: str):
        """
        초기화합니다.
        
        Args:
            path: SQLite 데이터베이스 파일 경로
        """
        self.path = path
        log.info(f"SQLiteDatabase 초기화: {path}")
    
    def prepare(self, sql: str) -> PreparedStatement:
        """
        SQL 문을 준비합니다.
        
        Args:
            sql: ? 플레이스홀더를 포함한 SQL
        """
        return PreparedStatement(self, sql)
    
    async def ping(self) -> bool:
        """
        데이터베이스 접근 가능 여부를 확인합니다.
        
        Returns:
            SELECT 1 성공 여부
        """
        try:
            row = await self.prepare("SELECT 1 AS ok").first()
            return bool(row and row["ok"] == 1)
        except aiosqlite.Error as e:
            log.error(f"SQLiteDatabase ping 오류: {e}")
            return False
