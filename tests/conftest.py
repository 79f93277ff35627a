"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
import tempfile
import os
from typing import Any, Dict, Optional, Tuple
from sqlkv.adapters.storage.sqlite_database import SQLiteDatabase
from sqlkv.core.models import WriteMeta, WriteResult
from sqlkv.settings import Settings


class FakeClock:
    """수동으로 움직이는 epoch ms 시계"""
    
    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now
    
    def __call__(self) -> int:
        return self.now
    
    def advance(self, ms: int) -> None:
        self.now += ms


class InMemoryStatement:
    """InMemoryDatabase용 준비된 문"""
    
    def __init__(self, database: "InMemoryDatabase", sql: str, params: Tuple[Any, ...] = ()):
        self.database = database
        self.sql = sql
        self.params = params
    
    def bind(self, *params: Any) -> "InMemoryStatement":
        return InMemoryStatement(self.database, self.sql, params)
    
    def _verb(self) -> str:
        return self.sql.split()[0].upper()
    
    async def first(self) -> Optional[Dict[str, Any]]:
        self.database.check(self._verb())
        row = self.database.rows.get(self.params[0])
        return dict(row) if row else None
    
    async def run(self) -> WriteResult:
        verb = self._verb()
        self.database.check(verb)
        changes = 0
        if verb == "INSERT":
            key, value, expires = self.params
            self.database.rows[key] = {"key": key, "value": value, "expires": expires}
            changes = 1
        elif verb == "DELETE":
            changes = 1 if self.database.rows.pop(self.params[0], None) else 0
        return WriteResult(meta=WriteMeta(changes=changes))


class InMemoryDatabase:
    """dict 기반 데이터베이스 핸들 (fail_on 동사에서 오류 발생)"""
    
    def __init__(self, fail_on: Tuple[str, ...] = ()):
        self.rows: Dict[str, Dict[str, Any]] = {}
        self.fail_on = set(fail_on)
        self.prepared = []
    
    def check(self, verb: str) -> None:
        if verb in self.fail_on:
            raise RuntimeError(f"{verb} failed")
    
    def prepare(self, sql: str) -> InMemoryStatement:
        self.prepared.append(sql)
        return InMemoryStatement(self, sql)


@pytest.fixture
def temp_db_path():
    """임시 데이터베이스 파일 경로"""
    with tempfile.NamedTemporaryFile(suffix='.db', delete=False) as f:
        temp_path = f.name
    yield temp_path
    # 테스트 후 파일 정리
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def database(temp_db_path):
    """임시 파일 기반 SQLite 핸들"""
    return SQLiteDatabase(temp_db_path)


@pytest.fixture
def clock():
    """테스트용 시계"""
    return FakeClock()


@pytest.fixture
def sample_settings(temp_db_path):
    """테스트용 설정"""
    settings = Settings()
    settings.database.path = temp_db_path
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    settings.observability.http_port = 8080
    return settings


@pytest.fixture
def memory_db_factory():
    """InMemoryDatabase 생성 함수"""
    return InMemoryDatabase
