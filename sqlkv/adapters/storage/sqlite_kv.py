"""
SQL-backed key-value adapter for sqlkv.

This module implements get/put/delete key-value semantics over a
single table in an injected database handle, with lazy expiry of
records on read.
"""

import asyncio
import functools
import math
from typing import Any, Callable, Mapping, Optional, Set, Union
from sqlkv.core.clock import now_ms
from sqlkv.core.models import NEVER_EXPIRES, GetOptions, PutOptions, Record, WriteResult
from sqlkv.core.values import decode_value, encode_value, tag_value
from sqlkv.observability import metrics
from sqlkv.observability.logging_setup import get_logger, with_context
from sqlkv.ports.database import DatabasePort

log = get_logger("sqlkv.kv")

DEFAULT_TABLE = "KV"

# 실행 중인 만료 정리 태스크 (GC 방지용 강한 참조)
_background_tasks: Set[asyncio.Task] = set()

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def resolve_expires(options: Optional[PutOptions], now: int) -> int:
    """
    put 옵션에서 만료 시각(epoch ms)을 계산합니다.

    Args:
        options: put 옵션
        now: 현재 시각 (epoch ms)

    Returns:
        만료 시각 또는 NEVER_EXPIRES
    """
    if options is None:
        return NEVER_EXPIRES
    if options.expiration:
        return _round_half_up(options.expiration)
    if options.expiration_ttl:
        return _round_half_up(now + options.expiration_ttl * 1000)
    return NEVER_EXPIRES

class SQLKVAdapter:
    """SQL 테이블 기반 KV 어댑터"""

    def __init__(self, database: DatabasePort, table: Optional[str] = None,
                 clock: Callable[[], int] = now_ms):
        """
        초기화합니다.

        Args:
            database: prepare를 지원하는 데이터베이스 핸들
            table: 테이블 이름 (None이면 "KV")
            clock: 현재 시각(epoch ms) 함수
        """
        self.database = database
        self.table = table or DEFAULT_TABLE
        self.clock = clock
        self._get_stmt = database.prepare(f"SELECT * FROM {self.table} WHERE key = ?")
        self._put_stmt = database.prepare(
            f"INSERT OR REPLACE INTO {self.table} (key, value, expires) VALUES (?, ?, ?)"
        )
        self._delete_stmt = database.prepare(f"DELETE FROM {self.table} WHERE key = ?")
        self._cleanup_tasks: Set[asyncio.Task] = set()

    async def initialize(self) -> None:
        """테이블이 없으면 생성합니다."""
        await self.database.prepare(
            f"CREATE TABLE IF NOT EXISTS {self.table} (key TEXT PRIMARY KEY, value TEXT, expires INTEGER)"
        ).run()

    async def get(self, key: str, options: Union[GetOptions, Mapping[str, Any], None] = None) -> Any:
        """
        키로 값을 조회합니다.

        만료 없는 레코드는 요청 타입과 관계없이 저장된 문자열을 그대로 반환합니다.
        만료된 레코드는 백그라운드 삭제를 예약하고 None을 반환합니다.

        Args:
            key: 조회할 키
            options: 디코딩 타입 옵션 (기본 string)

        Returns:
            디코딩된 값 또는 None
        """
        opts = options if isinstance(options, GetOptions) else GetOptions.model_validate(options or {})
        metrics.kv_operations.labels(operation="get").inc()

        with metrics.kv_operation_seconds.labels(operation="get").time():
            row = await self._get_stmt.bind(key).first()

        if row is None:
            metrics.kv_get_results.labels(result="miss").inc()
            return None

        record = Record.model_validate(row)
        if record.expires == NEVER_EXPIRES:
            metrics.kv_get_results.labels(result="hit").inc()
            return record.value

        if record.expires is not None and record.expires > self.clock():
            metrics.kv_get_results.labels(result="hit").inc()
            return decode_value(record.value, opts.type)

        metrics.kv_get_results.labels(result="expired").inc()
        self._schedule_cleanup(key)
        return None

    async def put(self, key: str, value: Any, options: Union[PutOptions, Mapping[str, Any], None] = None) -> WriteResult:
        """
        키-값을 저장합니다 (같은 키가 있으면 교체).

        Args:
            key: 저장할 키
            value: str, bytes 또는 JSON 직렬화 가능한 값
            options: expiration(epoch ms) 또는 expirationTtl(초)

        Returns:
            쓰기 결과

        Raises:
            UnsupportedValueTypeError: 지원하지 않는 값 타입
        """
        if options is not None and not isinstance(options, PutOptions):
            options = PutOptions.model_validate(options)

        expires = resolve_expires(options, self.clock())
        text = encode_value(tag_value(value))

        metrics.kv_operations.labels(operation="put").inc()
        with metrics.kv_operation_seconds.labels(operation="put").time():
            return await self._put_stmt.bind(key, text, expires).run()

    async def delete(self, key: str) -> WriteResult:
        """
        키를 삭제합니다. 키가 없어도 오류가 아닙니다.

        Args:
            key: 삭제할 키

        Returns:
            쓰기 결과
        """
        metrics.kv_operations.labels(operation="delete").inc()
        with metrics.kv_operation_seconds.labels(operation="delete").time():
            return await self._delete_stmt.bind(key).run()

    def _schedule_cleanup(self, key: str) -> None:
        """만료된 키의 삭제를 백그라운드로 실행합니다."""
        task = asyncio.create_task(self.delete(key), name=f"sqlkv-expire:{key}")
        _background_tasks.add(task)
        self._cleanup_tasks.add(task)
        task.add_done_callback(functools.partial(self._on_cleanup_done, key))

    def _on_cleanup_done(self, key: str, task: asyncio.Task) -> None:
        _background_tasks.discard(task)
        self._cleanup_tasks.discard(task)
        with with_context(key=key, table=self.table):
            if task.cancelled():
                log.warning(f"만료 키 정리 취소됨 key:{key}")
                return
            error = task.exception()
            if error is not None:
                metrics.kv_expired_cleanup_failures.inc()
                log.error(f"만료 키 정리 실패 key:{key} error:{error}")
            else:
                log.debug(f"만료 키 정리 완료 key:{key}")

    async def wait_for_cleanups(self) -> None:
        """예약된 만료 정리 태스크가 끝날 때까지 기다립니다."""
        if self._cleanup_tasks:
            await asyncio.gather(*list(self._cleanup_tasks), return_exceptions=True)
