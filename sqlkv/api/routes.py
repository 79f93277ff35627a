"""
HTTP routes for sqlkv.

This module builds the FastAPI application that maps /kv, /kv/put and
/kv/delete onto a key-value adapter created per request.
"""

from typing import Any, Awaitable, Callable, Optional
from fastapi import FastAPI, Query
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlkv.adapters.storage.sqlite_database import SQLiteDatabase
from sqlkv.adapters.storage.sqlite_kv import SQLKVAdapter
from sqlkv.observability.health import create_health_router
from sqlkv.observability.logging_setup import get_logger
from sqlkv.settings import Settings

log = get_logger("sqlkv.api")

KVCall = Callable[[SQLKVAdapter], Awaitable[Any]]

def create_app(settings: Settings, database=None) -> FastAPI:
    """
    FastAPI 애플리케이션을 생성합니다.
    
    Args:
        settings: 애플리케이션 설정
        database: 데이터베이스 핸들 (None이면 settings.database.path로 생성)
    """
    if database is None:
        database = SQLiteDatabase(settings.database.path)
    
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Key-value interface over a SQL table",
        redirect_slashes=False
    )
    app.state.database = database
    
    async def run_kv(op: str, call: KVCall):
        """요청마다 어댑터를 만들고 초기화한 뒤 호출 결과를 JSON으로 응답합니다."""
        try:
            kv = SQLKVAdapter(database, table=settings.database.table)
            await kv.initialize()
            result = await call(kv)
        except Exception as e:
            log.error(f"KV 요청 처리 실패 op:{op} error:{e}")
            return PlainTextResponse(str(e), status_code=500)
        
        if isinstance(result, BaseModel):
            result = result.model_dump()
        return JSONResponse(result)
    
    @app.get("/kv")
    async def kv_get(key: Optional[str] = Query(default=None)):
        """키 조회"""
        return await run_kv("get", lambda kv: kv.get(key))
    
    @app.get("/kv/put")
    async def kv_put(key: Optional[str] = Query(default=None), value: Optional[str] = Query(default=None)):
        """키-값 저장 (만료 없음)"""
        return await run_kv("put", lambda kv: kv.put(key, value))
    
    @app.get("/kv/delete")
    async def kv_delete(key: Optional[str] = Query(default=None)):
        """키 삭제"""
        return await run_kv("delete", lambda kv: kv.delete(key))
    
    @app.exception_handler(StarletteHTTPException)
    async def not_found(request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return PlainTextResponse("Not found", status_code=404)
        return await http_exception_handler(request, exc)
    
    app.include_router(create_health_router(settings, database))
    
    return app
