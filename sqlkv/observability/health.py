"""
HTTP endpoints for sqlkv observability.

This module implements health, readiness, metrics, and info endpoints
for monitoring and operational visibility.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response, JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
import time
from sqlkv.settings import Settings
from sqlkv.observability.logging_setup import get_logger

log = get_logger("sqlkv.health")

def create_health_router(settings: Settings, database) -> APIRouter:
    """헬스/메트릭 라우터를 생성합니다."""
    router = APIRouter()
    start_time = time.time()
    
    @router.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })
    
    @router.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트 (DB 접근 확인)"""
        ping = getattr(database, "ping", None)
        db_ok = await ping() if ping else True
        if not db_ok:
            log.warning("레디니스 체크 실패: 데이터베이스 접근 불가")
        return JSONResponse({
            "status": "ready" if db_ok else "not_ready",
            "service": settings.observability.service_name,
            "database": db_ok,
            "timestamp": time.time()
        }, status_code=200 if db_ok else 503)
    
    @router.get("/metrics")
    async def metrics():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")
        
        return Response(
            generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )
    
    @router.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level,
            "table": settings.database.table
        })
    
    return router
