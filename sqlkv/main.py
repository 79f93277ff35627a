# sqlkv/main.py
import os
import uvicorn
from sqlkv.settings import Settings
from sqlkv.api.routes import create_app
from sqlkv.observability.logging_setup import setup_logging_dev, get_logger

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 데이터베이스
    s.database.path = os.getenv("SQLKV_DB_PATH", s.database.path)
    s.database.table = os.getenv("SQLKV_TABLE", s.database.table)

    # 관측성
    s.observability.http_host = os.getenv("HTTP_HOST", s.observability.http_host)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)

    return s

def run_http_server(settings: Settings) -> None:
    """
    HTTP 서버를 실행합니다.
    
    Args:
        settings: 애플리케이션 설정
    """
    log = get_logger("sqlkv.main")
    app = create_app(settings)
    
    log.info(f"HTTP 서버 시작 중 host:{settings.observability.http_host} port:{settings.observability.http_port}")
    
    uvicorn.run(
        app,
        host=settings.observability.http_host,
        port=settings.observability.http_port,
        log_level=settings.observability.log_level.lower(),
        access_log=True
    )

def main():
    s = build_settings()
    setup_logging_dev(log_level=s.observability.log_level)
    get_logger("sqlkv.main").info(f"설정 로드 완료 db:{s.database.path} table:{s.database.table}")
    run_http_server(s)

if __name__ == "__main__":
    main()
