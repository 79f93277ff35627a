from __future__ import annotations
import logging
from loguru import logger

# ---- stdlib logging → loguru 인터셉트 ----
class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())

# uvicorn/aiosqlite 로그도 loguru로 보냄
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "asyncio", "aiosqlite")

def _hook_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        l = logging.getLogger(name)
        l.handlers = [InterceptHandler()]
        l.propagate = False

# ---- 개발 콘솔 포맷 ----
DEV_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level:<7}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<cyan>{file}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

def _dev_format(record) -> str:
    """name 외의 바인딩 컨텍스트(key, table 등)를 메시지 뒤에 붙입니다."""
    ctx = [k for k in record["extra"] if k != "name"]
    fmt = DEV_FORMAT
    if ctx:
        fmt += " <dim>" + " ".join(f"{k}={{extra[{k}]}}" for k in ctx) + "</dim>"
    return fmt + "\n{exception}"

def setup_logging_dev(log_level: str = "INFO") -> None:
    """
    개발 콘솔 전용 loguru 초기화.
    - 콘솔 컬러 출력, 바인딩 컨텍스트 표시
    - stdlib logging 흡수
    """
    logger.remove()
    logger.configure(extra={"name": "sqlkv"})
    logger.add(
        sink=lambda m: print(m, end=""),
        format=_dev_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
        level=log_level.upper(),
        enqueue=False,
    )
    _hook_stdlib_logging()

def get_logger(name: str = "sqlkv", **ctx):
    """선택적으로 컨텍스트를 바인딩한 logger 반환."""
    return logger.bind(name=name, **ctx)

def with_context(**ctx):
    """컨텍스트 매니저로 일시 컨텍스트 부여 (예: 만료 정리 중인 key)."""
    return logger.contextualize(**ctx)
