# sqlkv/settings.py
from __future__ import annotations
from pydantic import BaseModel, Field

class Database(BaseModel):
    path: str = "/data/kv.db"
    table: str = "KV"

class Observability(BaseModel):
    http_host: str = "0.0.0.0"
    http_port: int = 8787
    metrics_enabled: bool = True
    service_name: str = "sqlkv"
    build_version: str = "0.1.0"
    build_date: str = "2026-01-01"
    log_level: str = "INFO"

class Settings(BaseModel):
    database: Database = Field(default_factory=Database)
    observability: Observability = Field(default_factory=Observability)
