"""
Observability for sqlkv: logging, metrics and health endpoints.
"""
