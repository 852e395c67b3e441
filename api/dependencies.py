"""
API dependencies for dependency injection
"""

from functools import lru_cache

from fastapi import Request

from adapters.catalog_adapter import load_protocol_config
from app.config import settings
from services.protocol_service import ProtocolEngine


@lru_cache(maxsize=1)
def build_default_engine() -> ProtocolEngine:
    """Engine over the configured catalog; built once per process."""
    catalog, policy = load_protocol_config(settings.catalog_path)
    return ProtocolEngine(catalog, policy)


def get_engine(request: Request) -> ProtocolEngine:
    """
    Protocol engine dependency for FastAPI routes.

    Uses the engine attached to app.state at startup, falling back to the
    process-wide default (e.g. when the lifespan did not run).

    Usage:
        @router.get("/example")
        def example(engine: ProtocolEngine = Depends(get_engine)):
            ...
    """
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        engine = build_default_engine()
    return engine
