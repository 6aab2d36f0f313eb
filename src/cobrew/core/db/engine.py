"""Database engine management."""

import json
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.cobrew.core.config import get_settings

_engine: AsyncEngine | None = None


def _json_serializer(value: Any) -> str:
    # Keep non-ASCII tags and roles readable so text search can match them
    return json.dumps(value, ensure_ascii=False)


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        options: dict[str, Any] = {
            "echo": settings.database_echo,
            "pool_pre_ping": True,
            "json_serializer": _json_serializer,
        }
        if settings.is_postgres:
            options["pool_size"] = settings.database_pool_size
            options["max_overflow"] = settings.database_max_overflow
        _engine = create_async_engine(settings.database_url, **options)
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
