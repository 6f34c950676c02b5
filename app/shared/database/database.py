# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy 2.x async sobre asyncpg (PostgreSQL de la universidad).
En pruebas se usa sqlite+aiosqlite en memoria con StaticPool para que
todas las sesiones compartan la misma base.

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Dependencia FastAPI: get_async_session
- check_database_health()

Autor: Ixchel Beristain
Fecha: 15/09/2026
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs() -> dict[str, Any]:
    """Argumentos del engine según el backend configurado."""
    if settings.is_sqlite:
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
            "echo": settings.db_echo_sql,
        }

    connect_args: dict[str, Any] = {"server_settings": {"search_path": "public"}}
    if settings.db_sslmode == "require":
        connect_args["ssl"] = "require"
    elif settings.db_sslmode == "disable":
        connect_args["ssl"] = False

    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.db_echo_sql,
        "connect_args": connect_args,
    }


def build_engine() -> AsyncEngine:
    url = settings.database_url
    logger.info(
        "[DB] Engine para %s (echo=%s)",
        url.split("@")[-1] if "@" in url else url,
        settings.db_echo_sql,
    )
    return create_async_engine(url, **_engine_kwargs())


engine = build_engine()

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencia FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as exc:
        logger.warning("[DB] Health check fallido: %s", exc)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "get_async_session",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
