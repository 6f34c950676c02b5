# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/time_utils.py

Relojes de la aplicación.

- now_utc(): instante actual en UTC (expiraciones de códigos)
- local_now(): hora local de la universidad (America/Caracas, UTC-4),
  usada para la bitácora
- as_utc(): normaliza datetimes leídos de la BD; SQLite los devuelve
  sin zona horaria

Autor: Ixchel Beristain
Fecha: 16/09/2026
"""

from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo

from app.shared.config import settings


@lru_cache(maxsize=4)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def local_now() -> datetime:
    """Fecha y hora actual en la zona configurada (APP_TIMEZONE)."""
    return datetime.now(_zone(settings.app_timezone))


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


__all__ = ["now_utc", "local_now", "as_utc"]
# Fin del archivo backend/app/shared/utils/time_utils.py
