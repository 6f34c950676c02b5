# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/current_user.py

Propaga el usuario de la sesión al request.

Lee `id_login` de la sesión firmada (SessionMiddleware) y lo deja en
request.state.current_user_id_login; None cuando no hay sesión. Debe
registrarse ANTES que SessionMiddleware para quedar por dentro de él.

Autor: Ixchel Beristain
Fecha: 18/09/2026
"""

from __future__ import annotations

from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

SESSION_USER_KEY = "id_login"


def _coerce_id(value: object) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


class CurrentUserMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        session = request.scope.get("session") or {}
        request.state.current_user_id_login = _coerce_id(session.get(SESSION_USER_KEY))
        return await call_next(request)


def get_current_user_id(request: Request) -> Optional[int]:
    """Dependencia FastAPI: actor de la petición para la bitácora."""
    return getattr(request.state, "current_user_id_login", None)


__all__ = ["CurrentUserMiddleware", "get_current_user_id", "SESSION_USER_KEY"]
