# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

Respuestas JSON con charset UTF-8 explícito.

Los mensajes de la API van en español (tildes, ñ); sin charset explícito
algunos proxies los muestran como mojibake (aÃºn → aún).

- UTF8JSONResponse: default_response_class de la app
- json_response_utf8: helper funcional
- error_response: cuerpo de error estándar {"error": ...}

Autor: Ixchel Beristain
Fecha: 15/09/2026
"""

from typing import Any, Dict, Optional
from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSONResponse con Content-Type: application/json; charset=utf-8."""
    media_type = "application/json; charset=utf-8"


def json_response_utf8(
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(content=content, status_code=status_code, headers=headers)


def error_response(
    message: Any,
    status_code: int,
    headers: Optional[Dict[str, str]] = None,
    **extra: Any,
) -> UTF8JSONResponse:
    """Respuesta de error con la forma que espera el frontend: {"error": mensaje}."""
    content: Dict[str, Any] = {"error": message}
    content.update(extra)
    return json_response_utf8(content, status_code=status_code, headers=headers)


__all__ = ["UTF8JSONResponse", "json_response_utf8", "error_response"]
# Fin del archivo backend/app/shared/utils/json_response.py
