# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend del Sistema de Gestión de Proyectos.

Ajustes clave:
- Configuración vía app.shared.config (settings por entorno)
- Logging estructurado (python-json-logger) desde LOG_FORMAT
- Observabilidad Prometheus (/metrics) vía app.observability.prom
- Sesión firmada en cookie (SessionMiddleware) + actor de bitácora
- Errores de la API siempre como {"error": mensaje} en UTF-8
- Health principal /health delegado al paquete app.routes

Orden de middlewares (exterior primero): CORS, JSONExceptionMiddleware,
RequestLoggingMiddleware, Prometheus, SessionMiddleware,
CurrentUserMiddleware. Starlette ejecuta en orden inverso al registro.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea la configuración
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV not in ("production", "test"))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from app.observability.prom import setup_observability
from app.shared.config import settings
from app.shared.config.logging_config import setup_logging
from app.shared.database import check_database_health, engine
from app.shared.middleware import (
    CurrentUserMiddleware,
    JSONExceptionMiddleware,
    RequestLoggingMiddleware,
)
from app.shared.utils.json_response import UTF8JSONResponse, error_response

setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)

INVALID_INPUT = "Datos de entrada inválidos."


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    logger.info(
        "backend_starting env=%s db=%s",
        settings.python_env,
        "sqlite" if settings.is_sqlite else "postgresql",
    )
    if not await check_database_health(timeout_s=3.0):
        logger.warning("La base de datos no responde; el servicio arranca degradado.")

    logger.info("🟢 Backend iniciado.")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        await engine.dispose()
        logger.info("🔴 Backend apagado.")


openapi_tags = [
    {"name": "auth", "description": "Inicio y cierre de sesión"},
    {"name": "recuperacion", "description": "Recuperación de contraseña por código"},
    {"name": "bitacora", "description": "Bitácora de acciones administrativas"},
    {"name": "administradores", "description": "Administradores y perfil"},
    {"name": "estudiantes", "description": "Estudiantes"},
    {"name": "tutores", "description": "Tutores"},
    {"name": "proyectos-eliminados", "description": "Recuperación de proyectos eliminados"},
]

app = FastAPI(
    title=settings.app_name,
    description="API del Sistema de Gestión de Proyectos",
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    default_response_class=UTF8JSONResponse,  # charset=utf-8 en todas las respuestas JSON
)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS CON UTF-8
# ═══════════════════════════════════════════════════════════════════════════════
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Cualquier HTTPException sale como {"error": detalle}."""
    return error_response(
        exc.detail,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("invalid_request path=%s errors=%s", request.url.path, exc.errors())
    return error_response(INVALID_INPUT, status_code=400)


# ═══════════════════════════════════════════════════════════════════════════════
# MIDDLEWARES (registro de interior a exterior)
# ═══════════════════════════════════════════════════════════════════════════════
app.add_middleware(CurrentUserMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key.get_secret_value(),
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age_seconds,
    same_site=settings.session_same_site,
    https_only=settings.is_prod,
)

# Observabilidad Prometheus (/metrics)
if settings.http_metrics_enabled:
    setup_observability(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(JSONExceptionMiddleware)


def _configure_cors(app_instance: FastAPI) -> dict:
    """Configura CORS; se registra al final para ejecutarse primero."""
    origins = settings.get_cors_origins()
    is_wildcard_only = origins == ["*"]

    # "*" con allow_credentials=True es inválido en navegadores
    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
        "max_age": 600,
    }
    if is_wildcard_only:
        logger.warning("⚠️ CORS WILDCARD MODE: sin credenciales para origen '*'.")

    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("cors_configured origins=%s credentials=%s", origins, cors_config["allow_credentials"])
    return cors_config


_cors_config = _configure_cors(app)

# Incluye router maestro
from app.routes import router as main_router

app.include_router(main_router)


@app.get("/", include_in_schema=False)
async def root():
    return {"service": settings.app_name, "status": "active"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
