# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, base de datos aislada
(SQLite en memoria por defecto) y correos siempre a consola.

Autor: Ixchel Beristain
Fecha: 14/09/2026
"""

from typing import Optional

from .settings_base import BaseAppSettings
from pydantic_settings import SettingsConfigDict


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "pretty"

    # --- Base de datos: SQLite en memoria salvo que DB_URL diga otra cosa ---
    db_url: Optional[str] = "sqlite+aiosqlite://"

    # --- Correo: nunca SMTP real en pruebas ---
    email_mode: str = "console"

    # --- Métricas: el registro global de prometheus se comparte entre tests ---
    http_metrics_enabled: bool = False

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend\app\shared\config\settings_testing.py
