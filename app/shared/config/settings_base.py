# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) del Sistema de Gestión de Proyectos.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Ixchel Beristain
Fecha: 14/09/2026
"""

from typing import Literal, Optional
from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

DEV_SESSION_SECRET = "sgp-dev-session-secret-change-me"
DEV_JWT_SECRET = "please-change-me"


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Sistema de Gestión de Proyectos", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=3001, validation_alias="PORT")
    app_timezone: str = Field(default="America/Caracas", validation_alias="APP_TIMEZONE")

    # =========================
    # Base de datos (PostgreSQL)
    # =========================
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: Optional[str] = Field(default=None, validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: Optional[str] = Field(default=None, validation_alias="DB_NAME")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=5, validation_alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=1800, validation_alias="DB_POOL_RECYCLE")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_sslmode: str = Field(default="prefer", validation_alias="DB_SSLMODE")  # prefer|require|disable
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy + asyncpg.
        Prioriza DB_URL si existe, sino construye desde componentes individuales.
        Las URLs sqlite (pruebas) se devuelven tal cual.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = self.db_url
            if url.startswith("sqlite"):
                return url
            url = (
                url.replace("postgres://", "postgresql+asyncpg://", 1)
                   .replace("postgresql://", "postgresql+asyncpg://", 1)
            )
            return url

        if not self.db_host or not self.db_name:
            return ""

        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+asyncpg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @computed_field  # type: ignore[misc]
    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # =========================
    # Sesión (cookie firmada)
    # =========================
    session_secret_key: SecretStr = Field(
        default=SecretStr(DEV_SESSION_SECRET), validation_alias="SESSION_SECRET_KEY"
    )
    session_cookie_name: str = Field(default="sgp_session", validation_alias="SESSION_COOKIE_NAME")
    session_max_age_seconds: int = Field(default=3600, validation_alias="SESSION_MAX_AGE_SECONDS")

    # =========================
    # Recuperación de contraseña
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr(DEV_JWT_SECRET), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    reset_token_expire_minutes: int = Field(default=10, validation_alias="RESET_TOKEN_EXPIRE_MINUTES")
    recovery_code_ttl_minutes: int = Field(default=15, validation_alias="RECOVERY_CODE_TTL_MINUTES")
    bcrypt_rounds: int = Field(default=10, validation_alias="BCRYPT_ROUNDS")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="http://localhost:5173", validation_alias="CORS_ORIGINS")
    frontend_url: str = Field(default="http://localhost:5173", validation_alias="FRONTEND_URL")

    # =========================
    # Email
    # =========================
    email_mode: Literal["console", "smtp"] = Field(default="console", validation_alias="EMAIL_MODE")
    email_timeout_sec: int = Field(default=30, validation_alias="EMAIL_TIMEOUT_SEC")

    # SMTP (solo aplica si email_mode == "smtp")
    smtp_server: Optional[str] = Field(default=None, validation_alias="EMAIL_SERVER")
    smtp_port: int = Field(default=465, validation_alias="EMAIL_PORT")
    smtp_username: Optional[str] = Field(default=None, validation_alias="EMAIL_USERNAME")
    smtp_password: Optional[SecretStr] = Field(default=None, validation_alias="EMAIL_PASSWORD")
    email_use_ssl: bool = Field(default=True, validation_alias="EMAIL_USE_SSL")

    email_from: Optional[str] = Field(default=None, validation_alias="EMAIL_FROM")
    email_from_name: str = Field(default="Sistema de Gestión de Proyectos", validation_alias="EMAIL_FROM_NAME")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")
    http_metrics_enabled: bool = Field(default=True, validation_alias="HTTP_METRICS_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @property
    def session_same_site(self) -> Literal["lax", "none"]:
        # El frontend de producción vive en otro dominio
        return "none" if self.is_prod else "lax"

    @property
    def email_sender_address(self) -> str:
        return self.email_from or self.smtp_username or "no-reply@localhost"

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        # Sin base de datos no hay servicio
        if not self.database_url:
            raise ValueError(
                "Configuración de base de datos ausente: define DB_URL o DB_HOST y DB_NAME."
            )

        if self.is_prod:
            session_key = self.session_secret_key.get_secret_value()
            if not session_key or session_key == DEV_SESSION_SECRET or len(session_key) < 32:
                raise ValueError("SESSION_SECRET_KEY debe tener ≥32 caracteres en producción")
            jwt_key = self.jwt_secret_key.get_secret_value()
            if not jwt_key or jwt_key == DEV_JWT_SECRET or len(jwt_key) < 32:
                raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")
            if self.email_mode == "console":
                logger.warning("EMAIL_MODE=console en producción: los correos no se enviarán")

        if self.is_dev and self.session_secret_key.get_secret_value() == DEV_SESSION_SECRET:
            logger.info("SESSION_SECRET_KEY usa el valor por defecto de desarrollo")

        if self.email_mode == "smtp":
            if not self.smtp_server or not self.smtp_username or not self.smtp_password:
                raise ValueError("EMAIL_MODE=smtp requiere EMAIL_SERVER, EMAIL_USERNAME y EMAIL_PASSWORD.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName"]
# Fin del archivo backend\app\shared\config\settings_base.py
