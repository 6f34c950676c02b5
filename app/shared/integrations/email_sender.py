# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_sender.py

Factory unificado para EmailSender.
Soporta dos modos:
- console: stub que solo loguea (desarrollo/tests)
- smtp: envío via SMTP (cuenta institucional)

Autor: Ixchel Beristain
Actualizado: 17/09/2026
"""

from __future__ import annotations

import logging
from typing import Protocol, TYPE_CHECKING

from app.shared.integrations.email_templates import mask_code

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)


class IEmailSender(Protocol):
    """Protocolo para implementaciones de email sender."""
    async def send_recovery_code_email(self, to_email: str, code: str, expiration_minutes: int) -> None: ...
    async def send_account_activated_email(self, to_email: str) -> None: ...


class StubEmailSender:
    """Implementación que no envía correos; solo hace logging (modo console)."""

    async def send_recovery_code_email(self, to_email: str, code: str, expiration_minutes: int) -> None:
        logger.info(
            f"[CONSOLE EMAIL] Código de recuperación → {to_email} | "
            f"codigo={mask_code(code)} | expira en {expiration_minutes} min"
        )

    async def send_account_activated_email(self, to_email: str) -> None:
        logger.info(f"[CONSOLE EMAIL] Cuenta activada → {to_email}")


class EmailSender:
    """
    Factory unificado para selección de email sender.

    Ejemplos de configuración:
    - Desarrollo: EMAIL_MODE=console
    - SMTP: EMAIL_MODE=smtp + EMAIL_SERVER, EMAIL_USERNAME, EMAIL_PASSWORD, etc.
    """

    @staticmethod
    def from_settings(settings: BaseAppSettings) -> IEmailSender:
        """
        Crea el email sender apropiado según settings (fuente de verdad).

        Raises:
            ValueError: si EMAIL_MODE no se reconoce en producción
        """
        mode = (settings.email_mode or "console").strip().lower()

        if mode in ("console", "stub", "local", ""):
            logger.debug("[EmailSender] Usando StubEmailSender (modo console)")
            return StubEmailSender()

        if mode == "smtp":
            from app.shared.integrations.smtp_email_sender import SMTPEmailSender
            logger.debug("[EmailSender] Usando SMTPEmailSender")
            return SMTPEmailSender.from_settings(settings)

        if settings.is_prod:
            raise ValueError(
                f"EMAIL_MODE '{mode}' no reconocido. Configure EMAIL_MODE=console|smtp"
            )

        logger.warning(
            f"[EmailSender] EMAIL_MODE={mode!r} no reconocido, usando console (solo dev)"
        )
        return StubEmailSender()


def get_email_sender() -> IEmailSender:
    """Dependencia FastAPI: sender configurado por settings."""
    from app.shared.config import get_settings
    return EmailSender.from_settings(get_settings())


__all__ = ["IEmailSender", "StubEmailSender", "EmailSender", "get_email_sender"]
# Fin del archivo backend/app/shared/integrations/email_sender.py
