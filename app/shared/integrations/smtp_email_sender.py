# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/smtp_email_sender.py

Implementación de envío de correos por SMTP.
Usa templates de templates/emails/ como fuente de verdad.

Autor: Ixchel Beristain
Actualizado: 17/09/2026

Notas:
- smtplib es bloqueante; cada envío corre en asyncio.to_thread.
- El contexto TLS usa el CA bundle de certifi para no depender de los
  certificados del sistema operativo del servidor.
"""

from __future__ import annotations

import ssl
import smtplib
import logging
import asyncio
from email.message import EmailMessage
from email.utils import formatdate, formataddr, make_msgid
from typing import TYPE_CHECKING

import certifi

from app.shared.integrations.email_templates import (
    account_activated_email,
    mask_code,
    recovery_code_email,
)

if TYPE_CHECKING:
    from app.shared.config.settings_base import BaseAppSettings

logger = logging.getLogger(__name__)


def _build_tls_context() -> ssl.SSLContext:
    ctx = ssl.create_default_context(cafile=certifi.where())
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED
    return ctx


class SMTPEmailSender:
    """Envío de correos por SMTP con soporte SSL/STARTTLS y templates."""

    def __init__(
        self,
        server: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        from_name: str = "Sistema de Gestión de Proyectos",
        use_ssl: bool = True,
        timeout: int = 30,
        frontend_url: str = "",
    ):
        self.server = server
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.from_name = from_name
        self.use_ssl = use_ssl
        self.timeout = timeout
        self.frontend_url = frontend_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "SMTPEmailSender":
        if not settings.smtp_server or not settings.smtp_username or not settings.smtp_password:
            raise ValueError("EMAIL_SERVER, EMAIL_USERNAME y EMAIL_PASSWORD son requeridos")

        logger.info(
            "[SMTP] config: server=%s port=%s ssl=%s timeout=%ss",
            settings.smtp_server,
            settings.smtp_port,
            settings.email_use_ssl,
            settings.email_timeout_sec,
        )
        return cls(
            server=settings.smtp_server,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password.get_secret_value(),
            from_email=settings.email_sender_address,
            from_name=settings.email_from_name,
            use_ssl=settings.email_use_ssl,
            timeout=settings.email_timeout_sec,
            frontend_url=settings.frontend_url,
        )

    def build_email_message(
        self, to_email: str, subject: str, html_body: str, text_body: str
    ) -> EmailMessage:
        """Construye EmailMessage multipart (texto + HTML)."""
        msg = EmailMessage()
        msg["From"] = formataddr((self.from_name, self.from_email))
        msg["To"] = to_email
        msg["Subject"] = subject
        msg["Date"] = formatdate(localtime=True)

        domain = self.from_email.split("@")[-1] if "@" in self.from_email else "localhost"
        msg["Message-ID"] = make_msgid(domain=domain)

        msg.set_content(text_body)
        msg.add_alternative(html_body, subtype="html")
        return msg

    def _send_sync(self, to_email: str, subject: str, html_body: str, text_body: str) -> str:
        """Envío síncrono por SMTP. Retorna Message-ID."""
        msg = self.build_email_message(to_email, subject, html_body, text_body)
        context = _build_tls_context()

        try:
            if self.use_ssl:
                with smtplib.SMTP_SSL(
                    self.server, self.port, context=context, timeout=self.timeout
                ) as server:
                    server.login(self.username, self.password)
                    refused = server.send_message(msg)
            else:
                with smtplib.SMTP(self.server, self.port, timeout=self.timeout) as server:
                    server.ehlo()
                    server.starttls(context=context)
                    server.ehlo()
                    server.login(self.username, self.password)
                    refused = server.send_message(msg)
        except (smtplib.SMTPException, OSError):
            logger.exception("[SMTP] send failed to=%s", to_email)
            raise

        msg_id = msg.get("Message-ID", "unknown")
        if refused:
            logger.warning("[SMTP] refused: %s", refused)
        logger.info("[SMTP] sent ok to=%s msg_id=%s", to_email, msg_id)
        return msg_id

    async def send_recovery_code_email(self, to_email: str, code: str, expiration_minutes: int) -> None:
        subject, html, text = recovery_code_email(code, expiration_minutes)
        logger.info("[SMTP] recovery code: to=%s code=%s", to_email, mask_code(code))
        await asyncio.to_thread(self._send_sync, to_email, subject, html, text)

    async def send_account_activated_email(self, to_email: str) -> None:
        subject, html, text = account_activated_email(self.frontend_url)
        logger.info("[SMTP] account activated: to=%s", to_email)
        await asyncio.to_thread(self._send_sync, to_email, subject, html, text)

# Fin del archivo backend/app/shared/integrations/smtp_email_sender.py
