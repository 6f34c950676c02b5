# -*- coding: utf-8 -*-
"""
backend/app/shared/integrations/email_templates.py

Helper para carga y renderizado de templates de email.
Convención: todos los templates viven en templates/emails/ con nombres *_email.(html|txt).

Autor: Ixchel Beristain
Fecha: 17/09/2026
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Dict, Any

logger = logging.getLogger(__name__)

# Directorio canónico de templates
EMAILS_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"

RECOVERY_CODE_SUBJECT = "Código de recuperación de contraseña"
ACCOUNT_ACTIVATED_SUBJECT = "Cuenta Activada en Sistema de Gestión de Proyectos"


def load_template(template_name: str) -> Optional[str]:
    """Carga un template desde templates/emails/ o None si no existe."""
    path = EMAILS_DIR / template_name
    if not path.exists():
        logger.debug("[EmailTemplates] not found: %s", template_name)
        return None
    return path.read_text(encoding="utf-8")


def render_template(raw: str, context: Dict[str, Any]) -> str:
    """Reemplaza placeholders {{ variable }} y {{variable}}."""
    result = raw
    for key, value in context.items():
        result = result.replace(f"{{{{ {key} }}}}", str(value))
        result = result.replace(f"{{{{{key}}}}}", str(value))
    return result


def render_email(template_base: str, context: Dict[str, Any]) -> Tuple[str, str]:
    """
    Renderiza el par (html, texto) de un correo.

    Si falta el .txt se usa el HTML sin formato como texto plano; si falta
    el .html se envuelve el texto en <pre>.

    Raises:
        FileNotFoundError: si no existe ninguno de los dos templates
    """
    html_raw = load_template(f"{template_base}.html")
    txt_raw = load_template(f"{template_base}.txt")

    if html_raw is None and txt_raw is None:
        raise FileNotFoundError(f"Template de correo inexistente: {template_base}")

    html = render_template(html_raw, context) if html_raw else None
    text = render_template(txt_raw, context) if txt_raw else None

    return html or f"<pre>{text}</pre>", text or html or ""


def recovery_code_email(code: str, expiration_minutes: int) -> Tuple[str, str, str]:
    """(asunto, html, texto) del correo con el código de recuperación."""
    html, text = render_email(
        "recovery_code_email",
        {"code": code, "expiration_minutes": expiration_minutes},
    )
    return RECOVERY_CODE_SUBJECT, html, text


def account_activated_email(frontend_url: str) -> Tuple[str, str, str]:
    """(asunto, html, texto) del aviso de cuenta activada."""
    html, text = render_email("account_activated_email", {"frontend_url": frontend_url})
    return ACCOUNT_ACTIVATED_SUBJECT, html, text


def mask_code(code: str) -> str:
    """Enmascara un código para logging (solo los 2 últimos dígitos)."""
    if len(code) <= 2:
        return "**"
    return "*" * (len(code) - 2) + code[-2:]


__all__ = [
    "EMAILS_DIR",
    "RECOVERY_CODE_SUBJECT",
    "ACCOUNT_ACTIVATED_SUBJECT",
    "load_template",
    "render_template",
    "render_email",
    "recovery_code_email",
    "account_activated_email",
    "mask_code",
]
# Fin del archivo backend/app/shared/integrations/email_templates.py
