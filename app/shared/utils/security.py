# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/security.py

Utilidades de seguridad del sistema.

Incluye:
- Hasheo y verificación de contraseñas (bcrypt vía passlib, costo 10,
  compatible con los hashes ya guardados en login.contraseña)
- Token JWT de corta duración que autoriza el restablecimiento de
  contraseña tras verificar un código de recuperación

Autor: Ixchel Beristain
Fecha: 15/09/2026
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
import hashlib
import hmac
import logging
import uuid

from passlib.context import CryptContext
from jose import JWTError, jwt, ExpiredSignatureError

from app.shared.config import settings

logger = logging.getLogger(__name__)

# ===== PASSWORD HASHING (bcrypt) =====
RESET_TOKEN_TYPE = "password_reset"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Genera el hash bcrypt de la contraseña."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Verifica la contraseña contra el hash almacenado.

    Un hash vacío o con formato desconocido cuenta como no coincidente.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Hash de contraseña con formato no reconocido")
        return False


# ===== TOKEN DE RESTABLECIMIENTO =====
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def password_fingerprint(password_hash: Optional[str]) -> str:
    """Huella HMAC del hash vigente; cambia con cada nuevo hash bcrypt."""
    return hmac.new(
        settings.jwt_secret_key.get_secret_value().encode("utf-8"),
        (password_hash or "").encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()[:32]


def create_reset_token(
    correo: str,
    password_hash: Optional[str],
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Emite el token que autoriza cambiar la contraseña de `correo`.

    Solo se emite cuando /verificar-codigo acepta un código válido.
    Lleva la huella del hash actual: en cuanto la contraseña cambia,
    el token deja de servir (un solo restablecimiento por verificación).
    """
    minutes = expires_minutes if expires_minutes is not None else settings.reset_token_expire_minutes
    iat = _now_utc()
    payload = {
        "sub": correo.lower(),
        "iat": iat,
        "exp": iat + timedelta(minutes=minutes),
        "jti": str(uuid.uuid4()),
        "pwd": password_fingerprint(password_hash),
        "token_type": RESET_TOKEN_TYPE,
    }
    return jwt.encode(
        payload,
        settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decodifica y valida un JWT. None si expiró o es inválido."""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError as e:
        logger.warning(f"Token expirado: {e}")
        return None
    except JWTError as e:
        logger.warning(f"Token inválido: {e}")
        return None


def verify_reset_token(
    token: str, correo: str, password_hash: Optional[str] = None
) -> bool:
    """
    True si el token es de restablecimiento, vigente y emitido para `correo`.

    Con `password_hash` además exige que la contraseña no haya cambiado
    desde que se emitió el token.
    """
    payload = decode_token(token)
    if not payload:
        return False
    if payload.get("token_type") != RESET_TOKEN_TYPE:
        logger.warning(
            f"Tipo de token no coincide: esperado={RESET_TOKEN_TYPE}, "
            f"recibido={payload.get('token_type')}"
        )
        return False
    if str(payload.get("sub", "")).lower() != correo.lower():
        return False
    if password_hash is None:
        return True
    return hmac.compare_digest(
        str(payload.get("pwd", "")), password_fingerprint(password_hash)
    )


__all__ = [
    "hash_password",
    "verify_password",
    "create_reset_token",
    "password_fingerprint",
    "decode_token",
    "verify_reset_token",
    "RESET_TOKEN_TYPE",
]
# Fin del archivo backend/app/shared/utils/security.py
