# backend/tests/support.py
# -*- coding: utf-8 -*-
"""
Utilidades compartidas por la suite: datos semilla, consulta de la
bitácora y un sender de correo en memoria.
"""

from typing import Optional

from sqlalchemy import func, select

from app.modules.administrators.models import Administrator
from app.modules.audit.models import AuditEntry
from app.modules.auth.models import Login
from app.shared.database import SessionLocal
from app.shared.utils.security import hash_password

ADMIN_EMAIL = "admin@unefa.edu.ve"
ADMIN_PASSWORD = "Clave.Segura.2026"
ADMIN_NAME = "María Fernanda Rojas"


class CapturingEmailSender:
    """Sender en memoria: guarda lo que se habría enviado."""

    def __init__(self) -> None:
        self.recovery_codes: list[dict] = []
        self.activations: list[str] = []
        self.fail = False

    async def send_recovery_code_email(self, to_email: str, code: str, expiration_minutes: int) -> None:
        if self.fail:
            raise RuntimeError("relay caído")
        self.recovery_codes.append({"to": to_email, "code": code, "minutes": expiration_minutes})

    async def send_account_activated_email(self, to_email: str) -> None:
        if self.fail:
            raise RuntimeError("relay caído")
        self.activations.append(to_email)

    @property
    def last_code(self) -> str:
        return self.recovery_codes[-1]["code"]


async def create_admin(
    correo: str = ADMIN_EMAIL,
    password: str = ADMIN_PASSWORD,
    nombre: str = ADMIN_NAME,
    cedula: str = "V-12345678",
    activo: bool = True,
) -> dict:
    async with SessionLocal() as session:
        login = Login(
            correo=correo,
            contrasena=hash_password(password),
            rol="Administrador",
            estado_login="Activo",
        )
        session.add(login)
        await session.flush()
        admin = Administrator(
            cedula=cedula,
            nombre_completo=nombre,
            correo=correo,
            id_login=login.id_login,
            activo=activo,
        )
        session.add(admin)
        await session.commit()
        return {"id_login": login.id_login, "id_administrador": admin.id_administrador}


async def audit_rows(modulo: Optional[str] = None) -> list[AuditEntry]:
    async with SessionLocal() as session:
        stmt = select(AuditEntry).order_by(AuditEntry.id_bitacora)
        if modulo is not None:
            stmt = stmt.where(AuditEntry.modulo_afectado == modulo)
        result = await session.execute(stmt)
        return list(result.scalars().all())


async def audit_actions(modulo: Optional[str] = None) -> list[str]:
    return [row.accion_realizada for row in await audit_rows(modulo)]


async def count_rows(model) -> int:
    async with SessionLocal() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return int(result.scalar_one())
