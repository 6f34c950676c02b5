# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/repositories/audit_repository.py

Acceso a datos de la bitácora: inserción de registros, resolución del
nombre del actor y listado para la vista de auditoría.

Autor: Ixchel Beristain
Fecha: 22/09/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.administrators.models import Administrator
from app.modules.audit.models import AuditEntry


class AuditRepository:
    """Repositorio de AuditEntry (solo inserción y lectura)."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get_actor_name(self, id_login: int) -> Optional[str]:
        """Nombre completo del administrador dueño de `id_login`, si existe."""
        stmt = (
            select(Administrator.nombre_completo)
            .where(Administrator.id_login == id_login)
            .limit(1)
        )
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def insert(
        self,
        *,
        fecha_hora: datetime,
        id_login: Optional[int],
        nombre_usuario: str,
        modulo_afectado: str,
        accion_realizada: str,
        descripcion_detallada: Optional[str],
        registro_afectado_id: Optional[str],
    ) -> AuditEntry:
        entry = AuditEntry(
            fecha_hora=fecha_hora,
            id_login=id_login,
            nombre_usuario=nombre_usuario,
            modulo_afectado=modulo_afectado,
            accion_realizada=accion_realizada,
            descripcion_detallada=descripcion_detallada,
            registro_afectado_id=registro_afectado_id,
        )
        self._db.add(entry)
        await self._db.commit()
        return entry

    async def list_all(self) -> Sequence[AuditEntry]:
        """Todos los registros, del más reciente al más antiguo."""
        stmt = select(AuditEntry).order_by(
            AuditEntry.fecha_hora.desc(), AuditEntry.id_bitacora.desc()
        )
        result = await self._db.execute(stmt)
        return result.scalars().all()


__all__ = ["AuditRepository"]
# Fin del archivo backend/app/modules/audit/repositories/audit_repository.py
