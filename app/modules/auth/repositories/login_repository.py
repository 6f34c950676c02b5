# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/login_repository.py

Repositorio de la tabla `login`.

Los métodos de escritura hacen flush pero no commit: el servicio decide
el límite de la transacción (p. ej. login + administrador juntos).

Autor: Ixchel Beristain
Fecha: 23/09/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import Login


class LoginRepository:
    """Repositorio de Login."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_correo(self, correo: str) -> Optional[Login]:
        # El correo se compara sin distinguir mayúsculas
        stmt = select(Login).where(func.lower(Login.correo) == correo.lower())
        result = await self._db.execute(stmt.order_by(Login.id_login).limit(1))
        return result.scalar_one_or_none()

    async def get_by_id(self, id_login: int) -> Optional[Login]:
        return await self._db.get(Login, id_login)

    async def exists_correo(self, correo: str, *, exclude_id: Optional[int] = None) -> bool:
        stmt = select(Login.id_login).where(func.lower(Login.correo) == correo.lower())
        if exclude_id is not None:
            stmt = stmt.where(Login.id_login != exclude_id)
        result = await self._db.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    async def create(
        self,
        *,
        correo: str,
        password_hash: str,
        rol: Optional[str],
        estado_login: Optional[str] = None,
        nombre_usuario: Optional[str] = None,
    ) -> Login:
        login = Login(
            correo=correo,
            contrasena=password_hash,
            rol=rol,
            estado_login=estado_login,
            nombre_usuario=nombre_usuario,
        )
        self._db.add(login)
        await self._db.flush()
        return login

    async def update_fields(self, id_login: int, **values) -> int:
        if not values:
            return 0
        result = await self._db.execute(
            update(Login).where(Login.id_login == id_login).values(**values)
        )
        return result.rowcount or 0


__all__ = ["LoginRepository"]
# Fin del archivo backend/app/modules/auth/repositories/login_repository.py
