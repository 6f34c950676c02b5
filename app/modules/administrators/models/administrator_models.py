# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/models/administrator_models.py

Modelo ORM de `administrador`. Cada administrador tiene su fila de
`login`; la baja es lógica (activo=False).

Autor: Ixchel Beristain
Fecha: 20/09/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class Administrator(Base):
    __tablename__ = "administrador"

    id_administrador: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cedula: Mapped[str] = mapped_column(String(20), nullable=False)
    nombre_completo: Mapped[str] = mapped_column(String(255), nullable=False)
    correo: Mapped[str] = mapped_column(String(255), nullable=False)
    id_login: Mapped[Optional[int]] = mapped_column(
        ForeignKey("login.id_login", ondelete="SET NULL"), nullable=True, index=True
    )
    activo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    def __repr__(self) -> str:
        return f"<Administrator id={self.id_administrador} cedula={self.cedula!r} activo={self.activo}>"


__all__ = ["Administrator"]
# Fin del archivo backend/app/modules/administrators/models/administrator_models.py
