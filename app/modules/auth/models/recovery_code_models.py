# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/recovery_code_models.py

Modelo ORM de `codigos_recuperacion`: códigos numéricos de 6 dígitos,
de un solo uso, con expiración, ligados a un correo.

Ciclo de vida:
- se crea con usado=False al solicitar recuperación
- pasa a usado=True una única vez (verificación, expiración detectada
  o reemplazo por un código nuevo)
- los códigos huérfanos quedan inertes tras expirar

Autor: Ixchel Beristain
Fecha: 20/09/2026
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class RecoveryCode(Base):
    __tablename__ = "codigos_recuperacion"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    correo: Mapped[str] = mapped_column(String(255), nullable=False)
    codigo: Mapped[str] = mapped_column(String(6), nullable=False)
    expiracion: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    usado: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (
        Index("ix_codigos_recuperacion_correo_usado", "correo", "usado"),
    )

    def __repr__(self) -> str:
        return f"<RecoveryCode id={self.id} correo={self.correo!r} usado={self.usado}>"


__all__ = ["RecoveryCode"]
# Fin del archivo backend/app/modules/auth/models/recovery_code_models.py
