# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/models/people_models.py

Estudiantes y tutores. Ambos se identifican funcionalmente por cédula
(los formularios de proyectos los crean o actualizan por cédula) y se
dan de baja lógicamente con `eliminados`.

Autor: Ixchel Beristain
Fecha: 21/09/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.modules.academics.models.catalog_models import Carrera


class Estudiante(Base):
    __tablename__ = "estudiante"

    id_estudiante: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre_completo: Mapped[str] = mapped_column(String(255), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    id_carrera: Mapped[Optional[int]] = mapped_column(
        ForeignKey("carrera.id_carrera"), nullable=True
    )
    eliminados: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    carrera: Mapped[Optional[Carrera]] = relationship(lazy="selectin")

    @property
    def nombre_carrera(self) -> Optional[str]:
        return self.carrera.carrera if self.carrera else None


class Tutor(Base):
    __tablename__ = "tutor"

    id_tutor: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre_completo: Mapped[str] = mapped_column(String(255), nullable=False)
    cedula: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    eliminados: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())


__all__ = ["Estudiante", "Tutor"]
# Fin del archivo backend/app/modules/academics/models/people_models.py
