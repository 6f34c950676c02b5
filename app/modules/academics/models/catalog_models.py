# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/models/catalog_models.py

Catálogos de solo lectura: carreras, periodos académicos y empresas
(receptoras de pasantías).

Autor: Ixchel Beristain
Fecha: 21/09/2026
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class Carrera(Base):
    __tablename__ = "carrera"

    id_carrera: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    carrera: Mapped[str] = mapped_column(String(150), nullable=False)


class Periodo(Base):
    __tablename__ = "periodo"

    id_periodo: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    periodo: Mapped[str] = mapped_column(String(50), nullable=False)


class Empresa(Base):
    __tablename__ = "empresa"

    id_empresa: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre_empresa: Mapped[str] = mapped_column(String(255), nullable=False)


__all__ = ["Carrera", "Periodo", "Empresa"]
# Fin del archivo backend/app/modules/academics/models/catalog_models.py
