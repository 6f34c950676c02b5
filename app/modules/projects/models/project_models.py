# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/project_models.py

Modelos ORM de los cuatro tipos de proyecto académico:

- ServicioComunitario (+ Integrante, tabla puente con estudiantes)
- TrabajoGrado        (un estudiante, con tutor)
- ProyectoInvestigacion (un estudiante, sin tutor)
- Pasantia            (un estudiante, tutor y empresa)

Todos se eliminan lógicamente con una bandera y un mensaje de
eliminación. Los nombres físicos de columna se respetan tal como
existen en la base (p. ej. `pasantia.fechaInicio`, `eliminado` en
singular para pasantías).

Las relaciones usan lazy="selectin": con AsyncSession no hay lazy-load
implícito, así que cada SELECT trae sus catálogos en lote.

Autor: Ixchel Beristain
Fecha: 21/09/2026
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import Base
from app.modules.academics.models import Carrera, Empresa, Estudiante, Periodo, Tutor


class Integrante(Base):
    __tablename__ = "integrantes"

    id_integrantes: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_servicio: Mapped[int] = mapped_column(
        ForeignKey("servicio_comunitario.id_servicio", ondelete="CASCADE"), nullable=False, index=True
    )
    id_estudiante: Mapped[int] = mapped_column(ForeignKey("estudiante.id_estudiante"), nullable=False)

    estudiante: Mapped[Estudiante] = relationship(lazy="selectin")


class ServicioComunitario(Base):
    __tablename__ = "servicio_comunitario"

    id_servicio: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    proyecto: Mapped[str] = mapped_column(String(255), nullable=False)
    comunidad: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    estado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    fecha_inicio: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    fecha_final: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    id_carrera: Mapped[Optional[int]] = mapped_column(ForeignKey("carrera.id_carrera"), nullable=True)
    id_periodo: Mapped[Optional[int]] = mapped_column(ForeignKey("periodo.id_periodo"), nullable=True)
    id_tutor: Mapped[Optional[int]] = mapped_column(ForeignKey("tutor.id_tutor"), nullable=True)
    eliminados: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    mensaje_eliminacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    carrera: Mapped[Optional[Carrera]] = relationship(lazy="selectin")
    periodo: Mapped[Optional[Periodo]] = relationship(lazy="selectin")
    tutor: Mapped[Optional[Tutor]] = relationship(lazy="selectin")
    integrantes: Mapped[List[Integrante]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by=Integrante.id_integrantes,
    )


class TrabajoGrado(Base):
    __tablename__ = "trabajo_grado"

    id_trabajo_grado: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    proyecto: Mapped[str] = mapped_column(String(255), nullable=False)
    estado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    fecha: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    id_periodo: Mapped[Optional[int]] = mapped_column(ForeignKey("periodo.id_periodo"), nullable=True)
    id_carrera: Mapped[Optional[int]] = mapped_column(ForeignKey("carrera.id_carrera"), nullable=True)
    id_tutor: Mapped[Optional[int]] = mapped_column(ForeignKey("tutor.id_tutor"), nullable=True)
    id_estudiante: Mapped[Optional[int]] = mapped_column(ForeignKey("estudiante.id_estudiante"), nullable=True)
    eliminados: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    mensaje_eliminacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    carrera: Mapped[Optional[Carrera]] = relationship(lazy="selectin")
    periodo: Mapped[Optional[Periodo]] = relationship(lazy="selectin")
    tutor: Mapped[Optional[Tutor]] = relationship(lazy="selectin")
    estudiante: Mapped[Optional[Estudiante]] = relationship(lazy="selectin")


class ProyectoInvestigacion(Base):
    __tablename__ = "proyectos_investigacion"

    id_proyecto_investigacion: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    proyecto: Mapped[str] = mapped_column(String(255), nullable=False)
    estado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    id_periodo: Mapped[Optional[int]] = mapped_column(ForeignKey("periodo.id_periodo"), nullable=True)
    id_carrera: Mapped[Optional[int]] = mapped_column(ForeignKey("carrera.id_carrera"), nullable=True)
    id_estudiante: Mapped[Optional[int]] = mapped_column(ForeignKey("estudiante.id_estudiante"), nullable=True)
    eliminados: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    mensaje_eliminacion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    mensaje_restauracion: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    carrera: Mapped[Optional[Carrera]] = relationship(lazy="selectin")
    periodo: Mapped[Optional[Periodo]] = relationship(lazy="selectin")
    estudiante: Mapped[Optional[Estudiante]] = relationship(lazy="selectin")


class Pasantia(Base):
    __tablename__ = "pasantia"

    id_pasantia: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    titulo: Mapped[str] = mapped_column(String(255), nullable=False)
    estado: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    fecha_inicio: Mapped[Optional[date]] = mapped_column("fechaInicio", Date, nullable=True)
    fecha_final: Mapped[Optional[date]] = mapped_column("fechaFinal", Date, nullable=True)
    id_periodo: Mapped[Optional[int]] = mapped_column(ForeignKey("periodo.id_periodo"), nullable=True)
    id_carrera: Mapped[Optional[int]] = mapped_column(ForeignKey("carrera.id_carrera"), nullable=True)
    id_empresa: Mapped[Optional[int]] = mapped_column(ForeignKey("empresa.id_empresa"), nullable=True)
    id_tutor: Mapped[Optional[int]] = mapped_column(ForeignKey("tutor.id_tutor"), nullable=True)
    id_estudiante: Mapped[Optional[int]] = mapped_column(ForeignKey("estudiante.id_estudiante"), nullable=True)
    eliminado: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    mensaje_eliminado: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    carrera: Mapped[Optional[Carrera]] = relationship(lazy="selectin")
    periodo: Mapped[Optional[Periodo]] = relationship(lazy="selectin")
    empresa: Mapped[Optional[Empresa]] = relationship(lazy="selectin")
    tutor: Mapped[Optional[Tutor]] = relationship(lazy="selectin")
    estudiante: Mapped[Optional[Estudiante]] = relationship(lazy="selectin")


__all__ = [
    "Integrante",
    "ServicioComunitario",
    "TrabajoGrado",
    "ProyectoInvestigacion",
    "Pasantia",
]
# Fin del archivo backend/app/modules/projects/models/project_models.py
