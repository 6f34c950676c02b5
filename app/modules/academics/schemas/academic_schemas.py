# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/schemas/academic_schemas.py

Schemas de estudiantes, tutores y catálogos.

Autor: Ixchel Beristain
Fecha: 28/09/2026
"""

from typing import Optional

from app.shared.utils.base_models import OptionalInt, RequestModel, UTF8SafeModel


# ========== REQUESTS ==========

class StudentRequest(RequestModel):
    nombre_completo: Optional[str] = None
    cedula: Optional[str] = None
    id_carrera: OptionalInt = None


class TutorRequest(RequestModel):
    nombre_completo: Optional[str] = None
    cedula: Optional[str] = None


# ========== RESPONSES ==========

class StudentOut(UTF8SafeModel):
    id_estudiante: int
    nombre_completo: str
    cedula: str
    id_carrera: Optional[int] = None


class StudentListItem(StudentOut):
    carrera: str = "N/A"


class TutorOut(UTF8SafeModel):
    id_tutor: int
    nombre_completo: str
    cedula: str


class CarreraOut(UTF8SafeModel):
    id_carrera: int
    carrera: str


class PeriodoOut(UTF8SafeModel):
    id_periodo: int
    periodo: str


class EmpresaOut(UTF8SafeModel):
    id_empresa: int
    nombre_empresa: str


class ProjectRefOut(UTF8SafeModel):
    """Elemento de la búsqueda de proyectos por estudiante/tutor"""
    id: int
    proyecto: str
    periodo: Optional[str] = None


__all__ = [
    "StudentRequest",
    "TutorRequest",
    "StudentOut",
    "StudentListItem",
    "TutorOut",
    "CarreraOut",
    "PeriodoOut",
    "EmpresaOut",
    "ProjectRefOut",
]
# Fin del archivo backend/app/modules/academics/schemas/academic_schemas.py
