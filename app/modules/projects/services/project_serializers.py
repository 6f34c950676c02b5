# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/project_serializers.py

Transformación de filas ORM a los JSON que consume el panel:

- detail_*:  listados y consulta por ID (snake_case, como el panel)
- deleted_*: forma común de proyectos eliminados
- pdf_*:     datos públicos para generar el comprobante PDF (camelCase)

Solo deben recibir entidades leídas con SELECT (relaciones selectin
ya cargadas); nunca objetos recién creados en la sesión.

Autor: Ixchel Beristain
Fecha: 01/10/2026
"""

from __future__ import annotations

from typing import Any, Optional

from app.modules.projects.schemas import DeletedProjectOut

NO_CAREER = "N/A"


# ----------------------------------------------------------------------
# Piezas comunes
# ----------------------------------------------------------------------
def _periodo(entity) -> Optional[str]:
    return entity.periodo.periodo if entity.periodo else None


def _carrera(entity) -> Optional[str]:
    return entity.carrera.carrera if entity.carrera else None


def _tutor(tutor) -> Optional[dict[str, Any]]:
    if tutor is None:
        return None
    return {"id_tutor": tutor.id_tutor, "cedula": tutor.cedula, "nombre_completo": tutor.nombre_completo}


def _student(student) -> Optional[dict[str, Any]]:
    if student is None:
        return None
    return {
        "id_estudiante": student.id_estudiante,
        "cedula": student.cedula,
        "nombre_completo": student.nombre_completo,
        "id_carrera": student.id_carrera,
        "carrera": student.nombre_carrera or NO_CAREER,
    }


def _brief(person) -> Optional[dict[str, str]]:
    if person is None:
        return None
    return {"cedula": person.cedula, "nombre_completo": person.nombre_completo}


def _pdf_student(student) -> Optional[dict[str, Any]]:
    if student is None:
        return None
    return {
        "cedula": student.cedula,
        "nombreCompleto": student.nombre_completo,
        "carreraEstudiante": student.nombre_carrera or NO_CAREER,
    }


def _members(entity) -> list:
    return [i.estudiante for i in entity.integrantes if i.estudiante is not None]


# ----------------------------------------------------------------------
# Detalle
# ----------------------------------------------------------------------
def detail_community(entity) -> dict[str, Any]:
    return {
        "id_servicio": entity.id_servicio,
        "nombre_proyecto": entity.proyecto,
        "periodo": _periodo(entity),
        "id_periodo": entity.id_periodo,
        "carrera": _carrera(entity),
        "id_carrera": entity.id_carrera,
        "tutor": _tutor(entity.tutor),
        "integrantes": [_student(s) for s in _members(entity)],
        "comunidad": entity.comunidad,
        "estado": entity.estado,
        "fecha_inicio": entity.fecha_inicio,
        "fecha_final": entity.fecha_final,
        "eliminados": entity.eliminados,
        "mensaje_eliminacion": entity.mensaje_eliminacion,
    }


def detail_thesis(entity) -> dict[str, Any]:
    return {
        "id_trabajo_grado": entity.id_trabajo_grado,
        "nombre_proyecto": entity.proyecto,
        "periodo": _periodo(entity),
        "id_periodo": entity.id_periodo,
        "carrera": _carrera(entity),
        "id_carrera": entity.id_carrera,
        "tutor": _tutor(entity.tutor),
        "estudiante": _student(entity.estudiante),
        "estado": entity.estado,
        "fecha": entity.fecha,
        "eliminados": entity.eliminados,
        "mensaje_eliminacion": entity.mensaje_eliminacion,
    }


def detail_research(entity) -> dict[str, Any]:
    return {
        "id_proyecto_investigacion": entity.id_proyecto_investigacion,
        "nombre_proyecto": entity.proyecto,
        "periodo": _periodo(entity),
        "id_periodo": entity.id_periodo,
        "carrera": _carrera(entity),
        "id_carrera": entity.id_carrera,
        "estudiante": _student(entity.estudiante),
        "estado": entity.estado,
        "eliminados": entity.eliminados,
        "mensaje_eliminacion": entity.mensaje_eliminacion,
        "mensaje_restauracion": entity.mensaje_restauracion,
    }


def detail_internship(entity) -> dict[str, Any]:
    return {
        "id_pasantia": entity.id_pasantia,
        "titulo": entity.titulo,
        "periodo": _periodo(entity),
        "id_periodo": entity.id_periodo,
        "carrera": _carrera(entity),
        "id_carrera": entity.id_carrera,
        "empresa": entity.empresa.nombre_empresa if entity.empresa else None,
        "id_empresa": entity.id_empresa,
        "tutor": _tutor(entity.tutor),
        "estudiante": _student(entity.estudiante),
        "estado": entity.estado,
        "fechaInicio": entity.fecha_inicio,
        "fechaFinal": entity.fecha_final,
        "eliminado": entity.eliminado,
        "mensaje_eliminado": entity.mensaje_eliminado,
    }


# ----------------------------------------------------------------------
# Eliminados (forma común)
# ----------------------------------------------------------------------
def _deleted(
    *,
    entity_id: int,
    label: str,
    entity,
    name: str,
    tutor,
    students: list,
    message: Optional[str],
) -> dict[str, Any]:
    return DeletedProjectOut(
        id=entity_id,
        tipo_proyecto=label,
        periodo=_periodo(entity) or "",
        nombre_proyecto=name,
        carrera=_carrera(entity) or "",
        tutor=_brief(tutor),
        estudiantes=[_brief(s) for s in students if s is not None],
        mensaje_eliminacion=message,
    ).model_dump()


def deleted_community(entity) -> dict[str, Any]:
    return _deleted(
        entity_id=entity.id_servicio,
        label="Servicio Comunitario",
        entity=entity,
        name=entity.proyecto,
        tutor=entity.tutor,
        students=_members(entity),
        message=entity.mensaje_eliminacion,
    )


def deleted_thesis(entity) -> dict[str, Any]:
    return _deleted(
        entity_id=entity.id_trabajo_grado,
        label="Trabajo de Grado",
        entity=entity,
        name=entity.proyecto,
        tutor=entity.tutor,
        students=[entity.estudiante],
        message=entity.mensaje_eliminacion,
    )


def deleted_research(entity) -> dict[str, Any]:
    return _deleted(
        entity_id=entity.id_proyecto_investigacion,
        label="Proyecto de Investigación",
        entity=entity,
        name=entity.proyecto,
        tutor=None,
        students=[entity.estudiante],
        message=entity.mensaje_eliminacion,
    )


def deleted_internship(entity) -> dict[str, Any]:
    return _deleted(
        entity_id=entity.id_pasantia,
        label="Pasantía",
        entity=entity,
        name=entity.titulo,
        tutor=entity.tutor,
        students=[entity.estudiante],
        message=entity.mensaje_eliminado,
    )


# ----------------------------------------------------------------------
# Datos para PDF
# ----------------------------------------------------------------------
def _tutor_pdf_fields(tutor) -> dict[str, Optional[str]]:
    return {
        "tutorCedula": tutor.cedula if tutor else None,
        "tutorNombre": tutor.nombre_completo if tutor else None,
    }


def pdf_research(entity) -> dict[str, Any]:
    return {
        "nombreProyecto": entity.proyecto,
        "estado": entity.estado,
        "carrera": _carrera(entity),
        "periodo": _periodo(entity),
        "estudiante": _pdf_student(entity.estudiante),
    }


def pdf_thesis(entity) -> dict[str, Any]:
    return {
        "nombreProyecto": entity.proyecto,
        "estado": entity.estado,
        "fecha": entity.fecha,
        "carrera": _carrera(entity),
        "periodo": _periodo(entity),
        **_tutor_pdf_fields(entity.tutor),
        "estudiante": _pdf_student(entity.estudiante),
    }


def pdf_internship(entity) -> dict[str, Any]:
    return {
        "titulo": entity.titulo,
        "estado": entity.estado,
        "fechaInicio": entity.fecha_inicio,
        "fechaFinal": entity.fecha_final,
        "periodo": _periodo(entity),
        "carrera": _carrera(entity),
        "empresa": entity.empresa.nombre_empresa if entity.empresa else None,
        **_tutor_pdf_fields(entity.tutor),
        "estudiante": _pdf_student(entity.estudiante),
    }


def pdf_community(entity) -> dict[str, Any]:
    return {
        "nombreProyecto": entity.proyecto,
        "comunidad": entity.comunidad,
        "estado": entity.estado,
        "fechaInicio": entity.fecha_inicio,
        "fechaFinal": entity.fecha_final,
        "carrera": _carrera(entity),
        "periodo": _periodo(entity),
        **_tutor_pdf_fields(entity.tutor),
        "integrantes": [_pdf_student(s) for s in _members(entity)],
    }


__all__ = [
    "detail_community",
    "detail_thesis",
    "detail_research",
    "detail_internship",
    "deleted_community",
    "deleted_thesis",
    "deleted_research",
    "deleted_internship",
    "pdf_community",
    "pdf_thesis",
    "pdf_research",
    "pdf_internship",
]
# Fin del archivo backend/app/modules/projects/services/project_serializers.py
