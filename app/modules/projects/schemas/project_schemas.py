# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/project_schemas.py

Schemas de proyectos.

Los formularios del panel envían camelCase (periodoId, nombreProyecto,
tutor.cedulaTutor, ...); también se aceptan los nombres snake_case.
Un único ProjectPayload cubre los cuatro tipos: cada servicio decide
qué campos son obligatorios.

Autor: Ixchel Beristain
Fecha: 01/10/2026
"""

from typing import List, Optional

from pydantic import AliasChoices, Field

from app.shared.utils.base_models import OptionalDate, OptionalInt, RequestModel, UTF8SafeModel


def _alias(*names: str) -> AliasChoices:
    return AliasChoices(*names)


# ========== REQUESTS ==========

class TutorRef(RequestModel):
    cedula: Optional[str] = Field(None, validation_alias=_alias("cedulaTutor", "cedula_tutor", "cedula"))
    nombre_completo: Optional[str] = Field(
        None, validation_alias=_alias("nombreCompletoTutor", "nombre_completo_tutor", "nombre_completo")
    )


class StudentRef(RequestModel):
    cedula: Optional[str] = Field(
        None, validation_alias=_alias("cedulaEstudiante", "cedula_estudiante", "cedula")
    )
    nombre_completo: Optional[str] = Field(
        None,
        validation_alias=_alias("nombreCompletoEstudiante", "nombre_completo_estudiante", "nombre_completo"),
    )


class MemberRef(RequestModel):
    """Integrante de un servicio comunitario"""
    cedula: Optional[str] = None
    nombre_completo: Optional[str] = Field(
        None, validation_alias=_alias("nombreCompleto", "nombre_completo")
    )


class ProjectPayload(RequestModel):
    periodo_id: OptionalInt = Field(None, validation_alias=_alias("periodoId", "periodo_id", "id_periodo"))
    nombre_proyecto: Optional[str] = Field(
        None, validation_alias=_alias("nombreProyecto", "nombre_proyecto", "proyecto")
    )
    titulo: Optional[str] = None
    carrera_id: OptionalInt = Field(None, validation_alias=_alias("carreraId", "carrera_id", "id_carrera"))
    estado: Optional[str] = None
    comunidad: Optional[str] = None
    fecha_inicio: OptionalDate = Field(None, validation_alias=_alias("fechaInicio", "fecha_inicio"))
    fecha_final: OptionalDate = Field(None, validation_alias=_alias("fechaFinal", "fecha_final"))
    fecha: OptionalDate = None
    empresa_id: OptionalInt = Field(None, validation_alias=_alias("empresaId", "empresa_id", "id_empresa"))
    tutor: Optional[TutorRef] = None
    estudiante: Optional[StudentRef] = None
    integrantes: Optional[List[MemberRef]] = None

    @property
    def project_name(self) -> Optional[str]:
        # Pasantías usan "titulo"; el resto "nombreProyecto"
        return self.titulo or self.nombre_proyecto


class SoftDeleteRequest(RequestModel):
    mensaje_eliminacion: Optional[str] = Field(
        None, validation_alias=_alias("mensajeEliminacion", "mensaje_eliminacion")
    )


class RestoreRequest(RequestModel):
    mensaje_restauracion: Optional[str] = Field(
        None, validation_alias=_alias("mensajeRestauracion", "mensaje_restauracion")
    )


# ========== RESPONSES ==========

class PersonBrief(UTF8SafeModel):
    cedula: str
    nombre_completo: str


class DeletedProjectOut(UTF8SafeModel):
    """Forma común de un proyecto eliminado, sea del tipo que sea"""
    id: int
    tipo_proyecto: str
    periodo: str = ""
    nombre_proyecto: str
    carrera: str = ""
    tutor: Optional[PersonBrief] = None
    estudiantes: List[PersonBrief] = Field(default_factory=list)
    mensaje_eliminacion: Optional[str] = None


__all__ = [
    "TutorRef",
    "StudentRef",
    "MemberRef",
    "ProjectPayload",
    "SoftDeleteRequest",
    "RestoreRequest",
    "PersonBrief",
    "DeletedProjectOut",
]
# Fin del archivo backend/app/modules/projects/schemas/project_schemas.py
