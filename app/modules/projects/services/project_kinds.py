# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/project_kinds.py

Registro de los cuatro tipos de proyecto.

Cada ProjectKind reúne lo que varía entre tipos: modelo y columnas
(clave primaria, nombre, bandera y mensaje de eliminación), rutas,
textos de bitácora y de respuesta, y los serializadores. Los servicios
y repositorios genéricos trabajan solo contra esta descripción.

Autor: Ixchel Beristain
Fecha: 01/10/2026
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Type

from app.modules.projects.models import (
    Pasantia,
    ProyectoInvestigacion,
    ServicioComunitario,
    TrabajoGrado,
)
from app.shared.utils.http_exceptions import NotFoundException

from . import project_serializers as ser

Serializer = Callable[[Any], dict]


@dataclass(frozen=True)
class KindMessages:
    created: str
    updated: str
    deleted: str
    restored: str
    not_found: str
    missing_create: str
    missing_update: str


@dataclass(frozen=True)
class ProjectKind:
    key: str                  # /dashboard/count/{key}, /proyectos-eliminados/{key}
    collection: str           # /{collection}, /{collection}/{id}, /publicas/{collection}/...
    create_path: str          # POST /{create_path}
    label: str                # tipo_proyecto
    model: Type[Any]
    pk_name: str
    name_attr: str
    flag_attr: str
    message_attr: str
    restore_message_attr: Optional[str]
    audit_module: str
    noun: str                 # sustantivo en las acciones de bitácora
    messages: KindMessages
    to_detail: Serializer
    to_deleted: Serializer
    to_pdf: Serializer

    @property
    def pk(self):
        return getattr(self.model, self.pk_name)

    @property
    def name_column(self):
        return getattr(self.model, self.name_attr)

    @property
    def flag_column(self):
        return getattr(self.model, self.flag_attr)

    @property
    def message_column(self):
        return getattr(self.model, self.message_attr)

    @property
    def restore_message_column(self):
        if self.restore_message_attr is None:
            return None
        return getattr(self.model, self.restore_message_attr)


COMMUNITY_SERVICE = ProjectKind(
    key="servicio-comunitario",
    collection="proyectos-comunitarios",
    create_path="agregar-proyecto-comunitario",
    label="Servicio Comunitario",
    model=ServicioComunitario,
    pk_name="id_servicio",
    name_attr="proyecto",
    flag_attr="eliminados",
    message_attr="mensaje_eliminacion",
    restore_message_attr=None,
    audit_module="Servicio Comunitario",
    noun="Proyecto Comunitario",
    messages=KindMessages(
        created="Proyecto agregado exitosamente.",
        updated="Proyecto actualizado exitosamente.",
        deleted="Proyecto eliminado lógicamente exitosamente.",
        restored="Proyecto restaurado exitosamente.",
        not_found="Proyecto no encontrado.",
        missing_create="Faltan campos obligatorios para el proyecto.",
        missing_update="Faltan campos obligatorios para actualizar el proyecto.",
    ),
    to_detail=ser.detail_community,
    to_deleted=ser.deleted_community,
    to_pdf=ser.pdf_community,
)

THESIS = ProjectKind(
    key="trabajo-de-grado",
    collection="trabajos-de-grado",
    create_path="agregar-trabajo-de-grado",
    label="Trabajo de Grado",
    model=TrabajoGrado,
    pk_name="id_trabajo_grado",
    name_attr="proyecto",
    flag_attr="eliminados",
    message_attr="mensaje_eliminacion",
    restore_message_attr=None,
    audit_module="Trabajo de Grado",
    noun="Trabajo de Grado",
    messages=KindMessages(
        created="Trabajo de grado agregado exitosamente.",
        updated="Trabajo de grado actualizado exitosamente.",
        deleted="Trabajo de grado eliminado lógicamente exitosamente.",
        restored="Trabajo de grado restaurado exitosamente.",
        not_found="Trabajo de grado no encontrado.",
        missing_create="Faltan campos obligatorios para el trabajo de grado.",
        missing_update="Faltan campos obligatorios para actualizar el trabajo de grado.",
    ),
    to_detail=ser.detail_thesis,
    to_deleted=ser.deleted_thesis,
    to_pdf=ser.pdf_thesis,
)

RESEARCH = ProjectKind(
    key="proyectos-investigacion",
    collection="proyectos-investigacion",
    create_path="agregar-proyecto-investigacion",
    label="Proyecto de Investigación",
    model=ProyectoInvestigacion,
    pk_name="id_proyecto_investigacion",
    name_attr="proyecto",
    flag_attr="eliminados",
    message_attr="mensaje_eliminacion",
    restore_message_attr="mensaje_restauracion",
    audit_module="Proyectos de Investigación",
    noun="Proyecto de Investigación",
    messages=KindMessages(
        created="Proyecto de investigación agregado exitosamente.",
        updated="Proyecto de investigación actualizado exitosamente.",
        deleted="Proyecto de investigación eliminado lógicamente exitosamente.",
        restored="Proyecto de investigación restaurado exitosamente.",
        not_found="Proyecto de investigación no encontrado.",
        missing_create="Faltan campos obligatorios para el proyecto de investigación.",
        missing_update="Faltan campos obligatorios para actualizar el proyecto de investigación.",
    ),
    to_detail=ser.detail_research,
    to_deleted=ser.deleted_research,
    to_pdf=ser.pdf_research,
)

INTERNSHIP = ProjectKind(
    key="pasantias",
    collection="pasantias",
    create_path="agregar-pasantia",
    label="Pasantía",
    model=Pasantia,
    pk_name="id_pasantia",
    name_attr="titulo",
    flag_attr="eliminado",
    message_attr="mensaje_eliminado",
    restore_message_attr=None,
    audit_module="Pasantías",
    noun="Pasantía",
    messages=KindMessages(
        created="Pasantía agregada exitosamente.",
        updated="Pasantía actualizada exitosamente.",
        deleted="Pasantía eliminada lógicamente exitosamente.",
        restored="Pasantía restaurada exitosamente.",
        not_found="Pasantía no encontrada.",
        missing_create="Faltan campos obligatorios para la pasantía.",
        missing_update="Faltan campos obligatorios para actualizar la pasantía.",
    ),
    to_detail=ser.detail_internship,
    to_deleted=ser.deleted_internship,
    to_pdf=ser.pdf_internship,
)

# Orden de presentación en /proyectos-eliminados
PROJECT_KINDS: tuple[ProjectKind, ...] = (COMMUNITY_SERVICE, THESIS, RESEARCH, INTERNSHIP)

KINDS_BY_KEY = {k.key: k for k in PROJECT_KINDS}
KINDS_BY_COLLECTION = {k.collection: k for k in PROJECT_KINDS}

UNKNOWN_KIND = "Tipo de proyecto no válido."


def get_kind(key: str) -> ProjectKind:
    kind = KINDS_BY_KEY.get(key)
    if kind is None:
        raise NotFoundException(UNKNOWN_KIND)
    return kind


def get_kind_by_collection(collection: str) -> ProjectKind:
    kind = KINDS_BY_COLLECTION.get(collection)
    if kind is None:
        raise NotFoundException(UNKNOWN_KIND)
    return kind


__all__ = [
    "KindMessages",
    "ProjectKind",
    "COMMUNITY_SERVICE",
    "THESIS",
    "RESEARCH",
    "INTERNSHIP",
    "PROJECT_KINDS",
    "KINDS_BY_KEY",
    "KINDS_BY_COLLECTION",
    "get_kind",
    "get_kind_by_collection",
]
# Fin del archivo backend/app/modules/projects/services/project_kinds.py
