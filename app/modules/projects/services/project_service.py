# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/project_service.py

Servicios CRUD de proyectos con baja lógica y bitácora.

ProjectService implementa el flujo común contra un ProjectKind; cada
subclase declara qué campos son obligatorios, cómo se mapean a columnas
y cómo se vinculan tutor y estudiantes:

- CommunityServiceProjectService: tutor + integrantes (varios estudiantes)
- ThesisProjectService:           tutor + un estudiante + fecha
- ResearchProjectService:         un estudiante, sin tutor
- InternshipProjectService:       tutor + un estudiante + empresa

Tutor y estudiantes se crean o actualizan por cédula. Cada alta o
modificación va en una sola transacción: si algo falla no queda ni el
proyecto ni las personas creadas para él.

Autor: Ixchel Beristain
Fecha: 02/10/2026
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.repositories import StudentRepository, TutorRepository
from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.projects.models import Integrante
from app.modules.projects.repositories import ProjectRepository
from app.modules.projects.schemas import ProjectPayload, RestoreRequest, SoftDeleteRequest
from app.shared.database.database import get_async_session
from app.shared.utils.base_models import any_blank, is_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    InternalServerException,
    NotFoundException,
)

from .project_kinds import (
    COMMUNITY_SERVICE,
    INTERNSHIP,
    RESEARCH,
    THESIS,
    ProjectKind,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error interno del servidor."


def _clean(value: Optional[str]) -> Optional[str]:
    return None if is_blank(value) else value.strip()


class ProjectService:
    kind: ProjectKind
    has_tutor: bool = True
    single_student: bool = True

    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._repo = ProjectRepository(db, self.kind)
        self._students = StudentRepository(db)
        self._tutors = TutorRepository(db)
        self._audit = audit

    async def _record(
        self,
        accion: str,
        descripcion: str,
        *,
        registro: Any = None,
        actor_id: Optional[int] = None,
    ) -> None:
        await self._audit(
            self.kind.audit_module, accion, descripcion,
            registro_afectado_id=registro, id_login=actor_id,
        )

    # ------------------------------------------------------------------
    # Puntos de extensión
    # ------------------------------------------------------------------
    def _extra_required(self, payload: ProjectPayload, *, creating: bool) -> list:
        return []

    def _extra_values(self, payload: ProjectPayload) -> dict[str, Any]:
        return {}

    def _is_incomplete(self, payload: ProjectPayload, *, creating: bool) -> bool:
        required: list = [payload.periodo_id, payload.project_name, payload.carrera_id, payload.estado]
        if self.has_tutor:
            tutor = payload.tutor
            required += [tutor, tutor and tutor.cedula, tutor and tutor.nombre_completo]
        if self.single_student:
            student = payload.estudiante
            required += [student, student and student.cedula, student and student.nombre_completo]
        required += self._extra_required(payload, creating=creating)
        return any_blank(*required)

    def _column_values(self, payload: ProjectPayload) -> dict[str, Any]:
        values = {
            self.kind.name_attr: payload.project_name.strip(),
            "id_periodo": payload.periodo_id,
            "id_carrera": payload.carrera_id,
            "estado": payload.estado.strip(),
        }
        values.update(self._extra_values(payload))
        return values

    async def _link_people(self, entity: Any, payload: ProjectPayload, *, creating: bool) -> None:
        if self.has_tutor:
            tutor = await self._tutors.upsert_by_cedula(
                payload.tutor.cedula, payload.tutor.nombre_completo
            )
            entity.id_tutor = tutor.id_tutor
        if self.single_student:
            student = await self._students.upsert_by_cedula(
                payload.estudiante.cedula,
                payload.estudiante.nombre_completo,
                id_carrera=payload.carrera_id,
            )
            entity.id_estudiante = student.id_estudiante

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def list_active(self) -> list[dict]:
        try:
            entities = await self._repo.list_by_deleted(False)
        except SQLAlchemyError:
            logger.exception("project_list_failed kind=%s", self.kind.key)
            raise InternalServerException("Error interno del servidor al obtener proyectos.")
        return [self.kind.to_detail(e) for e in entities]

    async def get(self, project_id: int) -> dict:
        try:
            entity = await self._repo.get_by_id(project_id)
        except SQLAlchemyError:
            logger.exception("project_get_failed kind=%s id=%s", self.kind.key, project_id)
            raise InternalServerException("Error interno del servidor al obtener el proyecto.")
        if entity is None:
            raise NotFoundException(self.kind.messages.not_found)
        return self.kind.to_detail(entity)

    # ------------------------------------------------------------------
    # Alta
    # ------------------------------------------------------------------
    async def create(self, payload: ProjectPayload, *, actor_id: Optional[int] = None) -> dict:
        k = self.kind
        if self._is_incomplete(payload, creating=True):
            await self._record(
                f"Intento de Agregar {k.noun} Fallido",
                f"Intento fallido de agregar {k.noun}: Faltan campos obligatorios.",
                actor_id=actor_id,
            )
            raise BadRequestException(k.messages.missing_create)

        try:
            entity = k.model(**self._column_values(payload))
            await self._link_people(entity, payload, creating=True)
            await self._repo.add(entity)
            project_id = getattr(entity, k.pk_name)
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("project_create_failed kind=%s", k.key)
            await self._record(
                f"Error al Agregar {k.noun}",
                f'Error al guardar {k.noun} "{payload.project_name}".',
                actor_id=actor_id,
            )
            raise InternalServerException("Error interno del servidor al agregar proyecto.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("project_create_exception kind=%s", k.key)
            await self._record(
                f"Error de Excepción al Agregar {k.noun}",
                f"Excepción al agregar {k.noun}. Mensaje: {exc}.",
                actor_id=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._record(
            f"Agregar {k.noun}",
            f'Se agregó {k.noun} "{payload.project_name.strip()}" (ID: {project_id}).',
            registro=project_id, actor_id=actor_id,
        )
        return {"message": k.messages.created, k.pk_name: project_id}

    # ------------------------------------------------------------------
    # Modificación
    # ------------------------------------------------------------------
    async def update(
        self,
        project_id: int,
        payload: ProjectPayload,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        k = self.kind
        if self._is_incomplete(payload, creating=False):
            await self._record(
                f"Intento de Actualizar {k.noun} Fallido",
                f"Intento fallido de actualizar {k.noun} ID {project_id}: Faltan campos obligatorios.",
                registro=project_id, actor_id=actor_id,
            )
            raise BadRequestException(k.messages.missing_update)

        try:
            entity = await self._repo.get_by_id(project_id)
            if entity is None:
                await self._db.rollback()
                await self._record(
                    f"Intento de Actualizar {k.noun} Fallido",
                    f"Intento fallido de actualizar {k.noun} ID {project_id}: no encontrado.",
                    registro=project_id, actor_id=actor_id,
                )
                raise NotFoundException(k.messages.not_found)

            for attr, value in self._column_values(payload).items():
                setattr(entity, attr, value)
            await self._link_people(entity, payload, creating=False)
            await self._db.flush()
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("project_update_failed kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error al Modificar {k.noun}",
                f"Error al actualizar {k.noun} ID {project_id}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException("Error interno del servidor al actualizar proyecto.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("project_update_exception kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error de Excepción al Modificar {k.noun}",
                f"Excepción al actualizar {k.noun} ID {project_id}. Mensaje: {exc}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._record(
            f"Modificar {k.noun}",
            f'Se actualizó {k.noun} "{payload.project_name.strip()}" (ID: {project_id}).',
            registro=project_id, actor_id=actor_id,
        )
        return {"message": k.messages.updated}

    # ------------------------------------------------------------------
    # Baja y restauración lógica
    # ------------------------------------------------------------------
    async def soft_delete(
        self,
        project_id: int,
        payload: Optional[SoftDeleteRequest] = None,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        k = self.kind
        mensaje = _clean(payload.mensaje_eliminacion) if payload else None
        try:
            name = await self._repo.get_name(project_id)
            if name is None:
                await self._db.rollback()
                await self._record(
                    f"Intento de Eliminar {k.noun} Fallido",
                    f"Intento fallido de eliminar lógicamente {k.noun} ID {project_id}: no encontrado.",
                    registro=project_id, actor_id=actor_id,
                )
                raise NotFoundException(k.messages.not_found)
            await self._repo.soft_delete(project_id, mensaje)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("project_soft_delete_failed kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error al Eliminar {k.noun} (Lógico)",
                f"Error interno al eliminar lógicamente {k.noun} ID {project_id}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException(
                "Error interno del servidor al eliminar lógicamente el proyecto."
            )
        except Exception as exc:
            await self._db.rollback()
            logger.exception("project_soft_delete_exception kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error de Excepción al Eliminar {k.noun} (Lógico)",
                f"Excepción al eliminar lógicamente {k.noun} ID {project_id}. Mensaje: {exc}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._record(
            f"Eliminar {k.noun} (Lógico)",
            f'Se eliminó lógicamente {k.noun} "{name}" (ID: {project_id}). '
            f'Mensaje: "{mensaje or "Sin mensaje"}".',
            registro=project_id, actor_id=actor_id,
        )
        return {"message": k.messages.deleted}

    async def restore(
        self,
        project_id: int,
        payload: Optional[RestoreRequest] = None,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        k = self.kind
        mensaje = _clean(payload.mensaje_restauracion) if payload else None
        try:
            name = await self._repo.get_name(project_id)
            if name is None:
                await self._db.rollback()
                await self._record(
                    f"Intento de Restaurar {k.noun} Fallido",
                    f"Intento fallido de restaurar {k.noun} ID {project_id}: no encontrado.",
                    registro=project_id, actor_id=actor_id,
                )
                raise NotFoundException(k.messages.not_found)
            await self._repo.restore(project_id, mensaje)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("project_restore_failed kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error al Restaurar {k.noun}",
                f"Error interno al restaurar {k.noun} ID {project_id}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException("Error interno del servidor al restaurar el proyecto.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("project_restore_exception kind=%s id=%s", k.key, project_id)
            await self._record(
                f"Error de Excepción al Restaurar {k.noun}",
                f"Excepción al restaurar {k.noun} ID {project_id}. Mensaje: {exc}.",
                registro=project_id, actor_id=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._record(
            f"Restaurar {k.noun}",
            f'Se restauró {k.noun} "{name}" (ID: {project_id}).',
            registro=project_id, actor_id=actor_id,
        )
        return {"message": k.messages.restored}


# ======================================================================
# Tipos concretos
# ======================================================================

class CommunityServiceProjectService(ProjectService):
    kind = COMMUNITY_SERVICE
    single_student = False

    def _extra_required(self, payload: ProjectPayload, *, creating: bool) -> list:
        required = [payload.comunidad, payload.fecha_inicio, payload.fecha_final]
        members = payload.integrantes
        if creating:
            # Al crear debe haber al menos un integrante
            required.append(members)
        elif members is None:
            required.append(None)
        for member in members or []:
            required += [member.cedula, member.nombre_completo]
        return required

    def _extra_values(self, payload: ProjectPayload) -> dict[str, Any]:
        return {
            "comunidad": payload.comunidad.strip(),
            "fecha_inicio": payload.fecha_inicio,
            "fecha_final": payload.fecha_final,
        }

    async def _link_people(self, entity: Any, payload: ProjectPayload, *, creating: bool) -> None:
        await super()._link_people(entity, payload, creating=creating)

        # Estudiantes por cédula, sin duplicados y en el orden recibido
        student_ids: dict[str, int] = {}
        for member in payload.integrantes or []:
            cedula = member.cedula.strip()
            if cedula in student_ids:
                continue
            student = await self._students.upsert_by_cedula(
                cedula, member.nombre_completo, id_carrera=payload.carrera_id
            )
            student_ids[cedula] = student.id_estudiante

        if creating:
            entity.integrantes = [Integrante(id_estudiante=sid) for sid in student_ids.values()]
            return

        current = {
            (i.estudiante.cedula if i.estudiante else None): i for i in list(entity.integrantes)
        }
        for cedula, integrante in current.items():
            if cedula not in student_ids:
                entity.integrantes.remove(integrante)
        for cedula, student_id in student_ids.items():
            if cedula not in current:
                entity.integrantes.append(Integrante(id_estudiante=student_id))


class ThesisProjectService(ProjectService):
    kind = THESIS

    def _extra_required(self, payload: ProjectPayload, *, creating: bool) -> list:
        return [payload.fecha]

    def _extra_values(self, payload: ProjectPayload) -> dict[str, Any]:
        return {"fecha": payload.fecha}


class ResearchProjectService(ProjectService):
    kind = RESEARCH
    has_tutor = False


class InternshipProjectService(ProjectService):
    kind = INTERNSHIP

    def _extra_required(self, payload: ProjectPayload, *, creating: bool) -> list:
        return [payload.empresa_id, payload.fecha_inicio, payload.fecha_final]

    def _extra_values(self, payload: ProjectPayload) -> dict[str, Any]:
        return {
            "id_empresa": payload.empresa_id,
            "fecha_inicio": payload.fecha_inicio,
            "fecha_final": payload.fecha_final,
        }


PROJECT_SERVICES: dict[str, type[ProjectService]] = {
    cls.kind.key: cls
    for cls in (
        CommunityServiceProjectService,
        ThesisProjectService,
        ResearchProjectService,
        InternshipProjectService,
    )
}


def project_service_provider(kind: ProjectKind) -> Callable[..., ProjectService]:
    """Fábrica de dependencias FastAPI: una por tipo de proyecto."""
    service_cls = PROJECT_SERVICES[kind.key]

    def _provider(
        db: AsyncSession = Depends(get_async_session),
        audit: AuditRecorder = Depends(get_audit_recorder),
    ) -> ProjectService:
        return service_cls(db, audit)

    _provider.__name__ = f"get_{kind.key.replace('-', '_')}_service"
    return _provider


__all__ = [
    "ProjectService",
    "CommunityServiceProjectService",
    "ThesisProjectService",
    "ResearchProjectService",
    "InternshipProjectService",
    "PROJECT_SERVICES",
    "project_service_provider",
]
# Fin del archivo backend/app/modules/projects/services/project_service.py
