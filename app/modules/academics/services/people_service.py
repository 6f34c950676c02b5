# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/services/people_service.py

CRUD con baja lógica de estudiantes (módulo de bitácora "Estudiantes")
y tutores ("Tutores").

Las dos entidades siguen el mismo flujo; PersonService lo implementa
una vez y StudentService / TutorService fijan repositorio, mensajes y
forma de la respuesta.

Autor: Ixchel Beristain
Fecha: 29/09/2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.repositories import PersonRepository, StudentRepository, TutorRepository
from app.modules.academics.schemas import (
    StudentListItem,
    StudentOut,
    StudentRequest,
    TutorOut,
    TutorRequest,
)
from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.shared.database.database import get_async_session
from app.shared.utils.base_models import any_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    InternalServerException,
    NotFoundException,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Nombre completo y cédula son obligatorios."
GENERIC_ERROR = "Error interno del servidor."


class PersonService:
    repository_cls: Type[PersonRepository]
    audit_module: str
    label: str          # "Estudiante" / "Tutor"
    noun: str           # "estudiante" / "tutor"
    plural: str         # "estudiantes" / "tutores"

    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._repo = self.repository_cls(db)
        self._audit = audit

    # ----- puntos de extensión -----
    def _values(self, payload) -> dict[str, Any]:
        return {
            "nombre_completo": payload.nombre_completo.strip(),
            "cedula": payload.cedula.strip(),
        }

    def _serialize(self, entity) -> dict:
        raise NotImplementedError

    def _serialize_list_item(self, entity) -> dict:
        return self._serialize(entity)

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def list_active(self) -> list[dict]:
        try:
            entities = await self._repo.list_active()
        except SQLAlchemyError:
            logger.exception("%s_list_failed", self.noun)
            await self._audit(
                self.audit_module, "Error al obtener datos",
                f"Error al obtener la lista de {self.plural}.",
            )
            raise InternalServerException(f"Error al obtener los datos de los {self.plural}")
        return [self._serialize_list_item(e) for e in entities]

    async def get(self, entity_id: int) -> dict:
        try:
            entity = await self._repo.get_by_id(entity_id)
        except SQLAlchemyError:
            logger.exception("%s_get_failed id=%s", self.noun, entity_id)
            raise InternalServerException("Error interno del servidor")
        if entity is None:
            raise NotFoundException(f"{self.label} no encontrado")
        return self._serialize_list_item(entity)

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    async def create(self, payload, *, actor_id: Optional[int] = None) -> dict:
        if any_blank(payload.nombre_completo, payload.cedula):
            await self._audit(
                self.audit_module, "Intento de Creación Fallido",
                f"Intento fallido de crear {self.noun}: faltan campos obligatorios.",
                id_login=actor_id,
            )
            raise BadRequestException(MISSING_FIELDS)

        values = self._values(payload)
        try:
            entity = await self._repo.create(**values)
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("%s_create_failed cedula=%s", self.noun, values["cedula"])
            await self._audit(
                self.audit_module, "Error de Creación",
                f"Falló la creación del {self.noun} con cédula {values['cedula']}.",
                id_login=actor_id,
            )
            raise InternalServerException(f"Error al crear el {self.noun}")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("%s_create_exception cedula=%s", self.noun, values["cedula"])
            await self._audit(
                self.audit_module, f"Error de Excepción al Crear {self.label}",
                f"Excepción al crear el {self.noun} con cédula {values['cedula']}. Mensaje: {exc}.",
                id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            self.audit_module, "Creación",
            f"Se creó un nuevo {self.noun}: {entity.nombre_completo} (Cédula: {entity.cedula})",
            registro_afectado_id=getattr(entity, self._repo.pk_name), id_login=actor_id,
        )
        return {"message": f"{self.label} creado con éxito", "data": self._serialize(entity)}

    async def update(self, entity_id: int, payload, *, actor_id: Optional[int] = None) -> dict:
        if any_blank(payload.nombre_completo, payload.cedula):
            await self._audit(
                self.audit_module, "Intento de Actualización Fallido",
                f"Intento fallido de actualizar el {self.noun} con ID {entity_id}: faltan campos obligatorios.",
                registro_afectado_id=entity_id, id_login=actor_id,
            )
            raise BadRequestException(MISSING_FIELDS)

        values = self._values(payload)
        try:
            entity = await self._repo.get_by_id(entity_id)
            if entity is None:
                await self._db.rollback()
                await self._audit(
                    self.audit_module, "Intento de Actualización Fallido",
                    f"No existe el {self.noun} con ID {entity_id}.",
                    registro_afectado_id=entity_id, id_login=actor_id,
                )
                raise NotFoundException(f"{self.label} no encontrado")
            for key, value in values.items():
                setattr(entity, key, value)
            await self._db.flush()
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("%s_update_failed id=%s", self.noun, entity_id)
            await self._audit(
                self.audit_module, "Error de Actualización",
                f"Falló la actualización del {self.noun} con ID {entity_id}.",
                registro_afectado_id=entity_id, id_login=actor_id,
            )
            raise InternalServerException(f"Error al actualizar el {self.noun}")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("%s_update_exception id=%s", self.noun, entity_id)
            await self._audit(
                self.audit_module, f"Error de Excepción al Actualizar {self.label}",
                f"Excepción al actualizar el {self.noun} con ID {entity_id}. Mensaje: {exc}.",
                registro_afectado_id=entity_id, id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            self.audit_module, "Actualización",
            f"Se actualizó el {self.noun} con ID {entity_id} a: "
            f"{values['nombre_completo']} (Cédula: {values['cedula']})",
            registro_afectado_id=entity_id, id_login=actor_id,
        )
        return {"message": f"{self.label} actualizado con éxito", "data": self._serialize(entity)}

    async def soft_delete(self, entity_id: int, *, actor_id: Optional[int] = None) -> dict:
        try:
            changed = await self._repo.soft_delete(entity_id)
            if not changed:
                await self._db.rollback()
                await self._audit(
                    self.audit_module, "Intento de Eliminación Lógica Fallido",
                    f"No existe el {self.noun} con ID {entity_id}.",
                    registro_afectado_id=entity_id, id_login=actor_id,
                )
                raise NotFoundException(f"{self.label} no encontrado")
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("%s_soft_delete_failed id=%s", self.noun, entity_id)
            await self._audit(
                self.audit_module, "Error de Eliminación Lógica",
                f"Falló la eliminación lógica del {self.noun} con ID {entity_id}.",
                registro_afectado_id=entity_id, id_login=actor_id,
            )
            raise InternalServerException(f"Error al eliminar el {self.noun}")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("%s_soft_delete_exception id=%s", self.noun, entity_id)
            await self._audit(
                self.audit_module, f"Error de Excepción al Eliminar {self.label}",
                f"Excepción al eliminar lógicamente el {self.noun} con ID {entity_id}. Mensaje: {exc}.",
                registro_afectado_id=entity_id, id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            self.audit_module, "Eliminación Lógica",
            f"Se eliminó lógicamente el {self.noun} con ID {entity_id}",
            registro_afectado_id=entity_id, id_login=actor_id,
        )
        return {"message": f"{self.label} eliminado lógicamente con éxito"}


class StudentService(PersonService):
    repository_cls = StudentRepository
    audit_module = "Estudiantes"
    label = "Estudiante"
    noun = "estudiante"
    plural = "estudiantes"

    def _values(self, payload: StudentRequest) -> dict[str, Any]:
        values = super()._values(payload)
        values["id_carrera"] = payload.id_carrera
        return values

    def _serialize(self, entity) -> dict:
        return StudentOut.model_validate(entity).model_dump()

    def _serialize_list_item(self, entity) -> dict:
        # Solo para filas leídas con SELECT: `carrera` ya viene cargada
        return StudentListItem(
            id_estudiante=entity.id_estudiante,
            nombre_completo=entity.nombre_completo,
            cedula=entity.cedula,
            id_carrera=entity.id_carrera,
            carrera=entity.nombre_carrera or "N/A",
        ).model_dump()


class TutorService(PersonService):
    repository_cls = TutorRepository
    audit_module = "Tutores"
    label = "Tutor"
    noun = "tutor"
    plural = "tutores"

    def _serialize(self, entity) -> dict:
        return TutorOut.model_validate(entity).model_dump()


def get_student_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> StudentService:
    return StudentService(db, audit)


def get_tutor_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> TutorService:
    return TutorService(db, audit)


__all__ = [
    "PersonService",
    "StudentService",
    "TutorService",
    "get_student_service",
    "get_tutor_service",
]
# Fin del archivo backend/app/modules/academics/services/people_service.py
