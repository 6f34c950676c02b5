# -*- coding: utf-8 -*-
"""
Tests del registro de bitácora (AuditRecorder) y de GET /api/bitacora.
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.modules.audit.services import (
    ANONYMOUS_USER_NAME,
    UNKNOWN_USER_NAME,
    AuditRecorder,
)
from app.observability.prom import AUDIT_WRITE_FAILURES

from tests.support import ADMIN_NAME, audit_rows, create_admin

pytestmark = pytest.mark.anyio


async def test_records_actor_name_from_administrator(db_schema):
    ids = await create_admin()
    recorder = AuditRecorder()

    ok = await recorder(
        "Estudiantes", "Creación", "Se creó un estudiante",
        registro_afectado_id=15, id_login=ids["id_login"],
    )

    assert ok is True
    rows = await audit_rows()
    assert len(rows) == 1
    row = rows[0]
    assert row.nombre_usuario == ADMIN_NAME
    assert row.id_login == ids["id_login"]
    assert row.registro_afectado_id == "15"
    assert row.fecha_hora is not None


async def test_anonymous_and_unknown_actor_names(db_schema):
    recorder = AuditRecorder()
    await recorder("Autenticación", "Intento de Inicio de Sesión Fallido")
    await recorder("Autenticación", "Cierre de Sesión", id_login=9999)

    rows = await audit_rows()
    assert [r.nombre_usuario for r in rows] == [ANONYMOUS_USER_NAME, UNKNOWN_USER_NAME]
    assert rows[0].id_login is None


@pytest.mark.parametrize("modulo,accion", [("", "Creación"), ("Estudiantes", ""), (None, "X")])
async def test_invalid_entries_are_not_written(db_schema, modulo, accion):
    ok = await AuditRecorder()(modulo, accion)
    assert ok is False
    assert await audit_rows() == []


async def test_write_failures_are_swallowed_and_counted(db_schema):
    class _BrokenSession:
        async def __aenter__(self):
            raise OperationalError("INSERT", {}, Exception("db down"))

        async def __aexit__(self, *exc):
            return False

    before = AUDIT_WRITE_FAILURES.labels("Tutores")._value.get()

    ok = await AuditRecorder(session_factory=_BrokenSession)("Tutores", "Creación")

    assert ok is False
    assert AUDIT_WRITE_FAILURES.labels("Tutores")._value.get() == before + 1


async def test_bitacora_route_lists_entries(client):
    recorder = AuditRecorder()
    await recorder("Tutores", "Creación", "Se creó un tutor", registro_afectado_id=1)
    await recorder("Tutores", "Actualización", "Se actualizó un tutor", registro_afectado_id=1)

    response = await client.get("/api/bitacora")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert {e["accion_realizada"] for e in body} == {"Creación", "Actualización"}
    assert all(e["modulo_afectado"] == "Tutores" for e in body)
