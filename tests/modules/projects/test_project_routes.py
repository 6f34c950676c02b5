# -*- coding: utf-8 -*-
"""
Tests del CRUD de los cuatro tipos de proyecto: alta con vinculación de
personas por cédula, modificación, baja lógica y restauración.
"""

from contextlib import contextmanager

import pytest
from sqlalchemy import event

from app.modules.academics.models import Estudiante, Tutor
from app.modules.projects.models import TrabajoGrado
from app.shared.database import engine

from tests.modules.projects.payloads import KIND_IDS, KINDS, community, thesis
from tests.support import audit_actions, audit_rows, count_rows

pytestmark = pytest.mark.anyio


def _name(body: dict) -> str:
    return body.get("titulo") or body.get("nombre_proyecto")


def _deleted_flag(body: dict) -> bool:
    return body["eliminado"] if "eliminado" in body else body["eliminados"]


@contextmanager
def count_updates():
    """Cuenta las sentencias UPDATE emitidas contra el engine."""
    seen: list[str] = []

    def _before(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("UPDATE"):
            seen.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", _before)
    try:
        yield seen
    finally:
        event.remove(engine.sync_engine, "before_cursor_execute", _before)


@pytest.mark.parametrize("create_path,collection,pk,build,module,noun", KINDS, ids=KIND_IDS)
async def test_project_lifecycle(logged_client, admin, catalogs, create_path, collection, pk, build, module, noun):
    created = await logged_client.post(f"/api/{create_path}", json=build(catalogs))
    assert created.status_code == 201, created.text
    project_id = created.json()[pk]

    listed = (await logged_client.get(f"/api/{collection}")).json()
    assert [p[pk] for p in listed] == [project_id]
    assert listed[0]["periodo"] == "2026-I"
    assert listed[0]["carrera"] == "Ingeniería de Sistemas"

    renamed = build(catalogs, nombreProyecto="Nombre corregido", titulo="Nombre corregido")
    updated = await logged_client.put(f"/api/{collection}/{project_id}", json=renamed)
    assert updated.status_code == 200, updated.text
    detail = (await logged_client.get(f"/api/{collection}/{project_id}")).json()
    assert _name(detail) == "Nombre corregido"

    deleted = await logged_client.put(
        f"/api/{collection}/eliminar-logico/{project_id}", json={"mensajeEliminacion": "Duplicado"}
    )
    assert deleted.status_code == 200
    assert (await logged_client.get(f"/api/{collection}")).json() == []
    # La consulta por ID sigue devolviendo el proyecto eliminado
    hidden = (await logged_client.get(f"/api/{collection}/{project_id}")).json()
    assert _deleted_flag(hidden) is True

    restored = await logged_client.put(f"/api/{collection}/restaurar/{project_id}")
    assert restored.status_code == 200
    assert [p[pk] for p in (await logged_client.get(f"/api/{collection}")).json()] == [project_id]

    rows = await audit_rows(module)
    assert [r.accion_realizada for r in rows] == [
        f"Agregar {noun}",
        f"Modificar {noun}",
        f"Eliminar {noun} (Lógico)",
        f"Restaurar {noun}",
    ]
    assert all(r.id_login == admin["id_login"] for r in rows)
    assert all(r.registro_afectado_id == str(project_id) for r in rows)
    assert 'Mensaje: "Duplicado"' in rows[2].descripcion_detallada


@pytest.mark.parametrize("create_path,collection,pk,build,module,noun", KINDS, ids=KIND_IDS)
async def test_missing_fields_are_rejected_and_audited_once(
    logged_client, catalogs, create_path, collection, pk, build, module, noun
):
    payload = build(catalogs, estado="  ")

    response = await logged_client.post(f"/api/{create_path}", json=payload)

    assert response.status_code == 400
    assert await audit_actions(module) == [f"Intento de Agregar {noun} Fallido"]
    assert (await logged_client.get(f"/api/{collection}")).json() == []


@pytest.mark.parametrize("create_path,collection,pk,build,module,noun", KINDS, ids=KIND_IDS)
async def test_unknown_project_is_404(logged_client, catalogs, create_path, collection, pk, build, module, noun):
    fetched = await logged_client.get(f"/api/{collection}/999")
    deleted = await logged_client.put(f"/api/{collection}/eliminar-logico/999")
    restored = await logged_client.put(f"/api/{collection}/restaurar/999")
    updated = await logged_client.put(f"/api/{collection}/999", json=build(catalogs))

    assert {r.status_code for r in (fetched, deleted, restored, updated)} == {404}
    assert await audit_actions(module) == [
        f"Intento de Eliminar {noun} Fallido",
        f"Intento de Restaurar {noun} Fallido",
        f"Intento de Actualizar {noun} Fallido",
    ]


async def test_soft_delete_and_restore_issue_a_single_update(logged_client, catalogs):
    created = await logged_client.post("/api/agregar-trabajo-de-grado", json=thesis(catalogs))
    project_id = created.json()["id_trabajo_grado"]

    with count_updates() as updates:
        await logged_client.put(f"/api/trabajos-de-grado/eliminar-logico/{project_id}")
    assert len(updates) == 1

    with count_updates() as updates:
        await logged_client.put(f"/api/trabajos-de-grado/restaurar/{project_id}")
    assert len(updates) == 1


async def test_people_are_linked_by_cedula(logged_client, catalogs):
    await logged_client.post("/api/agregar-trabajo-de-grado", json=thesis(catalogs))
    second = thesis(
        catalogs,
        nombreProyecto="Segundo trabajo",
        estudiante={"cedulaEstudiante": "V-27000111", "nombreCompletoEstudiante": "Ana Isabel Torres"},
    )
    created = await logged_client.post("/api/agregar-trabajo-de-grado", json=second)

    assert created.status_code == 201
    assert await count_rows(Estudiante) == 1
    assert await count_rows(Tutor) == 1
    assert await count_rows(TrabajoGrado) == 2

    detail = (await logged_client.get(f"/api/trabajos-de-grado/{created.json()['id_trabajo_grado']}")).json()
    assert detail["estudiante"]["nombre_completo"] == "Ana Isabel Torres"
    assert detail["estudiante"]["carrera"] == "Ingeniería de Sistemas"
    assert detail["tutor"]["cedula"] == "V-10200300"
    assert detail["fecha"] == "2026-07-15"


async def test_community_members_are_diffed_on_update(logged_client, catalogs):
    created = await logged_client.post("/api/agregar-proyecto-comunitario", json=community(catalogs))
    project_id = created.json()["id_servicio"]

    members = [
        {"cedula": "V-27000222", "nombreCompleto": "Luis Mora"},
        {"cedula": "V-27000333", "nombreCompleto": "Rosa Páez"},
        {"cedula": "V-27000333", "nombreCompleto": "Rosa Páez"},
    ]
    updated = await logged_client.put(
        f"/api/proyectos-comunitarios/{project_id}", json=community(catalogs, integrantes=members)
    )
    assert updated.status_code == 200, updated.text

    detail = (await logged_client.get(f"/api/proyectos-comunitarios/{project_id}")).json()
    assert [m["cedula"] for m in detail["integrantes"]] == ["V-27000222", "V-27000333"]
    assert detail["comunidad"] == "Catia"
    assert detail["fecha_inicio"] == "2026-02-01"
    # El estudiante retirado del proyecto no se borra
    assert await count_rows(Estudiante) == 3


async def test_community_requires_members_on_create(logged_client, catalogs):
    response = await logged_client.post(
        "/api/agregar-proyecto-comunitario", json=community(catalogs, integrantes=[])
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Faltan campos obligatorios para el proyecto."}
