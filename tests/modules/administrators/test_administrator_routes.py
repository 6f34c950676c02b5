# -*- coding: utf-8 -*-
"""
Tests de administradores: CRUD, baja lógica / restauración y alta atómica
(login + administrador en una sola transacción).
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.modules.administrators.models import Administrator
from app.modules.administrators.repositories import AdministratorRepository
from app.modules.auth.models import Login

from tests.support import ADMIN_NAME, audit_actions, audit_rows, count_rows, create_admin

pytestmark = pytest.mark.anyio

MODULE = "Administradores"

NEW_ADMIN = {
    "cedula": "V-20111222",
    "nombre_completo": "José Gregorio Pérez",
    "correo": "jgperez@unefa.edu.ve",
    "password": "Clave.Admin.1",
}


async def test_create_administrator_creates_login_and_admin(logged_client, admin):
    response = await logged_client.post("/api/administradores", json=NEW_ADMIN)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Administrador creado exitosamente."
    assert body["admin"]["correo"] == NEW_ADMIN["correo"]
    assert body["admin"]["activo"] is True
    assert await count_rows(Login) == 2
    assert await count_rows(Administrator) == 2

    rows = await audit_rows(MODULE)
    assert [r.accion_realizada for r in rows] == ["Creación"]
    assert rows[0].id_login == admin["id_login"]
    assert rows[0].nombre_usuario == ADMIN_NAME

    # El nuevo administrador puede iniciar sesión
    login = await logged_client.post(
        "/api/login", json={"correo": NEW_ADMIN["correo"], "contraseña": NEW_ADMIN["password"]}
    )
    assert login.status_code == 200


async def test_create_with_missing_fields_is_400_and_audited(logged_client):
    response = await logged_client.post("/api/administradores", json={"cedula": "V-1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Todos los campos son obligatorios."}
    assert await audit_actions(MODULE) == ["Intento de Creación Fallido"]


async def test_create_with_existing_email_is_conflict(logged_client, admin):
    payload = dict(NEW_ADMIN, correo="admin@unefa.edu.ve")

    response = await logged_client.post("/api/administradores", json=payload)

    assert response.status_code == 409
    assert await count_rows(Login) == 1


async def test_failed_admin_insert_leaves_no_orphan_login(logged_client, monkeypatch):
    async def _boom(self, **values):
        raise OperationalError("INSERT INTO administrador", {}, Exception("disk full"))

    monkeypatch.setattr(AdministratorRepository, "create", _boom)

    response = await logged_client.post("/api/administradores", json=NEW_ADMIN)

    assert response.status_code == 500
    assert response.json() == {"error": "Error al registrar el administrador."}
    assert await count_rows(Login) == 1
    assert await count_rows(Administrator) == 1
    assert await audit_actions(MODULE) == ["Error de Creación"]


async def test_unexpected_error_on_admin_insert_is_audited(logged_client, monkeypatch):
    async def _boom(self, **values):
        raise RuntimeError("conexión perdida")

    monkeypatch.setattr(AdministratorRepository, "create", _boom)

    response = await logged_client.post("/api/administradores", json=NEW_ADMIN)

    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor."}
    assert await count_rows(Login) == 1
    rows = await audit_rows(MODULE)
    assert [r.accion_realizada for r in rows] == ["Error de Excepción al Crear Administrador"]
    assert "conexión perdida" in rows[0].descripcion_detallada


async def test_unexpected_error_on_admin_restore_is_audited(logged_client, monkeypatch):
    async def _boom(self, id_administrador, activo):
        raise RuntimeError("fallo inesperado")

    monkeypatch.setattr(AdministratorRepository, "set_active", _boom)

    response = await logged_client.put("/api/administradores/restaurar/1")

    assert response.status_code == 500
    assert await audit_actions(MODULE) == ["Error de Excepción al Restaurar Administrador"]


async def test_soft_delete_and_restore_admin_seven(logged_client):
    for n in range(2, 8):
        await create_admin(
            correo=f"admin{n}@unefa.edu.ve", nombre=f"Administrador {n}", cedula=f"V-{n}"
        )

    deleted = await logged_client.put(
        "/api/administradores/eliminar-logico/7", json={"mensajeEliminacion": "Renuncia"}
    )
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Administrador eliminado lógicamente exitosamente."}

    listed = (await logged_client.get("/api/administradores/eliminados")).json()
    assert [(a["id_administrador"], a["activo"]) for a in listed] == [(7, False)]
    active_ids = [a["id_administrador"] for a in (await logged_client.get("/api/administradores")).json()]
    assert 7 not in active_ids
    assert (await logged_client.get("/api/administradores/7")).status_code == 404

    restored = await logged_client.put("/api/administradores/restaurar/7")
    assert restored.status_code == 200
    assert restored.json() == {"message": "Administrador restaurado exitosamente."}

    assert (await logged_client.get("/api/administradores/eliminados")).json() == []
    again = await logged_client.get("/api/administradores/7")
    assert again.status_code == 200
    assert again.json()["activo"] is True

    rows = await audit_rows(MODULE)
    assert [r.accion_realizada for r in rows] == ["Eliminación Lógica", "Restauración"]
    assert "Motivo: Renuncia" in rows[0].descripcion_detallada
    assert rows[0].registro_afectado_id == "7"


async def test_soft_delete_unknown_admin_is_404(logged_client):
    response = await logged_client.put("/api/administradores/eliminar-logico/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Administrador no encontrado."}
    assert await audit_actions(MODULE) == ["Intento de Eliminación Lógica Fallido"]


async def test_update_administrator_syncs_login_email(logged_client, admin):
    response = await logged_client.put(
        f"/api/administradores/{admin['id_administrador']}",
        json={"cedula": "V-12345678", "nombre_completo": "María F. Rojas", "correo": "mrojas@unefa.edu.ve"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Administrador actualizado exitosamente."}

    login = await logged_client.post(
        "/api/login", json={"correo": "mrojas@unefa.edu.ve", "contraseña": "Clave.Segura.2026"}
    )
    assert login.status_code == 200


async def test_update_unknown_administrator_is_404(logged_client):
    response = await logged_client.put(
        "/api/administradores/999",
        json={"cedula": "V-1", "nombre_completo": "X", "correo": "x@unefa.edu.ve"},
    )

    assert response.status_code == 404
    assert await audit_actions(MODULE) == ["Intento de Actualización Fallido"]
