# -*- coding: utf-8 -*-
"""
Tests del perfil del usuario conectado.
"""

import pytest

from tests.support import ADMIN_EMAIL, ADMIN_NAME, audit_actions, create_admin

pytestmark = pytest.mark.anyio

MODULE = "Perfil de Usuario"


async def test_get_profile_never_exposes_password(logged_client, admin):
    response = await logged_client.get(f"/api/administrador/{admin['id_login']}")

    assert response.status_code == 200
    body = response.json()
    assert body["nombre_completo"] == ADMIN_NAME
    assert body["correo"] == ADMIN_EMAIL
    assert body["cedula"] == "V-12345678"
    assert not {"contrasena", "contraseña", "password"} & set(body)


async def test_get_profile_of_inactive_admin_is_404(logged_client):
    inactive = await create_admin(
        correo="baja@unefa.edu.ve", nombre="Pedro Baja", cedula="V-999", activo=False
    )

    response = await logged_client.get(f"/api/administrador/{inactive['id_login']}")

    assert response.status_code == 404
    assert response.json() == {"error": "Administrador no encontrado."}


async def test_update_profile_changes_email_and_password(logged_client, admin):
    response = await logged_client.put(
        f"/api/administrador/{admin['id_login']}",
        json={
            "nombre_completo": "María Rojas",
            "correo": "mrojas@unefa.edu.ve",
            "cedula": "V-12345678",
            "contraseña": "Otra.Clave.2026",
        },
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Perfil actualizado exitosamente."}
    assert await audit_actions(MODULE) == ["Actualización"]

    login = await logged_client.post(
        "/api/login", json={"correo": "mrojas@unefa.edu.ve", "contraseña": "Otra.Clave.2026"}
    )
    assert login.status_code == 200

    profile = (await logged_client.get(f"/api/administrador/{admin['id_login']}")).json()
    assert profile["nombre_completo"] == "María Rojas"


async def test_update_profile_requires_fields(logged_client, admin):
    response = await logged_client.put(
        f"/api/administrador/{admin['id_login']}", json={"correo": "x@unefa.edu.ve"}
    )

    assert response.status_code == 400
    assert await audit_actions(MODULE) == ["Intento de Actualización Fallido"]


async def test_update_profile_with_taken_email_is_conflict(logged_client, admin):
    await create_admin(correo="otra@unefa.edu.ve", nombre="Otra Persona", cedula="V-2")

    response = await logged_client.put(
        f"/api/administrador/{admin['id_login']}",
        json={"nombre_completo": ADMIN_NAME, "correo": "otra@unefa.edu.ve", "cedula": "V-12345678"},
    )

    assert response.status_code == 409


async def test_user_profile_returns_display_name(logged_client, admin):
    response = await logged_client.get(f"/api/user-profile/{admin['id_login']}")

    assert response.status_code == 200
    assert response.json() == {"nombre_completo": ADMIN_NAME}

    missing = await logged_client.get("/api/user-profile/999")
    assert missing.status_code == 404
