# -*- coding: utf-8 -*-
"""
Tests de sesión: registro, login, logout y current-user-id.
"""

import pytest

from app.modules.auth.models import Login

from tests.support import ADMIN_EMAIL, ADMIN_PASSWORD, audit_actions, count_rows

pytestmark = pytest.mark.anyio


async def test_login_sets_session_and_current_user(client, admin):
    response = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": ADMIN_PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Inicio de sesión exitoso."
    assert body["user"]["id_login"] == admin["id_login"]
    assert body["user"]["rol"] == "Administrador"
    assert "contrasena" not in body["user"]

    current = await client.get("/api/current-user-id")
    assert current.status_code == 200
    assert current.json() == {"id_login": admin["id_login"]}
    assert "Inicio de Sesión" in await audit_actions("Autenticación")


async def test_login_with_wrong_password_is_unauthorized(client, admin):
    response = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": "incorrecta"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Credenciales inválidas."}
    assert await audit_actions("Autenticación") == ["Intento de Inicio de Sesión Fallido"]


async def test_login_requires_both_fields(client):
    response = await client.post("/api/login", json={"correo": ADMIN_EMAIL})
    assert response.status_code == 400
    assert response.json() == {"error": "Faltan campos: correo y contraseña."}


async def test_current_user_without_session_is_404(client):
    response = await client.get("/api/current-user-id")
    assert response.status_code == 404
    assert response.json() == {"error": "ID de usuario no encontrado en la sesión."}


async def test_logout_clears_session(logged_client):
    response = await logged_client.post("/api/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Sesión cerrada exitosamente."}
    assert (await logged_client.get("/api/current-user-id")).status_code == 404
    assert "Cierre de Sesión" in await audit_actions("Autenticación")


async def test_register_creates_login_and_rejects_duplicates(client):
    payload = {"correo": "nuevo@unefa.edu.ve", "contraseña": "Otra.Clave.1", "rol": "Administrador"}

    created = await client.post("/api/register", json=payload)
    assert created.status_code == 201
    assert created.json()["user"]["correo"] == "nuevo@unefa.edu.ve"

    duplicated = await client.post("/api/register", json=payload)
    assert duplicated.status_code == 409
    assert duplicated.json() == {"error": "El correo ya está registrado."}

    assert await count_rows(Login) == 1
    assert await audit_actions("Autenticación") == [
        "Registro de Usuario",
        "Intento de Registro Fallido",
    ]


async def test_malformed_body_is_bad_request(client):
    response = await client.post(
        "/api/login", content=b"{no es json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Datos de entrada inválidos."}
