# -*- coding: utf-8 -*-
"""
Tests del ciclo de vida de los códigos de recuperación:
solicitud → verificación (un solo uso) → restablecimiento con reset_token.
"""

from datetime import timedelta

import pytest
from sqlalchemy import select, update

from app.modules.auth.models import RecoveryCode
from app.modules.auth.services import generate_recovery_code
from app.modules.auth.services.recovery_service import GENERIC_RECOVERY_MESSAGE
from app.shared.database import SessionLocal
from app.shared.utils.security import create_reset_token
from app.shared.utils.time_utils import as_utc, now_utc

from tests.support import ADMIN_EMAIL, ADMIN_PASSWORD, audit_actions

pytestmark = pytest.mark.anyio

MODULE = "Recuperación de Contraseña"


async def _codes() -> list[RecoveryCode]:
    async with SessionLocal() as session:
        result = await session.execute(select(RecoveryCode).order_by(RecoveryCode.id))
        return list(result.scalars().all())


def test_generated_codes_have_six_digits():
    for _ in range(200):
        code = generate_recovery_code()
        assert len(code) == 6
        assert 100000 <= int(code) <= 999999


async def test_full_recovery_flow(client, admin, email_sender):
    requested = await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    assert requested.status_code == 200
    assert requested.json() == {"message": GENERIC_RECOVERY_MESSAGE}
    assert email_sender.recovery_codes[-1]["to"] == ADMIN_EMAIL
    assert email_sender.recovery_codes[-1]["minutes"] == 15

    verified = await client.post(
        "/api/verificar-codigo", json={"correo": ADMIN_EMAIL, "codigo": email_sender.last_code}
    )
    assert verified.status_code == 200
    reset_token = verified.json()["reset_token"]

    reset = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "Nueva.Clave.99", "reset_token": reset_token},
    )
    assert reset.status_code == 200
    assert reset.json() == {"message": "Contraseña actualizada exitosamente."}

    old_login = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": ADMIN_PASSWORD}
    )
    assert old_login.status_code == 401
    new_login = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": "Nueva.Clave.99"}
    )
    assert new_login.status_code == 200

    assert await audit_actions(MODULE) == [
        "Solicitud de Código de Recuperación",
        "Verificación de Código",
        "Restablecer Contraseña",
    ]


async def test_unknown_email_gets_same_answer_and_no_code(client, db_schema, email_sender):
    response = await client.post("/api/recuperar-password", json={"correo": "nadie@unefa.edu.ve"})

    assert response.status_code == 200
    assert response.json() == {"message": GENERIC_RECOVERY_MESSAGE}
    assert email_sender.recovery_codes == []
    assert await _codes() == []


async def test_new_request_invalidates_previous_codes(client, admin, email_sender):
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    first = email_sender.last_code
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    second = email_sender.last_code

    codes = await _codes()
    assert [c.usado for c in codes] == [True, False]

    if first != second:
        stale = await client.post(
            "/api/verificar-codigo", json={"correo": ADMIN_EMAIL, "codigo": first}
        )
        assert stale.status_code == 400

    fresh = await client.post(
        "/api/verificar-codigo", json={"correo": ADMIN_EMAIL, "codigo": second}
    )
    assert fresh.status_code == 200


async def test_code_is_single_use(client, admin, email_sender):
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    payload = {"correo": ADMIN_EMAIL, "codigo": email_sender.last_code}

    first = await client.post("/api/verificar-codigo", json=payload)
    second = await client.post("/api/verificar-codigo", json=payload)

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {"error": "Código incorrecto o expirado."}


async def test_expired_code_is_consumed_and_rejected(client, admin, email_sender):
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    async with SessionLocal() as session:
        await session.execute(
            update(RecoveryCode).values(expiracion=now_utc() - timedelta(minutes=1))
        )
        await session.commit()

    response = await client.post(
        "/api/verificar-codigo", json={"correo": ADMIN_EMAIL, "codigo": email_sender.last_code}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "El código ha expirado. Por favor, solicita uno nuevo."}
    assert all(c.usado for c in await _codes())
    assert "Código de Recuperación Expirado" in await audit_actions(MODULE)


async def test_wrong_code_is_rejected(client, admin, email_sender):
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})
    wrong = "000000" if email_sender.last_code != "000000" else "111111"

    response = await client.post(
        "/api/verificar-codigo", json={"correo": ADMIN_EMAIL, "codigo": wrong}
    )

    assert response.status_code == 400
    assert [c.usado for c in await _codes()] == [False]


async def test_reset_requires_a_valid_token_for_the_same_email(client, admin):
    other_token = create_reset_token("otro@unefa.edu.ve", None)

    forged = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "x", "reset_token": other_token},
    )
    garbage = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "x", "reset_token": "no-es-un-jwt"},
    )
    missing = await client.post("/api/resetear-password", json={"correo": ADMIN_EMAIL})

    assert forged.status_code == 400
    assert garbage.status_code == 400
    assert missing.status_code == 400
    assert missing.json() == {"error": "Todos los campos son obligatorios."}


async def test_email_failure_returns_500_but_code_is_stored(client, admin, email_sender):
    email_sender.fail = True

    response = await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})

    assert response.status_code == 500
    assert len(await _codes()) == 1
    assert "Error al Enviar Código de Recuperación" in await audit_actions(MODULE)


async def test_activation_email(client, admin, email_sender):
    response = await client.post("/api/enviar-correo-activacion", json={"correo": ADMIN_EMAIL})

    assert response.status_code == 200
    assert email_sender.activations == [ADMIN_EMAIL]


async def test_request_stores_one_unused_code_expiring_in_fifteen_minutes(client, admin):
    await client.post("/api/recuperar-password", json={"correo": ADMIN_EMAIL})

    codes = [c for c in await _codes() if not c.usado]
    assert len(codes) == 1
    code = codes[0]
    assert code.correo == ADMIN_EMAIL
    assert code.codigo.isdigit() and len(code.codigo) == 6
    remaining = as_utc(code.expiracion) - now_utc()
    assert timedelta(minutes=14) < remaining <= timedelta(minutes=15)


async def _reset_token(client, email_sender, correo: str = ADMIN_EMAIL) -> str:
    await client.post("/api/recuperar-password", json={"correo": correo})
    verified = await client.post(
        "/api/verificar-codigo", json={"correo": correo, "codigo": email_sender.last_code}
    )
    assert verified.status_code == 200, verified.text
    return verified.json()["reset_token"]


async def test_reset_token_works_only_once(client, admin, email_sender):
    reset_token = await _reset_token(client, email_sender)

    first = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "Nueva.Clave.99", "reset_token": reset_token},
    )
    second = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "Otra.Clave.77", "reset_token": reset_token},
    )

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json() == {"error": "Autorización de restablecimiento inválida o expirada."}
    # Sigue valiendo la contraseña del primer restablecimiento
    login = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": "Nueva.Clave.99"}
    )
    assert login.status_code == 200
    assert (await audit_actions(MODULE))[-2:] == [
        "Restablecer Contraseña",
        "Intento de Restablecer Contraseña Fallido",
    ]


async def test_email_case_is_ignored_across_the_flow(client, admin, email_sender):
    await client.post("/api/recuperar-password", json={"correo": "  ADMIN@Unefa.edu.ve "})
    assert email_sender.recovery_codes[-1]["to"] == ADMIN_EMAIL

    verified = await client.post(
        "/api/verificar-codigo",
        json={"correo": "Admin@UNEFA.edu.ve", "codigo": email_sender.last_code},
    )
    assert verified.status_code == 200

    reset = await client.post(
        "/api/resetear-password",
        json={
            "correo": "admin@unefa.EDU.VE",
            "password": "Nueva.Clave.99",
            "reset_token": verified.json()["reset_token"],
        },
    )
    assert reset.status_code == 200
    assert [c.correo for c in await _codes()] == [ADMIN_EMAIL]


async def test_unexpected_error_on_reset_is_audited(client, admin, email_sender, monkeypatch):
    reset_token = await _reset_token(client, email_sender)

    def _boom(password):
        raise ValueError("hash no soportado")

    monkeypatch.setattr("app.modules.auth.services.recovery_service.hash_password", _boom)

    response = await client.post(
        "/api/resetear-password",
        json={"correo": ADMIN_EMAIL, "password": "Nueva.Clave.99", "reset_token": reset_token},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor."}
    assert (await audit_actions(MODULE))[-1] == "Error de Excepción al Restablecer Contraseña"
    # La contraseña no cambió
    login = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": ADMIN_PASSWORD}
    )
    assert login.status_code == 200
