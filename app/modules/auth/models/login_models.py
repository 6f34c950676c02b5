# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/login_models.py

Modelo ORM de la tabla `login` (credenciales de acceso).

La columna física se llama `contraseña`; en Python se expone como
`contrasena`. Guarda siempre un hash bcrypt, nunca la contraseña.

Autor: Ixchel Beristain
Fecha: 20/09/2026
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class Login(Base):
    __tablename__ = "login"

    id_login: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    correo: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    contrasena: Mapped[str] = mapped_column("contraseña", String(255), nullable=False)
    rol: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    estado_login: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    nombre_usuario: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Login id_login={self.id_login} correo={self.correo!r} rol={self.rol!r}>"


__all__ = ["Login"]
# Fin del archivo backend/app/modules/auth/models/login_models.py
