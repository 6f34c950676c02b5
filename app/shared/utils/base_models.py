# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelos base de Pydantic v2 para los esquemas de la API.

- UTF8SafeModel: respuestas construidas desde ORM (from_attributes)
- RequestModel: cuerpos de petición; todos los campos se declaran
  opcionales y cada servicio valida los obligatorios, de modo que el
  cliente recibe el mensaje en español de la operación y no un 422.

Autor: Ixchel Beristain
Fecha: 17/09/2026
"""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,             # reemplaza a orm_mode=True
        populate_by_name=True,            # para que funcionen los aliases
    )


class RequestModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,       # cédulas enviadas como número
    )


def is_blank(value: Any) -> bool:
    """True para None, cadenas vacías o solo espacios, y listas vacías."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def any_blank(*values: Any) -> bool:
    return any(is_blank(v) for v in values)


def blank_to_none(value: Any) -> Any:
    # Los formularios del panel envían "" en selects y fechas sin valor
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalInt = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]


__all__ = [
    "UTF8SafeModel",
    "RequestModel",
    "Field",
    "is_blank",
    "any_blank",
    "blank_to_none",
    "OptionalInt",
    "OptionalDate",
]
# Fin del archivo backend/app/shared/utils/base_models.py
