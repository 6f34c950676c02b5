# -*- coding: utf-8 -*-
"""
Payloads de formulario (camelCase, como los envía el panel) por tipo de
proyecto.
"""

TUTOR = {"cedulaTutor": "V-10200300", "nombreCompletoTutor": "Carmen Villalobos"}
STUDENT = {"cedulaEstudiante": "V-27000111", "nombreCompletoEstudiante": "Ana Torres"}


def community(ids: dict, **overrides) -> dict:
    payload = {
        "periodoId": ids["id_periodo"],
        "nombreProyecto": "Alfabetización digital en Catia",
        "carreraId": ids["id_carrera"],
        "estado": "En curso",
        "comunidad": "Catia",
        "fechaInicio": "2026-02-01",
        "fechaFinal": "2026-06-30",
        "tutor": dict(TUTOR),
        "integrantes": [
            {"cedula": "V-27000111", "nombreCompleto": "Ana Torres"},
            {"cedula": "V-27000222", "nombreCompleto": "Luis Mora"},
        ],
    }
    payload.update(overrides)
    return payload


def thesis(ids: dict, **overrides) -> dict:
    payload = {
        "periodoId": ids["id_periodo"],
        "nombreProyecto": "Sistema de inventario con FastAPI",
        "carreraId": ids["id_carrera"],
        "estado": "Aprobado",
        "fecha": "2026-07-15",
        "tutor": dict(TUTOR),
        "estudiante": dict(STUDENT),
    }
    payload.update(overrides)
    return payload


def research(ids: dict, **overrides) -> dict:
    payload = {
        "periodoId": ids["id_periodo"],
        "nombreProyecto": "Energía solar en zonas rurales",
        "carreraId": ids["id_carrera"],
        "estado": "En curso",
        "estudiante": dict(STUDENT),
    }
    payload.update(overrides)
    return payload


def internship(ids: dict, **overrides) -> dict:
    payload = {
        "periodoId": ids["id_periodo"],
        "titulo": "Soporte de redes",
        "carreraId": ids["id_carrera"],
        "estado": "Finalizada",
        "empresaId": ids["id_empresa"],
        "fechaInicio": "2026-03-01",
        "fechaFinal": "2026-05-31",
        "tutor": dict(TUTOR),
        "estudiante": dict(STUDENT),
    }
    payload.update(overrides)
    return payload


# (create_path, collection, pk, payload builder, modulo de bitácora, sustantivo)
KINDS = [
    ("agregar-proyecto-comunitario", "proyectos-comunitarios", "id_servicio", community,
     "Servicio Comunitario", "Proyecto Comunitario"),
    ("agregar-trabajo-de-grado", "trabajos-de-grado", "id_trabajo_grado", thesis,
     "Trabajo de Grado", "Trabajo de Grado"),
    ("agregar-proyecto-investigacion", "proyectos-investigacion", "id_proyecto_investigacion", research,
     "Proyectos de Investigación", "Proyecto de Investigación"),
    ("agregar-pasantia", "pasantias", "id_pasantia", internship,
     "Pasantías", "Pasantía"),
]

KIND_IDS = ["comunitario", "trabajo-grado", "investigacion", "pasantia"]
