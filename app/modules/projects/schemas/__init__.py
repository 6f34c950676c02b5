# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/schemas/__init__.py
"""

from .project_schemas import (
    DeletedProjectOut,
    MemberRef,
    PersonBrief,
    ProjectPayload,
    RestoreRequest,
    SoftDeleteRequest,
    StudentRef,
    TutorRef,
)

__all__ = [
    "TutorRef",
    "StudentRef",
    "MemberRef",
    "ProjectPayload",
    "SoftDeleteRequest",
    "RestoreRequest",
    "PersonBrief",
    "DeletedProjectOut",
]
