# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/__init__.py
"""

from .project_kinds import (
    COMMUNITY_SERVICE,
    INTERNSHIP,
    PROJECT_KINDS,
    RESEARCH,
    THESIS,
    ProjectKind,
    get_kind,
    get_kind_by_collection,
)
from .project_query_service import (
    DashboardService,
    DeletedProjectService,
    PublicProjectService,
    get_dashboard_service,
    get_deleted_project_service,
    get_public_project_service,
)
from .project_service import (
    PROJECT_SERVICES,
    CommunityServiceProjectService,
    InternshipProjectService,
    ProjectService,
    ResearchProjectService,
    ThesisProjectService,
    project_service_provider,
)

__all__ = [
    "COMMUNITY_SERVICE",
    "INTERNSHIP",
    "PROJECT_KINDS",
    "RESEARCH",
    "THESIS",
    "ProjectKind",
    "get_kind",
    "get_kind_by_collection",
    "DashboardService",
    "DeletedProjectService",
    "PublicProjectService",
    "get_dashboard_service",
    "get_deleted_project_service",
    "get_public_project_service",
    "PROJECT_SERVICES",
    "CommunityServiceProjectService",
    "InternshipProjectService",
    "ProjectService",
    "ResearchProjectService",
    "ThesisProjectService",
    "project_service_provider",
]
