"""Project routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import ProjectsResponse

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=ProjectsResponse)
def list_projects(service: ContentServiceDep) -> ProjectsResponse:
    """List side projects, newest first."""
    return ProjectsResponse(projects=service.projects())
