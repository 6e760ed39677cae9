"""Skill routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import SkillsMeta, SkillsResponse

router = APIRouter(tags=["skills"])


@router.get("/skills", response_model=SkillsResponse)
def list_skills(service: ContentServiceDep) -> SkillsResponse:
    """List displayable skill categories with a summary of the source data."""
    data = service.skills()
    return SkillsResponse(skills=data["skills"], meta=SkillsMeta(**data["meta"]))
