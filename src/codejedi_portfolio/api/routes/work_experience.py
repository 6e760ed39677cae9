"""Work experience routes for the API."""

from __future__ import annotations

from fastapi import APIRouter

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import TimelineResponse, WorkExperienceResponse

router = APIRouter(prefix="/work-experience", tags=["work-experience"])


@router.get("", response_model=WorkExperienceResponse)
def list_work_experience(service: ContentServiceDep) -> WorkExperienceResponse:
    """List work experience, most recent first."""
    return WorkExperienceResponse(work_experience=service.work_experience())


@router.get("/timeline", response_model=TimelineResponse)
def work_experience_timeline(service: ContentServiceDep) -> TimelineResponse:
    """Work experience grouped by year for the timeline view."""
    return TimelineResponse(timeline=service.work_experience_timeline())
