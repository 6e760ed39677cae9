"""Pydantic schemas for the content collection endpoints.

Collection items are already in their public camelCase shape; these wrappers
only name the collection key of each response body.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContentItems = list[dict[str, Any]]


class CamelModel(BaseModel):
    """Response body serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WorkExperienceResponse(CamelModel):
    work_experience: ContentItems


class TimelineResponse(CamelModel):
    timeline: ContentItems


class BlogPostsResponse(CamelModel):
    blog_posts: ContentItems


class BlogPostResponse(CamelModel):
    post: dict[str, Any]


class ProjectsResponse(CamelModel):
    projects: ContentItems


class CertificatesResponse(CamelModel):
    certificates: ContentItems


class HuggingFaceCertificatesResponse(CamelModel):
    hugging_face_certificates: ContentItems


class ImagesResponse(CamelModel):
    images: ContentItems


class AboutImagesResponse(CamelModel):
    about_images: ContentItems


class SkillsMeta(CamelModel):
    """Summary of the skills source data."""

    total_skills_in_database: int = Field(description="Skill pages read from Notion")
    categories_displayed: int = Field(description="Categories built from those pages")
    analysis_timestamp: str = Field(description="ISO timestamp of this response")


class SkillsResponse(CamelModel):
    skills: ContentItems
    meta: SkillsMeta


class ContactsResponse(CamelModel):
    contacts: ContentItems
