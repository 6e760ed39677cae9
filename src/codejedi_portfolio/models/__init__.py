"""Public content model for the portfolio site."""

from codejedi_portfolio.models.content import (
    AboutImage,
    BlogPost,
    Certificate,
    ContactChannel,
    ContentModel,
    ImageAsset,
    Project,
    SkillCategory,
    TimelinePosition,
    WorkExperienceEntry,
    YearGroup,
)

__all__ = [
    "AboutImage",
    "BlogPost",
    "Certificate",
    "ContactChannel",
    "ContentModel",
    "ImageAsset",
    "Project",
    "SkillCategory",
    "TimelinePosition",
    "WorkExperienceEntry",
    "YearGroup",
]
