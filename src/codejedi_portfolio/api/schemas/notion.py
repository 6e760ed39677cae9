"""Pydantic schemas for the Notion pass-through and image endpoints."""

from __future__ import annotations

from pydantic import Field

from codejedi_portfolio.api.schemas.content import CamelModel


class DatabaseMappingsResponse(CamelModel):
    databases: dict[str, str] = Field(description="Public database name -> Notion database id")


class ImageDataResponse(CamelModel):
    image_data: str = Field(description="Image encoded as a data URL")
