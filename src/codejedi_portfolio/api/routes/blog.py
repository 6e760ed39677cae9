"""Blog routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from codejedi_portfolio.api.dependencies import ContentServiceDep
from codejedi_portfolio.api.schemas.content import BlogPostResponse, BlogPostsResponse

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("", response_model=BlogPostsResponse)
def list_blog_posts(service: ContentServiceDep) -> BlogPostsResponse:
    """List blog posts, newest first."""
    return BlogPostsResponse(blog_posts=service.blog_posts())


@router.get("/{slug}", response_model=BlogPostResponse)
def get_blog_post(
    slug: Annotated[str, Path(description="Post slug")],
    service: ContentServiceDep,
) -> BlogPostResponse:
    """Get a single blog post by slug."""
    post = service.blog_post(slug)
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Blog post '{slug}' not found",
        )
    return BlogPostResponse(post=post)
