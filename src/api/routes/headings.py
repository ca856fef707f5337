"""
Heading endpoints
=================

POST /api/v1/headings/number     -- number every heading in a markdown body
POST /api/v1/headings/pre-render -- number only when front matter opts in
"""

from fastapi import APIRouter, Request

from src.api.middleware import limiter, rate_limit
from src.api.schemas import (
    HeadingsRequest,
    HeadingsResponse,
    PreRenderRequest,
    PreRenderResponse,
)
from src.domain.headings import number_headings, pre_render

router = APIRouter(prefix="/headings", tags=["headings"])


@router.post("/number", response_model=HeadingsResponse, summary="Number headings")
@limiter.limit(rate_limit)
async def number(request: Request, body: HeadingsRequest):
    return HeadingsResponse(content=number_headings(body.content))


@router.post(
    "/pre-render",
    response_model=PreRenderResponse,
    summary="Number headings when auto_number_headers is true",
)
@limiter.limit(rate_limit)
async def pre_render_document(request: Request, body: PreRenderRequest):
    rendered = pre_render(body.document)
    return PreRenderResponse(document=rendered.content, numbered=rendered.numbered)
