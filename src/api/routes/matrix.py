"""
Matrix & search endpoints
=========================

GET  /api/v1/matrix      -- distance matrix as JSON
GET  /api/v1/matrix/html -- distance matrix as an HTML table
POST /api/v1/places      -- place-search results -> markers + bounds
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from src.api.dependencies import get_map_session
from src.api.middleware import limiter, rate_limit
from src.api.schemas import (
    BoundsSchema,
    LocationSchema,
    MarkerResponse,
    MatrixResponse,
    PlacesChangedRequest,
    SearchResponse,
)
from src.domain.entities import Bounds, Location, Place
from src.domain.session import MapSession

router = APIRouter(tags=["matrix"])


@router.get("/matrix", response_model=MatrixResponse, summary="Distance matrix")
@limiter.limit(rate_limit)
async def get_matrix(
    request: Request,
    session: MapSession = Depends(get_map_session),
):
    matrix = session.matrix()
    return MatrixResponse(ids=matrix.ids, rows=matrix.rows)


@router.get(
    "/matrix/html",
    response_class=HTMLResponse,
    summary="Distance matrix as an HTML table",
)
@limiter.limit(rate_limit)
async def get_matrix_html(
    request: Request,
    session: MapSession = Depends(get_map_session),
):
    return HTMLResponse(session.matrix_html())


@router.post(
    "/places",
    response_model=SearchResponse,
    summary="Convert place-search results into markers",
    description=(
        "Results without geometry are logged and skipped. Search markers "
        "are not pins and cannot be linked."
    ),
)
@limiter.limit(rate_limit)
async def places_changed(
    request: Request,
    body: PlacesChangedRequest,
    session: MapSession = Depends(get_map_session),
):
    places = [
        Place(
            name=p.name,
            icon=p.icon,
            location=(
                Location(p.location.latitude, p.location.longitude)
                if p.location
                else None
            ),
            viewport=Bounds(**p.viewport.model_dump()) if p.viewport else None,
        )
        for p in body.places
    ]
    outcome = session.on_places_changed(places)
    return SearchResponse(
        markers=[
            MarkerResponse(
                position=LocationSchema(
                    latitude=m.position.latitude, longitude=m.position.longitude
                ),
                title=m.title,
                icon=m.icon,
            )
            for m in outcome.markers
        ],
        bounds=(
            BoundsSchema.model_validate(outcome.bounds) if outcome.bounds else None
        ),
    )
