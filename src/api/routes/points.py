"""
Point endpoints
===============

POST /api/v1/points                 -- place a pin (placement event)
GET  /api/v1/points                 -- list placed pins
GET  /api/v1/points/{point_id}      -- fetch one pin
POST /api/v1/points/{point_id}/select -- click a pin (selection event)
GET  /api/v1/links                  -- recorded links, duplicates included
GET  /api/v1/ids                    -- id list shown next to the map
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.dependencies import get_map_session
from src.api.middleware import limiter, rate_limit
from src.api.schemas import (
    IdListResponse,
    LabelResponse,
    LinkResponse,
    LocationSchema,
    PointCreateRequest,
    PointResponse,
    PolylineResponse,
    SelectionResponse,
)
from src.domain.entities import Location, PointNotFound
from src.domain.session import MapSession, SelectionOutcome

router = APIRouter(tags=["points"])


def _location(loc: Location) -> LocationSchema:
    return LocationSchema(latitude=loc.latitude, longitude=loc.longitude)


def _selection_response(outcome: SelectionOutcome) -> SelectionResponse:
    return SelectionResponse(
        state=outcome.state.value,
        pending_id=outcome.pending_id,
        link=(
            LinkResponse(a=outcome.link.a, b=outcome.link.b)
            if outcome.link
            else None
        ),
        distance_m=outcome.distance_m,
        polylines=[
            PolylineResponse(
                path=[_location(loc) for loc in p.path],
                stroke_color=p.stroke_color,
                stroke_opacity=p.stroke_opacity,
                stroke_weight=p.stroke_weight,
            )
            for p in outcome.polylines
        ],
        labels=[
            LabelResponse(position=_location(lbl.position), text=lbl.text)
            for lbl in outcome.labels
        ],
    )


@router.post(
    "/points",
    status_code=201,
    response_model=PointResponse,
    summary="Place a pin on the map",
)
@limiter.limit(rate_limit)
async def place_point(
    request: Request,
    body: PointCreateRequest,
    session: MapSession = Depends(get_map_session),
):
    return session.on_placement(body.latitude, body.longitude)


@router.get(
    "/points",
    response_model=list[PointResponse],
    summary="List placed pins in id order",
)
@limiter.limit(rate_limit)
async def list_points(
    request: Request,
    session: MapSession = Depends(get_map_session),
):
    return list(session.registry)


@router.get(
    "/points/{point_id}",
    response_model=PointResponse,
    summary="Get one pin",
)
@limiter.limit(rate_limit)
async def get_point(
    request: Request,
    point_id: int,
    session: MapSession = Depends(get_map_session),
):
    try:
        return session.registry.get(point_id)
    except PointNotFound:
        raise HTTPException(status_code=404, detail="Point not found")


@router.post(
    "/points/{point_id}/select",
    response_model=SelectionResponse,
    summary="Select a pin",
    description=(
        "The first selection marks the pin as pending. Selecting a "
        "different pin completes a link and returns the ruler polyline "
        "and distance label to draw. Selecting the pending pin again "
        "changes nothing."
    ),
)
@limiter.limit(rate_limit)
async def select_point(
    request: Request,
    point_id: int,
    session: MapSession = Depends(get_map_session),
):
    try:
        outcome = session.on_selection(point_id)
    except PointNotFound:
        raise HTTPException(status_code=404, detail="Point not found")
    return _selection_response(outcome)


@router.get(
    "/links",
    response_model=list[LinkResponse],
    summary="List recorded links",
)
@limiter.limit(rate_limit)
async def list_links(
    request: Request,
    session: MapSession = Depends(get_map_session),
):
    return [LinkResponse(a=link.a, b=link.b) for link in session.graph.links()]


@router.get("/ids", response_model=IdListResponse, summary="List pin ids")
@limiter.limit(rate_limit)
async def list_ids(
    request: Request,
    session: MapSession = Depends(get_map_session),
):
    return IdListResponse(ids=session.registry.ids(), text=session.id_list_text())
