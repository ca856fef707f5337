"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ── Requests ──────────────────────────────────────────────────────────


class PointCreateRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class LocationSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    model_config = {"from_attributes": True}


class BoundsSchema(BaseModel):
    south: float
    west: float
    north: float
    east: float

    model_config = {"from_attributes": True}


class PlaceSchema(BaseModel):
    name: str = ""
    icon: Optional[str] = None
    location: Optional[LocationSchema] = Field(
        None, description="Missing when the search result has no geometry."
    )
    viewport: Optional[BoundsSchema] = None


class PlacesChangedRequest(BaseModel):
    places: list[PlaceSchema] = []


class HeadingsRequest(BaseModel):
    content: str


class PreRenderRequest(BaseModel):
    document: str


# ── Responses ─────────────────────────────────────────────────────────


class PointResponse(BaseModel):
    id: int
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class LinkResponse(BaseModel):
    a: int
    b: int

    model_config = {"from_attributes": True}


class PolylineResponse(BaseModel):
    path: list[LocationSchema]
    stroke_color: str
    stroke_opacity: float
    stroke_weight: int


class LabelResponse(BaseModel):
    position: LocationSchema
    text: str


class SelectionResponse(BaseModel):
    state: str
    pending_id: Optional[int] = None
    link: Optional[LinkResponse] = None
    distance_m: Optional[int] = None
    polylines: list[PolylineResponse] = []
    labels: list[LabelResponse] = []


class MatrixResponse(BaseModel):
    ids: list[int]
    rows: list[list[str]]


class IdListResponse(BaseModel):
    ids: list[int]
    text: str


class MarkerResponse(BaseModel):
    position: LocationSchema
    title: str
    icon: Optional[str] = None


class SearchResponse(BaseModel):
    markers: list[MarkerResponse] = []
    bounds: Optional[BoundsSchema] = None


class HeadingsResponse(BaseModel):
    content: str


class PreRenderResponse(BaseModel):
    document: str
    numbered: bool


class MapConfigResponse(BaseModel):
    center: LocationSchema
    zoom: int


class HealthResponse(BaseModel):
    status: str = "ok"
