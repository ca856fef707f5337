"""
Domain entities and the draw requests handed to the map layer.

Points and links are immutable once created.  Draw requests describe
what the hosting UI should render; nothing here renders anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class InvalidStateTransition(Exception):
    """Raised when a selection change violates the state machine."""


class PointNotFound(LookupError):
    """Raised when a point id was never assigned by the registry."""

    def __init__(self, point_id: int):
        super().__init__(f"Point {point_id} not found")
        self.point_id = point_id


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Point:
    id: int
    latitude: float
    longitude: float

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass(frozen=True)
class Link:
    """Undirected pair of point ids, kept in selection order."""

    a: int
    b: int

    def __post_init__(self):
        if self.a == self.b:
            raise ValueError(f"Cannot link point {self.a} to itself")


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            south=min(self.south, other.south),
            west=min(self.west, other.west),
            north=max(self.north, other.north),
            east=max(self.east, other.east),
        )

    @staticmethod
    def around(location: Location) -> Bounds:
        return Bounds(
            south=location.latitude,
            west=location.longitude,
            north=location.latitude,
            east=location.longitude,
        )


# ── Draw requests ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Polyline:
    path: tuple[Location, Location]
    stroke_color: str
    stroke_opacity: float
    stroke_weight: int


@dataclass(frozen=True)
class Label:
    position: Location
    text: str


@dataclass(frozen=True)
class Marker:
    position: Location
    title: str = ""
    icon: Optional[str] = None


# ── Search input ──────────────────────────────────────────────────────


@dataclass
class Place:
    """A place-search result; ``location`` is None when it has no geometry."""

    name: str = ""
    icon: Optional[str] = None
    location: Optional[Location] = None
    viewport: Optional[Bounds] = None


@dataclass
class SearchOutcome:
    markers: list[Marker] = field(default_factory=list)
    bounds: Optional[Bounds] = None
