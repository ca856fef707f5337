"""
Map session: the explicit state holder behind the map UI.

The hosting layer calls ``on_placement`` when the user clicks the map,
``on_selection`` when the user clicks a pin and ``on_places_changed``
when the search box returns results.  Each handler runs to completion
and returns whatever the UI should draw; no handler renders anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.config import settings

from .distance import estimate, interpolate
from .entities import (
    Bounds,
    Label,
    Link,
    Location,
    Marker,
    Place,
    Point,
    Polyline,
    SearchOutcome,
)
from .enums import SelectionState
from .links import LinkGraph
from .matrix import DistanceMatrix, MatrixRenderer
from .registry import PointRegistry

logger = logging.getLogger(__name__)


@dataclass
class SelectionOutcome:
    state: SelectionState
    pending_id: Optional[int] = None
    link: Optional[Link] = None
    distance_m: Optional[int] = None
    polylines: list[Polyline] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)


class MapSession:
    def __init__(
        self,
        registry: PointRegistry | None = None,
        graph: LinkGraph | None = None,
        renderer: MatrixRenderer | None = None,
    ):
        self.registry = registry if registry is not None else PointRegistry()
        self.graph = graph if graph is not None else LinkGraph()
        self.renderer = renderer if renderer is not None else MatrixRenderer(
            unit=settings.distance_unit,
            undefined=settings.undefined_marker,
            radius_km=settings.earth_radius_km,
        )

    # ── Events ────────────────────────────────────────────────────

    def on_placement(self, latitude: float, longitude: float) -> Point:
        point = self.registry.add(latitude, longitude)
        self.graph.ensure(point.id)
        logger.info(
            "Placed point %d at (%.6f, %.6f)", point.id, latitude, longitude
        )
        return point

    def on_selection(self, point_id: int) -> SelectionOutcome:
        """
        Feed a pin click into the link graph.

        Unknown ids raise ``PointNotFound`` before the selection state is
        touched.  When the click completes a link the outcome carries the
        ruler polyline (pending pin -> clicked pin) and a distance label
        at the great-circle midpoint.
        """
        selected = self.registry.get(point_id)
        first_id = self.graph.pending

        link = self.graph.begin_selection(point_id)
        outcome = SelectionOutcome(
            state=self.graph.state, pending_id=self.graph.pending, link=link
        )
        if link is None:
            return outcome

        first = self.registry.get(first_id)
        meters = estimate(
            selected.latitude, selected.longitude,
            first.latitude, first.longitude,
            settings.earth_radius_km,
        )
        midpoint = interpolate(
            selected.location.as_tuple(), first.location.as_tuple(), 0.5
        )
        outcome.distance_m = meters
        outcome.polylines.append(
            Polyline(
                path=(first.location, selected.location),
                stroke_color=settings.ruler_stroke_color,
                stroke_opacity=settings.ruler_stroke_opacity,
                stroke_weight=settings.ruler_stroke_weight,
            )
        )
        outcome.labels.append(
            Label(
                position=Location(*midpoint),
                text=self.renderer.format_distance(meters),
            )
        )
        logger.info("Linked points %d and %d (%d m)", link.a, link.b, meters)
        return outcome

    def on_places_changed(self, places: Iterable[Place]) -> SearchOutcome:
        """Turn search results into markers and a bounding box to fit."""
        outcome = SearchOutcome()
        for place in places:
            if place.location is None:
                logger.warning("Returned place contains no geometry")
                continue

            outcome.markers.append(
                Marker(position=place.location, title=place.name, icon=place.icon)
            )
            # Only geocodes carry a viewport
            if place.viewport is not None:
                extra = place.viewport
            else:
                extra = Bounds.around(place.location)
            outcome.bounds = extra if outcome.bounds is None else outcome.bounds.union(extra)
        return outcome

    # ── Views ─────────────────────────────────────────────────────

    def matrix(self) -> DistanceMatrix:
        return self.renderer.render(self.registry, self.graph)

    def matrix_html(self) -> str:
        return self.renderer.to_html(self.matrix())

    def id_list_text(self) -> str:
        return self.renderer.id_list_text(self.registry)
