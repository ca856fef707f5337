"""
Distance matrix over all placed points.

Cell (i, j) holds the chord distance when i and j are linked and the
undefined marker otherwise.  The matrix is rebuilt from scratch on every
call; O(N^2 x d) where d is the longest neighbor list.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .distance import EARTH_RADIUS_KM, estimate
from .links import LinkGraph
from .registry import PointRegistry


@dataclass
class DistanceMatrix:
    ids: list[int] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def cell(self, i: int, j: int) -> str:
        return self.rows[i][j]


class MatrixRenderer:
    def __init__(
        self,
        unit: str = " meter",
        undefined: str = "undefined",
        radius_km: float = EARTH_RADIUS_KM,
    ):
        self.unit = unit
        self.undefined = undefined
        self.radius_km = radius_km

    def format_distance(self, meters: int) -> str:
        return f"{meters}{self.unit}"

    def render(self, registry: PointRegistry, graph: LinkGraph) -> DistanceMatrix:
        points = list(registry)
        rows: list[list[str]] = []
        for p in points:
            row = []
            for q in points:
                if graph.are_linked(p.id, q.id):
                    meters = estimate(
                        p.latitude, p.longitude, q.latitude, q.longitude,
                        self.radius_km,
                    )
                    row.append(self.format_distance(meters))
                else:
                    row.append(self.undefined)
            rows.append(row)
        return DistanceMatrix(ids=[p.id for p in points], rows=rows)

    # ── Presentation strings ──────────────────────────────────────

    @staticmethod
    def to_html(matrix: DistanceMatrix) -> str:
        html = '<table class="table table-bordered">'
        html += "<tbody>"

        html += "<tr><td>from / to</td>"
        for point_id in matrix.ids:
            html += f"<td>{point_id}</td>"
        html += "</tr>"

        for point_id, row in zip(matrix.ids, matrix.rows):
            html += f"<tr><td>{point_id}</td>"
            for cell in row:
                html += f"<td>{cell}</td>"
            html += "</tr>"

        html += "</tbody>"
        return html + "</table>"

    @staticmethod
    def id_list_text(registry: PointRegistry) -> str:
        return "".join(f" {point_id}" for point_id in registry.ids())
