"""Ordered, append-only store of placed points."""

from __future__ import annotations

from typing import Iterator

from .entities import Point, PointNotFound


class PointRegistry:
    def __init__(self):
        self._points: list[Point] = []
        self._next_id = 0

    def add(self, latitude: float, longitude: float) -> Point:
        """Assign the next sequential id and store the point.  O(1)."""
        point = Point(id=self._next_id, latitude=latitude, longitude=longitude)
        self._next_id += 1
        self._points.append(point)
        return point

    def get(self, point_id: int) -> Point:
        if not 0 <= point_id < len(self._points):
            raise PointNotFound(point_id)
        return self._points[point_id]

    def count(self) -> int:
        return len(self._points)

    def ids(self) -> list[int]:
        return [p.id for p in self._points]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)
