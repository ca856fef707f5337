"""
Link graph driven by a two-click selection gesture.

Patterns used
-------------
- **State Pattern** on the selection: IDLE -> PENDING(x) -> IDLE, with
  PENDING(x) -> PENDING(x) when the same point is selected again.
- Adjacency lists are written symmetrically and append-only, so the
  same pair linked twice appears twice in both lists.
"""

from __future__ import annotations

from typing import Optional

from .entities import InvalidStateTransition, Link
from .enums import SELECTION_TRANSITIONS, SelectionState


class LinkGraph:
    def __init__(self):
        self._neighbors: dict[int, list[int]] = {}
        self._links: list[Link] = []
        self._pending: Optional[int] = None

    # ── Selection state machine ───────────────────────────────────

    @property
    def state(self) -> SelectionState:
        if self._pending is None:
            return SelectionState.IDLE
        return SelectionState.PENDING

    @property
    def pending(self) -> Optional[int]:
        return self._pending

    def begin_selection(self, point_id: int) -> Optional[Link]:
        """
        Feed one selection into the state machine.

        Returns the link created by this selection, or None when the
        selection only started (or kept) a pending link.
        """
        if self._pending is None:
            self._transition(SelectionState.PENDING)
            self._pending = point_id
            return None

        if point_id == self._pending:
            self._transition(SelectionState.PENDING)
            return None

        self._transition(SelectionState.IDLE)
        link = self._record(self._pending, point_id)
        self._pending = None
        return link

    def _transition(self, new_state: SelectionState) -> None:
        allowed = SELECTION_TRANSITIONS.get(self.state, set())
        if new_state not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition from {self.state} to {new_state}"
            )

    # ── Graph ─────────────────────────────────────────────────────

    def ensure(self, point_id: int) -> None:
        """Give a newly placed point an empty neighbor list."""
        self._neighbors.setdefault(point_id, [])

    def _record(self, a: int, b: int) -> Link:
        link = Link(a, b)
        self.ensure(a)
        self.ensure(b)
        self._neighbors[a].append(b)
        self._neighbors[b].append(a)
        self._links.append(link)
        return link

    def are_linked(self, a: int, b: int) -> bool:
        return b in self._neighbors.get(a, ())

    def neighbors(self, point_id: int) -> list[int]:
        return list(self._neighbors.get(point_id, ()))

    def links(self) -> list[Link]:
        return list(self._links)
