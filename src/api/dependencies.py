"""FastAPI dependency injection helpers."""

from fastapi import Request

from src.domain.session import MapSession


def get_map_session(request: Request) -> MapSession:
    """Return the process-lifetime map session owned by the app."""
    return request.app.state.map_session
