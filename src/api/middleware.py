"""Shared slowapi rate limiter, keyed by client address."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config import settings

limiter = Limiter(key_func=get_remote_address)


def rate_limit() -> str:
    """Limit string read per request, so overrides of ``settings`` apply."""
    return settings.rate_limit
