"""
Shared dependencies for the route handlers.

The store and the rate limiter are created once by ``create_app`` and
stored on ``app.state``; handlers receive them through these
dependencies instead of importing module globals.
"""

from typing import Any, Dict

from fastapi import Request

from fundraiser_api.app.core.errors import StorageError
from fundraiser_api.app.core.rate_limit import RateLimiter
from fundraiser_api.app.core.storage import DataStore


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def persist(store: DataStore, state: Dict[str, Any]) -> Dict[str, Any]:
    """Save ``state`` or raise ``StorageError``."""
    if not store.save(state):
        raise StorageError()
    return state
