"""
Public endpoints.

The dashboard polls ``GET /api/data`` to display the counters, the pot
and the tier catalogs.  No authentication is required.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from fundraiser_api.app.api.deps import get_store
from fundraiser_api.app.core.storage import DataStore

router = APIRouter()


@router.get("/data")
async def get_data(store: DataStore = Depends(get_store)) -> Dict[str, Any]:
    """Return the whole application state as stored on disk."""
    return store.read()
