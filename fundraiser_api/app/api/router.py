"""
Top‑level router of the API.

Aggregates the public router and the admin routers.  ``create_app``
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import admin, public
from .endpoints.counters import cagnotte_router, lap_router, laps_done_router
from .endpoints.tiers import donations_router, goals_router

router = APIRouter()

router.include_router(public.router, tags=["public"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(lap_router, prefix="/admin/lap", tags=["laps"])
# Lengths actually swum, tracked separately from the pledged lap count.
router.include_router(laps_done_router, prefix="/admin/lapsdone", tags=["laps"])
router.include_router(cagnotte_router, prefix="/admin/cagnotte", tags=["cagnotte"])
router.include_router(donations_router, prefix="/admin/donations", tags=["donations"])
router.include_router(goals_router, prefix="/admin/goals", tags=["goals"])
