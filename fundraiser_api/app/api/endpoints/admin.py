"""
Admin session endpoints.

``POST /admin/verify`` lets the admin page check a token before storing
it; it is the only route consulted by the rate limiter, since it is the
one a brute‑force script would hammer.  ``POST /admin/data`` sets the
lap count and the pot in a single call.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request

from fundraiser_api.app.api.deps import get_rate_limiter, get_store, persist
from fundraiser_api.app.core.errors import InvalidCredential, RateLimitError, ValidationError
from fundraiser_api.app.core.rate_limit import RateLimiter
from fundraiser_api.app.core.security import client_address, require_admin, tokens_match
from fundraiser_api.app.core.storage import DataStore
from fundraiser_api.app.schemas.counter import StateUpdate, VerifyPayload
from fundraiser_api.app.services.counter_service import CounterService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/verify")
async def verify_token(
    request: Request,
    payload: Optional[VerifyPayload] = None,
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> Dict[str, Any]:
    """Check an admin token.

    Returns HTTP 429 once the caller has made too many failed attempts
    inside the window, 400 without a token and 403 for a wrong one.
    Only failures count as attempts.
    """
    address = client_address(request)
    if not limiter.check(address):
        logger.warning("Rate limit hit on token verification from %s", address)
        raise RateLimitError()

    token = payload.token if payload is not None else None
    if not token:
        limiter.record_attempt(address)
        raise ValidationError("Token required")

    if not tokens_match(token, request.app.state.settings.admin_token):
        limiter.record_attempt(address)
        logger.warning("Failed token verification from %s", address)
        raise InvalidCredential()

    return {"success": True}


@router.post("/data")
async def update_data(
    payload: Optional[StateUpdate] = None,
    store: DataStore = Depends(get_store),
    _: str = Depends(require_admin),
) -> Dict[str, Any]:
    """Set ``lapCount`` and/or ``cagnotte`` (admin only)."""
    payload = payload or StateUpdate()
    state, _data = CounterService.update(store.read(), lap_count=payload.lapCount, cagnotte=payload.cagnotte)
    persist(store, state)
    logger.info("State updated: lapCount=%s cagnotte=%s", state.get("lapCount"), state.get("cagnotte"))
    return {"success": True, "data": state}
