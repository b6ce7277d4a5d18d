"""
Donation tier and goal tier endpoints (admin only).

Both catalogs expose the same three routes:

* ``POST /admin/<plural>`` – create an entry (400 when ``amount`` or
  ``description`` is missing);
* ``PUT /admin/<plural>/{id}`` – partial update (404 for an unknown id);
* ``DELETE /admin/<plural>/{id}`` – remove an entry (404 for an unknown id).

Responses always carry the full, sorted collection so that the admin
page can redraw its table without a second request.
"""

from typing import Any, Dict, Optional, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fundraiser_api.app.api.deps import get_store, persist
from fundraiser_api.app.core.errors import NotFoundError
from fundraiser_api.app.core.security import require_admin
from fundraiser_api.app.core.storage import DataStore
from fundraiser_api.app.schemas.tier import DonationCreate, DonationUpdate, GoalCreate, GoalUpdate
from fundraiser_api.app.services.tier_service import TierService, donation_service, goal_service


def parse_tier_id(service: TierService, raw: str) -> int:
    """Turn a path segment into an id; anything that is not one names no entry."""
    if not raw.isascii() or not raw.isdigit():
        raise NotFoundError(f"{service.label} not found")
    return int(raw)


def build_tier_router(
    service: TierService,
    singular: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
) -> APIRouter:
    """Return the CRUD router for the collection managed by ``service``."""
    plural = service.key
    tier_router = APIRouter(dependencies=[Depends(require_admin)])

    async def create_tier(
        payload: Optional[create_schema] = None,  # type: ignore[valid-type]
        store: DataStore = Depends(get_store),
    ) -> Dict[str, Any]:
        data = payload.model_dump() if payload is not None else {}
        fields = {flag: data.get(flag) for flag in service.flags}
        state, tier = service.create(
            store.read(),
            amount=data.get("amount"),
            description=data.get("description"),
            icon=data.get("icon"),
            **fields,
        )
        persist(store, state)
        return {"success": True, singular: tier, plural: service.items(state)}

    async def update_tier(
        tier_id: str,
        payload: Optional[update_schema] = None,  # type: ignore[valid-type]
        store: DataStore = Depends(get_store),
    ) -> Dict[str, Any]:
        changes = payload.model_dump(exclude_unset=True) if payload is not None else {}
        state, tier = service.update(store.read(), parse_tier_id(service, tier_id), changes)
        persist(store, state)
        return {"success": True, singular: tier, plural: service.items(state)}

    async def delete_tier(
        tier_id: str,
        store: DataStore = Depends(get_store),
    ) -> Dict[str, Any]:
        state, _removed = service.delete(store.read(), parse_tier_id(service, tier_id))
        persist(store, state)
        return {"success": True, plural: service.items(state)}

    create_tier.__name__ = f"create_{singular}"
    update_tier.__name__ = f"update_{singular}"
    delete_tier.__name__ = f"delete_{singular}"

    tier_router.add_api_route("", create_tier, methods=["POST"])
    tier_router.add_api_route("/{tier_id}", update_tier, methods=["PUT"])
    tier_router.add_api_route("/{tier_id}", delete_tier, methods=["DELETE"])
    return tier_router


donations_router = build_tier_router(donation_service, "donation", DonationCreate, DonationUpdate)
goals_router = build_tier_router(goal_service, "goal", GoalCreate, GoalUpdate)
