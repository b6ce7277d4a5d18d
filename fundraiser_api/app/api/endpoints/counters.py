"""
Counter endpoints (admin only).

``/admin/lap/*`` drives ``lapCount``, the number of lengths pledged by
the donors; ``/admin/lapsdone/*`` drives ``lapsDone``, the lengths the
swimmers have actually completed.  Both expose the same ``add``,
``remove`` and ``set`` actions, so the routers are built by one
factory.  ``/admin/cagnotte`` overwrites the pot.
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends

from fundraiser_api.app.api.deps import get_store, persist
from fundraiser_api.app.core.security import require_admin
from fundraiser_api.app.core.storage import DataStore
from fundraiser_api.app.schemas.counter import CagnottePayload, CountPayload
from fundraiser_api.app.services.counter_service import LAP_COUNT, LAPS_DONE, CounterService

logger = logging.getLogger(__name__)

_ACTIONS: Dict[str, Callable] = {
    "add": CounterService.add,
    "remove": CounterService.remove,
    "set": CounterService.set,
}


def build_counter_router(field: str) -> APIRouter:
    """Return a router exposing ``/add``, ``/remove`` and ``/set`` for ``field``."""
    counter_router = APIRouter(dependencies=[Depends(require_admin)])

    def make_handler(action: str, operation: Callable):
        async def handler(
            payload: Optional[CountPayload] = None,
            store: DataStore = Depends(get_store),
        ) -> Dict[str, Any]:
            count = payload.count if payload is not None else None
            state, value = operation(store.read(), field, count)
            persist(store, state)
            logger.info("%s %s -> %s", field, action, value)
            return {"success": True, field: value}

        handler.__name__ = f"{field}_{action}"
        handler.__doc__ = f"Apply ``{action}`` to ``{field}`` and return the new value."
        return handler

    for action, operation in _ACTIONS.items():
        counter_router.add_api_route(f"/{action}", make_handler(action, operation), methods=["POST"])
    return counter_router


lap_router = build_counter_router(LAP_COUNT)
laps_done_router = build_counter_router(LAPS_DONE)

cagnotte_router = APIRouter(dependencies=[Depends(require_admin)])


@cagnotte_router.post("")
async def set_cagnotte(
    payload: Optional[CagnottePayload] = None,
    store: DataStore = Depends(get_store),
) -> Dict[str, Any]:
    """Overwrite the pot total; negative or unparseable amounts store 0."""
    amount = payload.amount if payload is not None else None
    state, value = CounterService.set_cagnotte(store.read(), amount)
    persist(store, state)
    logger.info("cagnotte set -> %s", value)
    return {"success": True, "cagnotte": value}
