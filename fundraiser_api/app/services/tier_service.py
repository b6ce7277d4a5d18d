"""
Service layer for donation tiers and goal tiers.

Both collections share the same rules:

* identifiers are allocated as ``max(existing ids) + 1`` (``1`` for an
  empty collection), recomputed from the current contents on every
  creation, so the id of a deleted maximum can come back;
* the collection is kept sorted by ``amount`` in ascending order
  (Python's sort is stable, ties keep their insertion order);
* amounts are read leniently and clamped to zero.

Donation tiers carry an extra ``special`` flag used by the dashboard to
highlight the wildest challenges.  Like ``CounterService`` every
operation works on a copy of the state and returns
``(new_state, reported_value)``.
"""

import copy
import logging
from typing import Any, Dict, List, Optional, Tuple

from fundraiser_api.app.core.errors import NotFoundError, ValidationError
from fundraiser_api.app.core.parsing import clamp_non_negative, float_or_default
from fundraiser_api.app.services.defaults import DEFAULT_ICON

logger = logging.getLogger(__name__)

State = Dict[str, Any]
Tier = Dict[str, Any]


def next_id(items: List[Tier]) -> int:
    """Return the identifier for a new entry of ``items``."""
    ids = [item["id"] for item in items if isinstance(item.get("id"), int)]
    if not ids:
        return 1
    return max(ids) + 1


def sort_by_amount(items: List[Tier]) -> List[Tier]:
    return sorted(items, key=lambda item: item.get("amount") or 0)


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class TierService:
    """CRUD operations on one tier collection of the state.

    Parameters
    ----------
    key : str
        Name of the collection in the state (``"donations"``).
    label : str
        Human readable name used in error messages (``"Donation"``).
    flags : tuple of str
        Extra boolean fields accepted by this collection.
    """

    def __init__(self, key: str, label: str, flags: Tuple[str, ...] = ()) -> None:
        self.key = key
        self.label = label
        self.flags = flags

    def items(self, state: State) -> List[Tier]:
        return state.get(self.key) or []

    def _find_index(self, items: List[Tier], tier_id: int) -> int:
        for index, item in enumerate(items):
            if item.get("id") == tier_id:
                return index
        raise NotFoundError(f"{self.label} not found")

    def create(
        self,
        state: State,
        amount: Any,
        description: Any,
        icon: Optional[Any] = None,
        **flags: Any,
    ) -> Tuple[State, Tier]:
        """Append a new tier and return it.

        Raises ``ValidationError`` when ``amount`` or ``description``
        is missing.
        """
        if _is_missing(amount) or _is_missing(description):
            raise ValidationError("amount and description required")
        new_state = copy.deepcopy(state)
        items = list(self.items(new_state))
        tier: Tier = {
            "id": next_id(items),
            "amount": clamp_non_negative(float_or_default(amount, 0)),
            "icon": str(icon) if not _is_missing(icon) else DEFAULT_ICON,
            "description": str(description),
        }
        for flag in self.flags:
            tier[flag] = bool(flags.get(flag))
        items.append(tier)
        new_state[self.key] = sort_by_amount(items)
        logger.info("Created %s %s (amount=%s)", self.label.lower(), tier["id"], tier["amount"])
        return new_state, tier

    def update(self, state: State, tier_id: int, changes: Dict[str, Any]) -> Tuple[State, Tier]:
        """Apply the fields present in ``changes`` to tier ``tier_id``.

        Keys with a ``None`` value are treated as absent.  Raises
        ``NotFoundError`` for an unknown id and ``ValidationError`` for
        an empty description.
        """
        new_state = copy.deepcopy(state)
        items = list(self.items(new_state))
        index = self._find_index(items, tier_id)
        tier = dict(items[index])

        if changes.get("amount") is not None:
            tier["amount"] = clamp_non_negative(float_or_default(changes["amount"], 0))
        if changes.get("icon") is not None:
            tier["icon"] = str(changes["icon"]) if not _is_missing(changes["icon"]) else DEFAULT_ICON
        if changes.get("description") is not None:
            if _is_missing(changes["description"]):
                raise ValidationError("description cannot be empty")
            tier["description"] = str(changes["description"])
        for flag in self.flags:
            if changes.get(flag) is not None:
                tier[flag] = bool(changes[flag])

        items[index] = tier
        new_state[self.key] = sort_by_amount(items)
        logger.info("Updated %s %s", self.label.lower(), tier_id)
        return new_state, tier

    def delete(self, state: State, tier_id: int) -> Tuple[State, Tier]:
        """Remove tier ``tier_id`` and return the removed entry."""
        new_state = copy.deepcopy(state)
        items = list(self.items(new_state))
        index = self._find_index(items, tier_id)
        removed = items.pop(index)
        new_state[self.key] = items
        logger.info("Deleted %s %s", self.label.lower(), tier_id)
        return new_state, removed


donation_service = TierService("donations", "Donation", flags=("special",))
goal_service = TierService("goals", "Goal")
