"""
Service layer for the lap counters and the pot.

All operations are pure: they receive the current state dictionary,
work on a deep copy and return ``(new_state, reported_value)``.
Persisting the result is up to the caller.  Counts and amounts are
read leniently (see ``core.parsing``) and clamped to zero.
"""

import copy
from typing import Any, Dict, Optional, Tuple

from fundraiser_api.app.core.parsing import clamp_non_negative, float_or_default, int_or_default

State = Dict[str, Any]

LAP_COUNT = "lapCount"
LAPS_DONE = "lapsDone"
CAGNOTTE = "cagnotte"


class CounterService:
    """Arithmetic on ``lapCount``, ``lapsDone`` and ``cagnotte``."""

    @staticmethod
    def _current(state: State, field: str) -> int:
        return state.get(field) or 0

    @classmethod
    def add(cls, state: State, field: str, count: Any = None) -> Tuple[State, int]:
        """Increase ``field`` by ``count`` (1 when missing or zero)."""
        new_state = copy.deepcopy(state)
        delta = int_or_default(count, 1)
        new_state[field] = clamp_non_negative(cls._current(new_state, field) + delta)
        return new_state, new_state[field]

    @classmethod
    def remove(cls, state: State, field: str, count: Any = None) -> Tuple[State, int]:
        """Decrease ``field`` by ``count`` (1 when missing or zero), never below 0."""
        new_state = copy.deepcopy(state)
        delta = int_or_default(count, 1)
        new_state[field] = clamp_non_negative(cls._current(new_state, field) - delta)
        return new_state, new_state[field]

    @classmethod
    def set(cls, state: State, field: str, count: Any = None) -> Tuple[State, int]:
        """Overwrite ``field``; missing or unparseable counts reset it to 0."""
        new_state = copy.deepcopy(state)
        new_state[field] = clamp_non_negative(int_or_default(count, 0))
        return new_state, new_state[field]

    @classmethod
    def set_cagnotte(cls, state: State, amount: Any = None) -> Tuple[State, float]:
        new_state = copy.deepcopy(state)
        new_state[CAGNOTTE] = clamp_non_negative(float_or_default(amount, 0))
        return new_state, new_state[CAGNOTTE]

    @classmethod
    def update(
        cls,
        state: State,
        lap_count: Optional[Any] = None,
        cagnotte: Optional[Any] = None,
    ) -> Tuple[State, State]:
        """Set ``lapCount`` and/or ``cagnotte`` in one go.

        ``None`` leaves the field untouched.  Returns the whole new
        state as the reported value.
        """
        new_state = copy.deepcopy(state)
        if lap_count is not None:
            new_state[LAP_COUNT] = clamp_non_negative(int_or_default(lap_count, 0))
        if cagnotte is not None:
            new_state[CAGNOTTE] = clamp_non_negative(float_or_default(cagnotte, 0))
        return new_state, new_state
