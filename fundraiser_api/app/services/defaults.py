"""
Built‑in content used the first time the data document is created.

The donation tiers are the challenges announced on stage when the pot
reaches a given amount; the goal tiers are the bigger milestones of the
evening.  Administrators edit both lists through the admin API, these
values only seed an empty installation and backfill documents written
by older versions of the server.
"""

import copy
from typing import Any, Dict, List

DEFAULT_ICON = "🎯"

DEFAULT_DONATIONS: List[Dict[str, Any]] = [
    {"id": 1, "amount": 10, "icon": "🏊", "description": "One extra length in butterfly", "special": False},
    {"id": 2, "amount": 20, "icon": "🦆", "description": "A length with a rubber duck on the head", "special": False},
    {"id": 3, "amount": 50, "icon": "🩱", "description": "A length in a vintage swimsuit", "special": False},
    {"id": 4, "amount": 100, "icon": "🤿", "description": "Five lengths with mask and snorkel", "special": False},
    {"id": 5, "amount": 200, "icon": "🧊", "description": "Ice bucket at the end of the pool", "special": True},
    {"id": 6, "amount": 300, "icon": "🎤", "description": "Sing the anthem between two lengths", "special": False},
    {"id": 7, "amount": 500, "icon": "🦈", "description": "A full length in a shark costume", "special": True},
]

DEFAULT_GOALS: List[Dict[str, Any]] = [
    {"id": 1, "amount": 500, "icon": "🥉", "description": "First milestone: team t-shirts funded"},
    {"id": 2, "amount": 1000, "icon": "🥈", "description": "New kickboards for the club"},
    {"id": 3, "amount": 2500, "icon": "🥇", "description": "Swimming lessons for a whole class"},
    {"id": 4, "amount": 5000, "icon": "🏆", "description": "The night swim marathon goes ahead"},
]


def default_state() -> Dict[str, Any]:
    """Return a fresh copy of the initial application state."""
    return {
        "lapCount": 0,
        "lapsDone": 0,
        "cagnotte": 0,
        "donations": copy.deepcopy(DEFAULT_DONATIONS),
        "goals": copy.deepcopy(DEFAULT_GOALS),
    }


# Fields added after the first release.  Documents missing them are
# backfilled on startup.
MIGRATABLE_FIELDS = ("donations", "goals", "lapsDone")


def default_value(field: str) -> Any:
    return default_state()[field]
