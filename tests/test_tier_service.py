from __future__ import annotations

import pytest

from fundraiser_api.app.core.errors import NotFoundError, ValidationError
from fundraiser_api.app.services.defaults import DEFAULT_ICON, default_state
from fundraiser_api.app.services.tier_service import donation_service, goal_service, next_id, sort_by_amount


def _amounts(items: list[dict]) -> list[float]:
    return [item["amount"] for item in items]


def test_next_id() -> None:
    assert next_id([]) == 1
    assert next_id([{"id": 3}, {"id": 9}, {"id": 4}]) == 10


def test_sort_is_stable_for_ties() -> None:
    items = [{"id": 1, "amount": 50}, {"id": 2, "amount": 10}, {"id": 3, "amount": 50}, {"id": 4, "amount": 10}]

    assert [item["id"] for item in sort_by_amount(items)] == [2, 4, 1, 3]


def test_create_donation_on_defaults_gets_next_id_and_sorted_position() -> None:
    state, donation = donation_service.create(default_state(), amount=150, description="x")

    assert donation == {"id": 8, "amount": 150, "icon": DEFAULT_ICON, "description": "x", "special": False}
    assert len(state["donations"]) == 8
    assert _amounts(state["donations"]) == sorted(_amounts(state["donations"]))
    assert state["donations"][4]["id"] == 8


def test_create_on_empty_or_missing_collection_starts_at_one() -> None:
    _, donation = donation_service.create({"lapCount": 0, "cagnotte": 0}, amount="25", description="splash")
    _, goal = goal_service.create({"goals": []}, amount=1000, description="big one")

    assert donation["id"] == 1
    assert goal["id"] == 1


def test_goal_has_no_special_flag() -> None:
    _, goal = goal_service.create({"goals": []}, amount=10, description="g", icon="🏆", special=True)

    assert goal == {"id": 1, "amount": 10, "icon": "🏆", "description": "g"}


def test_create_special_donation() -> None:
    _, donation = donation_service.create({}, amount=10, description="d", special=True)

    assert donation["special"] is True


@pytest.mark.parametrize(
    ("amount", "description"),
    [(None, "x"), ("", "x"), (10, None), (10, ""), (10, "   "), (None, None)],
)
def test_create_requires_amount_and_description(amount: object, description: object) -> None:
    with pytest.raises(ValidationError, match="amount and description required"):
        donation_service.create(default_state(), amount=amount, description=description)


def test_create_clamps_negative_amount() -> None:
    _, donation = donation_service.create({}, amount=-20, description="d")

    assert donation["amount"] == 0


def test_deleting_the_maximum_makes_its_id_reusable() -> None:
    state, _ = donation_service.delete(default_state(), 7)
    _, donation = donation_service.create(state, amount=5, description="again")

    assert donation["id"] == 7


def test_update_applies_present_fields_and_resorts() -> None:
    state, donation = donation_service.update(default_state(), 1, {"amount": 1000, "special": True})

    assert donation["amount"] == 1000
    assert donation["special"] is True
    assert donation["description"] == "One extra length in butterfly"
    assert state["donations"][-1]["id"] == 1
    assert _amounts(state["donations"]) == sorted(_amounts(state["donations"]))


def test_update_ignores_none_values() -> None:
    original = default_state()["goals"][0]

    _, goal = goal_service.update(default_state(), 1, {"amount": None, "icon": None, "description": "renamed"})

    assert goal == {**original, "description": "renamed"}


def test_update_rejects_empty_description() -> None:
    with pytest.raises(ValidationError):
        goal_service.update(default_state(), 1, {"description": ""})


def test_update_empty_icon_falls_back_to_placeholder() -> None:
    _, goal = goal_service.update(default_state(), 2, {"icon": ""})

    assert goal["icon"] == DEFAULT_ICON


def test_unknown_id_raises_not_found_and_leaves_state_untouched() -> None:
    state = default_state()

    with pytest.raises(NotFoundError, match="Donation not found"):
        donation_service.update(state, 42, {"amount": 1})
    with pytest.raises(NotFoundError, match="Goal not found"):
        goal_service.delete(state, 42)

    assert state == default_state()


def test_delete_returns_removed_entry() -> None:
    state, removed = goal_service.delete(default_state(), 2)

    assert removed["id"] == 2
    assert [goal["id"] for goal in state["goals"]] == [1, 3, 4]
