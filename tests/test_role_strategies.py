from __future__ import annotations

import pytest

from reportgen.reporting.models import Item
from reportgen.reporting.roles import AdminRoleStrategy, StandardRoleStrategy


@pytest.mark.parametrize("value", [-5, 0, 500, 501, 1000, 1001, 10_000])
def test_admin_includes_everything(value: int) -> None:
    """Test that admins see every item regardless of value."""
    assert AdminRoleStrategy().should_include(Item(id=1, name="x", value=value)) is True


@pytest.mark.parametrize("value,expected", [(-5, True), (0, True), (500, True), (500.01, False), (501, False)])
def test_standard_includes_only_up_to_500(value: float, expected: bool) -> None:
    """Test the standard visibility boundary at 500."""
    assert StandardRoleStrategy().should_include(Item(id=1, name="x", value=value)) is expected


def test_admin_flags_items_above_threshold_on_a_copy() -> None:
    """Test that admin enrichment returns a flagged copy by default."""
    item = Item(id=1, name="Laptop", value=1500)
    processed = AdminRoleStrategy().process_item(item)
    assert processed.priority is True
    assert processed is not item
    assert item.priority is None
    assert (processed.id, processed.name, processed.value) == (1, "Laptop", 1500)


def test_admin_leaves_threshold_value_untouched() -> None:
    """Test that a value equal to the threshold is not flagged."""
    item = Item(id=1, name="Desk", value=1000)
    processed = AdminRoleStrategy().process_item(item)
    assert processed is item
    assert processed.priority is None


def test_admin_mutates_in_place_when_copy_disabled() -> None:
    """Test the mutate-in-place enrichment mode."""
    item = Item(id=1, name="Laptop", value=1500)
    processed = AdminRoleStrategy(copy_on_enrich=False).process_item(item)
    assert processed is item
    assert item.priority is True


def test_standard_process_is_identity() -> None:
    """Test that standard users get no enrichment."""
    item = Item(id=1, name="Laptop", value=1500)
    assert StandardRoleStrategy().process_item(item) is item
    assert item.priority is None


def test_custom_thresholds() -> None:
    """Test strategies built with non-default thresholds."""
    assert AdminRoleStrategy(10).process_item(Item(id=1, name="x", value=11)).priority is True
    assert StandardRoleStrategy(10).should_include(Item(id=1, name="x", value=11)) is False
