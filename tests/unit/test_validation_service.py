"""Unit tests for menu item payload validation."""

from typing import Any

import pytest

from menu_item_service.handlers.api_dependencies import (
    validated_menu_item_update,
    validated_new_menu_item,
)
from menu_item_service.services.validation_service import (
    MENU_ITEM_RULES,
    MenuItemValidationError,
    require_valid_menu_item,
    validate_menu_item,
)


@pytest.mark.unit
class TestValidateMenuItem:
    """Test suite for validate_menu_item."""

    def test_valid_payload_defaults_available(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that an omitted ``available`` defaults to true."""
        result = validate_menu_item(veggie_wrap_payload)

        assert result.valid is True
        assert result.errors == []
        assert result.item == {**veggie_wrap_payload, "available": True}

    def test_valid_payload_keeps_explicit_available(
        self, veggie_wrap_payload: dict[str, Any]
    ) -> None:
        """Test that a supplied ``available`` is kept as-is."""
        result = validate_menu_item({**veggie_wrap_payload, "available": False})

        assert result.item is not None
        assert result.item["available"] is False

    def test_defaults_skipped_when_not_requested(
        self, veggie_wrap_payload: dict[str, Any]
    ) -> None:
        """Test that defaults are only injected when asked for."""
        result = validate_menu_item(veggie_wrap_payload, apply_defaults=False)

        assert result.valid is True
        assert result.item is not None
        assert "available" not in result.item

    def test_unknown_fields_and_id_dropped(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that only menu item fields survive validation."""
        result = validate_menu_item({**veggie_wrap_payload, "id": 3, "spicy": True})

        assert result.item is not None
        assert "id" not in result.item
        assert "spicy" not in result.item

    def test_input_payload_not_mutated(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that validation leaves the caller's payload untouched."""
        validate_menu_item(veggie_wrap_payload)

        assert "available" not in veggie_wrap_payload

    def test_integer_price_accepted(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that whole-number prices are valid."""
        assert validate_menu_item({**veggie_wrap_payload, "price": 10}).valid is True

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", "ab", "Name must be at least 3 characters long"),
            ("name", 123, "Name must be at least 3 characters long"),
            ("description", "Too short", "Description must be at least 10 characters long"),
            ("price", 0, "Price must be a positive number"),
            ("price", -2.5, "Price must be a positive number"),
            ("price", "9.50", "Price must be a positive number"),
            ("price", True, "Price must be a positive number"),
            ("price", float("inf"), "Price must be a positive number"),
            ("price", 10**400, "Price must be a positive number"),
            ("category", "snack", "Invalid category"),
            ("category", "Entree", "Invalid category"),
            ("ingredients", [], "Ingredients must be a non-empty array"),
            ("ingredients", "tortilla", "Ingredients must be a non-empty array"),
            ("ingredients", ["tortilla", 3], "Ingredients must be a non-empty array"),
            ("available", "yes", "Available must be a boolean"),
            ("available", None, "Available must be a boolean"),
        ],
    )
    def test_single_field_violation(
        self,
        veggie_wrap_payload: dict[str, Any],
        field: str,
        value: Any,
        message: str,
    ) -> None:
        """Test each rule rejects its bad values with its own message."""
        result = validate_menu_item({**veggie_wrap_payload, field: value})

        assert result.valid is False
        assert result.item is None
        assert result.errors == [message]
        assert result.failed_fields == [field]

    def test_all_violations_collected_in_rule_order(self) -> None:
        """Test that every failing rule is reported, not just the first."""
        result = validate_menu_item(
            {
                "name": "ab",
                "description": "short",
                "price": 0,
                "category": "snack",
                "ingredients": [],
                "available": "nope",
            }
        )

        assert result.errors == [rule.message for rule in MENU_ITEM_RULES]
        assert result.failed_fields == [
            "name",
            "description",
            "price",
            "category",
            "ingredients",
            "available",
        ]

    def test_empty_payload_reports_required_fields(self) -> None:
        """Test that missing fields fail their rules, except optional ``available``."""
        result = validate_menu_item({})

        assert result.failed_fields == ["name", "description", "price", "category", "ingredients"]


@pytest.mark.unit
class TestRequireValidMenuItem:
    """Test suite for require_valid_menu_item."""

    def test_returns_accepted_fields(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that a valid payload returns its accepted fields."""
        fields = require_valid_menu_item(veggie_wrap_payload)

        assert fields["available"] is True
        assert fields["name"] == "Veggie Wrap"

    def test_raises_with_all_messages(self, veggie_wrap_payload: dict[str, Any]) -> None:
        """Test that an invalid payload raises with every violation."""
        with pytest.raises(MenuItemValidationError) as exc_info:
            require_valid_menu_item({**veggie_wrap_payload, "price": 0, "category": "snack"})

        assert exc_info.value.messages == ["Price must be a positive number", "Invalid category"]
        assert "Validation failed" in str(exc_info.value)


@pytest.mark.unit
class TestWriteGuards:
    """Test suite for the write-route validation dependencies."""

    @pytest.mark.asyncio
    async def test_new_item_guard_applies_default(
        self, veggie_wrap_payload: dict[str, Any]
    ) -> None:
        """Test that the creation guard fills in ``available``."""
        fields = await validated_new_menu_item(veggie_wrap_payload)

        assert fields["available"] is True

    @pytest.mark.asyncio
    async def test_update_guard_leaves_available_out(
        self, veggie_wrap_payload: dict[str, Any]
    ) -> None:
        """Test that the update guard does not inject ``available``."""
        fields = await validated_menu_item_update(veggie_wrap_payload)

        assert "available" not in fields

    @pytest.mark.asyncio
    async def test_guards_reject_invalid_payload(self) -> None:
        """Test that both guards raise on an invalid payload."""
        with pytest.raises(MenuItemValidationError):
            await validated_new_menu_item({"name": "ab"})

        with pytest.raises(MenuItemValidationError):
            await validated_menu_item_update({"name": "ab"})
