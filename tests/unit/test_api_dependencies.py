"""Unit tests for API dependency helpers."""

import pytest

from menu_item_service.handlers.api_dependencies import parse_item_id


@pytest.mark.unit
class TestParseItemId:
    """Test suite for parse_item_id."""

    @pytest.mark.parametrize(
        ("raw_id", "expected"),
        [
            ("1", 1),
            ("42", 42),
            ("007", 7),
            ("3abc", 3),
            ("  5", 5),
            ("+2", 2),
            ("-4", -4),
            ("2.9", 2),
        ],
    )
    def test_parses_leading_integer(self, raw_id: str, expected: int) -> None:
        """Test that the leading integer of the identifier is used."""
        assert parse_item_id(raw_id) == expected

    @pytest.mark.parametrize("raw_id", ["abc", "", "x1", "-", " "])
    def test_returns_none_without_leading_digits(self, raw_id: str) -> None:
        """Test that identifiers without leading digits match nothing."""
        assert parse_item_id(raw_id) is None

    def test_returns_none_for_oversized_identifier(self) -> None:
        """Test that an id too long to convert to an int matches nothing."""
        assert parse_item_id("1" * 5000) is None
