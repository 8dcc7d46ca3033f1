"""Field-level validation for menu item payloads.

Every rule in the table is evaluated against the candidate payload, so a
rejected payload reports all of its violations at once, in rule order.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from menu_item_service.models.menu_models import MenuCategory
from menu_item_service.observability.metrics import record_validation_failures

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"

MENU_ITEM_FIELDS = ("name", "description", "price", "category", "ingredients", "available")

MENU_CATEGORIES = frozenset(category.value for category in MenuCategory)


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class ValidationRule:
    """A single field check.

    Attributes:
        field: Payload key the rule applies to
        predicate: Returns True when the value is acceptable; receives
            ``MISSING`` when the key is absent
        message: Violation message reported when the predicate fails
    """

    field: str
    predicate: Callable[[Any], bool]
    message: str

    def check(self, payload: dict[str, Any]) -> bool:
        return self.predicate(payload.get(self.field, MISSING))


def _is_text_of_length(minimum: int) -> Callable[[Any], bool]:
    def predicate(value: Any) -> bool:
        return isinstance(value, str) and len(value) >= minimum

    return predicate


def _is_positive_number(value: Any) -> bool:
    # bool is an int subclass but never a price
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        price = float(value)
    except OverflowError:
        return False
    return math.isfinite(price) and price > 0


def _is_category(value: Any) -> bool:
    return isinstance(value, str) and value in MENU_CATEGORIES


def _is_non_empty_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) >= 1
        and all(isinstance(ingredient, str) for ingredient in value)
    )


def _is_optional_bool(value: Any) -> bool:
    return value is MISSING or isinstance(value, bool)


MENU_ITEM_RULES: tuple[ValidationRule, ...] = (
    ValidationRule("name", _is_text_of_length(3), "Name must be at least 3 characters long"),
    ValidationRule(
        "description",
        _is_text_of_length(10),
        "Description must be at least 10 characters long",
    ),
    ValidationRule("price", _is_positive_number, "Price must be a positive number"),
    ValidationRule("category", _is_category, "Invalid category"),
    ValidationRule("ingredients", _is_non_empty_list, "Ingredients must be a non-empty array"),
    ValidationRule("available", _is_optional_bool, "Available must be a boolean"),
)


@dataclass
class ValidationResult:
    """Outcome of validating a menu item payload.

    Attributes:
        item: Accepted fields (with defaults applied) when valid, else None
        errors: Violation messages in rule order (empty when valid)
        failed_fields: Names of the fields whose rules failed
    """

    item: dict[str, Any] | None
    errors: list[str] = field(default_factory=list)
    failed_fields: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


class MenuItemValidationError(Exception):
    """Raised when a menu item payload breaks one or more field rules."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(f"{VALIDATION_FAILED}: {'; '.join(messages)}")
        self.messages = messages


def validate_menu_item(payload: dict[str, Any], apply_defaults: bool = True) -> ValidationResult:
    """Check a candidate menu item against every rule in ``MENU_ITEM_RULES``.

    Args:
        payload: Candidate item fields (any id in the payload is ignored)
        apply_defaults: Fill in ``available=True`` when the payload omits it

    Returns:
        ValidationResult with the accepted fields, or with every violation
    """
    failed = [rule for rule in MENU_ITEM_RULES if not rule.check(payload)]
    if failed:
        return ValidationResult(
            item=None,
            errors=[rule.message for rule in failed],
            failed_fields=[rule.field for rule in failed],
        )

    item = {key: payload[key] for key in MENU_ITEM_FIELDS if key in payload}
    if apply_defaults and "available" not in item:
        item["available"] = True

    return ValidationResult(item=item)


def require_valid_menu_item(payload: dict[str, Any], apply_defaults: bool = True) -> dict[str, Any]:
    """Validate a payload and return its accepted fields.

    Args:
        payload: Candidate item fields
        apply_defaults: Fill in ``available=True`` when the payload omits it

    Returns:
        dict: The accepted fields

    Raises:
        MenuItemValidationError: If any rule fails
    """
    result = validate_menu_item(payload, apply_defaults=apply_defaults)
    if result.item is None:
        record_validation_failures(result.failed_fields)
        logger.info(f"Rejected menu item payload: {', '.join(result.errors)}")
        raise MenuItemValidationError(result.errors)

    return result.item
