"""FastAPI dependencies guarding the menu item write endpoints.

Each guard reads the JSON body, runs the validation service over it and either
hands the accepted fields to the route or raises MenuItemValidationError, which
the application turns into a 400 response.
"""

import re
from typing import Annotated, Any

from fastapi import Body

from menu_item_service.services.validation_service import require_valid_menu_item

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_item_id(raw_id: str) -> int | None:
    """Parse a path identifier permissively.

    Leading whitespace is skipped and the leading run of digits is used, so
    "3abc" parses as 3. Anything without leading digits yields None, which the
    routes treat as "no such item" rather than as a bad request.

    Args:
        raw_id: The identifier as it appeared in the URL path

    Returns:
        The parsed integer, or None if no digits lead the string
    """
    match = _LEADING_INTEGER.match(raw_id)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int conversion limit; no stored id is that long
        return None


async def validated_new_menu_item(
    payload: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    """Guard for item creation: all rules apply and ``available`` defaults to true."""
    return require_valid_menu_item(payload, apply_defaults=True)


async def validated_menu_item_update(
    payload: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    """Guard for item updates.

    The same full-record rules apply as for creation, but an omitted
    ``available`` is left out so the stored value is kept on merge.
    """
    return require_valid_menu_item(payload, apply_defaults=False)
