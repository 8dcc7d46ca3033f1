"""In-memory repository for menu items.

The repository owns the authoritative, ordered collection of menu items for the
lifetime of the process. Following the repository pattern used across the
service, expected misses are reported with simple return values (None/False)
rather than raised exceptions.
"""

import itertools
import logging
from collections.abc import Iterable
from typing import Any

from menu_item_service.models.menu_models import MenuItem
from menu_item_service.observability.decorators import traced
from menu_item_service.observability.metrics import record_menu_item_write

logger = logging.getLogger(__name__)


class MenuItemRepository:
    """Repository for menu item CRUD operations.

    Items are kept in insertion order. Identifiers come from a counter that
    starts above the highest seeded id and only moves forward, so an id is never
    handed out twice, even after deletes.
    """

    def __init__(self, seed_items: Iterable[dict[str, Any]] | None = None) -> None:
        """Initialize repository.

        Args:
            seed_items: Optional records (including their ids) to preload
        """
        self._items: list[MenuItem] = [MenuItem(**item) for item in seed_items or []]
        next_id = max((item.id for item in self._items), default=0) + 1
        self._id_sequence = itertools.count(next_id)

    def __len__(self) -> int:
        return len(self._items)

    def _find_index(self, item_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None

    @traced("menu_repository.list_items")
    def list_items(self) -> list[MenuItem]:
        """List all menu items.

        Returns:
            list: All items in insertion order (empty list if none)
        """
        return list(self._items)

    @traced("menu_repository.get_item")
    def get_item(self, item_id: int) -> MenuItem | None:
        """Retrieve a menu item by ID.

        Args:
            item_id: Menu item identifier

        Returns:
            MenuItem if found, None otherwise
        """
        index = self._find_index(item_id)
        if index is None:
            logger.debug(f"Menu item {item_id} not found")
            return None
        return self._items[index]

    @traced("menu_repository.create_item")
    def create_item(self, fields: dict[str, Any]) -> MenuItem:
        """Create a menu item from already-validated fields.

        Args:
            fields: Item fields without an id

        Returns:
            MenuItem: The stored item with its assigned id
        """
        data = {key: value for key, value in fields.items() if key != "id"}
        item = MenuItem(id=next(self._id_sequence), **data)
        self._items.append(item)

        record_menu_item_write("create")
        logger.info(f"Created menu item {item.id} ({item.name})")
        return item

    @traced("menu_repository.update_item")
    def update_item(self, item_id: int, fields: dict[str, Any]) -> MenuItem | None:
        """Merge fields onto an existing menu item.

        Fields missing from ``fields`` keep their current values. The id is
        never changed.

        Args:
            item_id: Menu item identifier
            fields: Already-validated fields to overwrite

        Returns:
            MenuItem: The updated item, or None if no item has that id
        """
        index = self._find_index(item_id)
        if index is None:
            logger.debug(f"Cannot update menu item {item_id}: not found")
            return None

        current = self._items[index]
        merged = current.model_dump()
        merged.update({key: value for key, value in fields.items() if key != "id"})
        updated = MenuItem(**merged)
        self._items[index] = updated

        record_menu_item_write("update")
        logger.info(f"Updated menu item {item_id}")
        return updated

    @traced("menu_repository.delete_item")
    def delete_item(self, item_id: int) -> bool:
        """Delete a menu item.

        Args:
            item_id: Menu item identifier

        Returns:
            bool: True if the item was removed, False if it did not exist
        """
        index = self._find_index(item_id)
        if index is None:
            logger.debug(f"Cannot delete menu item {item_id}: not found")
            return False

        del self._items[index]

        record_menu_item_write("delete")
        logger.info(f"Deleted menu item {item_id}")
        return True
