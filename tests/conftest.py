"""Shared pytest fixtures and configuration for all tests."""

import copy
import os
from typing import Any

import pytest
from fastapi.testclient import TestClient

from menu_item_service.handlers.api_handler import create_app
from menu_item_service.repositories.menu_repository import MenuItemRepository
from menu_item_service.repositories.menu_seed import SEED_MENU_ITEMS

os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
def mock_menu_items() -> list[dict[str, Any]]:
    """Fixture providing a copy of the seed menu."""
    return copy.deepcopy(SEED_MENU_ITEMS)


@pytest.fixture
def veggie_wrap_payload() -> dict[str, Any]:
    """Fixture providing a valid creation payload without ``available``."""
    return {
        "name": "Veggie Wrap",
        "description": "Grilled vegetables in a wrap",
        "price": 9.5,
        "category": "entree",
        "ingredients": ["tortilla", "vegetables"],
    }


@pytest.fixture
def menu_repository(mock_menu_items: list[dict[str, Any]]) -> MenuItemRepository:
    """Fixture providing a repository seeded with the standard menu."""
    return MenuItemRepository(seed_items=mock_menu_items)


@pytest.fixture
def client(menu_repository: MenuItemRepository) -> TestClient:
    """Fixture providing a test client over an isolated, seeded repository."""
    return TestClient(create_app(repository=menu_repository))
