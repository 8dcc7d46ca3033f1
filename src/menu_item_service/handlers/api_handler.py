"""FastAPI application for the menu item admin API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Union

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from menu_item_service.handlers.api_dependencies import (
    parse_item_id,
    validated_menu_item_update,
    validated_new_menu_item,
)
from menu_item_service.middleware.request_logger import RequestLoggerMiddleware
from menu_item_service.models.menu_models import (
    MenuItem,
    MessageResponse,
    ValidationErrorResponse,
)
from menu_item_service.repositories.menu_repository import MenuItemRepository
from menu_item_service.services.validation_service import (
    VALIDATION_FAILED,
    MenuItemValidationError,
)

logger = logging.getLogger(__name__)

MENU_PREFIX = "/api/menu"
ITEM_NOT_FOUND = "Menu item not found"
ITEM_DELETED = "Menu item deleted"

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {404: {"model": MessageResponse}}
INVALID_PAYLOAD_RESPONSE: dict[int | str, dict[str, Any]] = {
    400: {"model": ValidationErrorResponse}
}


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=404, content=MessageResponse(message=ITEM_NOT_FOUND).model_dump()
    )


def create_app(repository: MenuItemRepository) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        repository: Store holding the menu items served by this app

    Returns:
        Configured FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        item_count = len(app.state.menu_repository)
        logger.info(f"Menu item service ready, serving {item_count} items at {MENU_PREFIX}")
        yield
        logger.info("Menu item service stopped")

    app = FastAPI(
        title="Menu Item Service Admin API",
        description="Admin API for managing restaurant menu items",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Store the repository in app state for access in route handlers
    app.state.menu_repository = repository

    app.add_middleware(RequestLoggerMiddleware)

    @app.exception_handler(MenuItemValidationError)
    async def handle_validation_error(
        request: Request, exc: MenuItemValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ValidationErrorResponse(
                error=VALIDATION_FAILED, messages=exc.messages
            ).model_dump(),
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns:
            Health status indicating service is running
        """
        return HealthResponse(status="healthy")

    @app.get(MENU_PREFIX, response_model=list[MenuItem], tags=["Menu"])
    async def list_menu_items() -> list[MenuItem]:
        """Get every menu item in insertion order."""
        items: list[MenuItem] = app.state.menu_repository.list_items()
        return items

    @app.get(
        f"{MENU_PREFIX}/{{item_id}}",
        response_model=MenuItem,
        responses=NOT_FOUND_RESPONSE,
        tags=["Menu"],
    )
    async def get_menu_item(item_id: str) -> Union[MenuItem, JSONResponse]:
        """Get a single menu item.

        Args:
            item_id: The menu item ID; non-numeric values match nothing

        Returns:
            The menu item, or a 404 message response
        """
        parsed_id = parse_item_id(item_id)
        item = None if parsed_id is None else app.state.menu_repository.get_item(parsed_id)
        if item is None:
            return _not_found()
        return item

    @app.post(
        MENU_PREFIX,
        response_model=MenuItem,
        status_code=201,
        responses=INVALID_PAYLOAD_RESPONSE,
        tags=["Menu"],
    )
    async def create_menu_item(
        fields: dict[str, Any] = Depends(validated_new_menu_item),
    ) -> MenuItem:
        """Add a menu item.

        Returns:
            The created item with its assigned ID
        """
        item: MenuItem = app.state.menu_repository.create_item(fields)
        return item

    @app.put(
        f"{MENU_PREFIX}/{{item_id}}",
        response_model=MenuItem,
        responses={**INVALID_PAYLOAD_RESPONSE, **NOT_FOUND_RESPONSE},
        tags=["Menu"],
    )
    async def update_menu_item(
        item_id: str,
        fields: dict[str, Any] = Depends(validated_menu_item_update),
    ) -> Union[MenuItem, JSONResponse]:
        """Update an existing menu item.

        Fields sent in the body overwrite the stored ones; the rest are kept.

        Args:
            item_id: The menu item ID

        Returns:
            The updated item, or a 404 message response
        """
        parsed_id = parse_item_id(item_id)
        item = (
            None
            if parsed_id is None
            else app.state.menu_repository.update_item(parsed_id, fields)
        )
        if item is None:
            return _not_found()
        return item

    @app.delete(
        f"{MENU_PREFIX}/{{item_id}}",
        response_model=MessageResponse,
        responses=NOT_FOUND_RESPONSE,
        tags=["Menu"],
    )
    async def delete_menu_item(item_id: str) -> Union[MessageResponse, JSONResponse]:
        """Remove a menu item.

        Args:
            item_id: The menu item ID

        Returns:
            Confirmation message, or a 404 message response
        """
        parsed_id = parse_item_id(item_id)
        if parsed_id is None or not app.state.menu_repository.delete_item(parsed_id):
            return _not_found()
        return MessageResponse(message=ITEM_DELETED)

    return app
