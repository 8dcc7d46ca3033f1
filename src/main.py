"""Main application entry point for the menu item service.

This module provides the FastAPI application factory and configuration
for running the service locally or in production.
"""

import logging
import os

from fastapi import FastAPI

from menu_item_service.handlers.api_handler import create_app
from menu_item_service.observability import configure_logging, setup_observability
from menu_item_service.repositories.menu_repository import MenuItemRepository
from menu_item_service.repositories.menu_seed import SEED_MENU_ITEMS

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def create_menu_repository() -> MenuItemRepository:
    """Create the in-memory menu store preloaded with the seed menu.

    Returns:
        A fresh repository; state is not shared between calls
    """
    repository = MenuItemRepository(seed_items=SEED_MENU_ITEMS)
    logger.info(f"Menu repository seeded with {len(repository)} items")
    return repository


def create_application() -> FastAPI:
    """Create and configure the FastAPI application with all dependencies.

    This factory function:
    1. Configures logging
    2. Creates the seeded menu repository
    3. Creates FastAPI app with the menu endpoints
    4. Sets up observability when OTEL_ENABLED is true

    Returns:
        Configured FastAPI application instance
    """
    log_level = os.getenv("LOG_LEVEL", "INFO")
    configure_logging(log_level)

    logger.info("Initializing menu item service...")

    repository = create_menu_repository()
    app = create_app(repository=repository)

    if os.getenv("OTEL_ENABLED", "false").lower() == "true":
        setup_observability(app)
    else:
        logger.info("OpenTelemetry disabled, set OTEL_ENABLED=true to export traces and metrics")

    logger.info("Menu item service initialized successfully")

    return app


def get_server_address() -> tuple[str, int]:
    """Read the bind address from the environment.

    Returns:
        Tuple of (host, port)

    Raises:
        ValueError: If PORT is not an integer
    """
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", str(DEFAULT_PORT)))
    return host, port


# Create the FastAPI application instance (only when not in test mode)
# so that importing this module during test collection has no side effects
if os.getenv("ENVIRONMENT") != "test":  # noqa: SIM108
    app = create_application()
else:
    app = FastAPI()


if __name__ == "__main__":
    """Run the application with uvicorn when executed directly."""
    import uvicorn

    host, port = get_server_address()
    display_host = "localhost" if host == "0.0.0.0" else host

    logger.info(f"The kitchen is at full blast http://{display_host}:{port}")
    logger.info(f"API documentation available at http://{display_host}:{port}/docs")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
