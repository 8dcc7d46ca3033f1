"""Structured logging, OpenTelemetry instrumentation and metrics."""

from menu_item_service.observability.config import configure_logging, setup_observability
from menu_item_service.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
