"""OpenTelemetry tracing decorators."""

import asyncio
import functools
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span

F = TypeVar("F", bound=Callable[..., Any])


@contextmanager
def _operation_span(
    tracer: trace.Tracer, name: str, service_name: str, func: Callable[..., Any]
) -> Iterator[Span]:
    with tracer.start_as_current_span(name, record_exception=False) as span:
        # Add service and function names as span attributes
        span.set_attribute("service.name", service_name)
        span.set_attribute("code.function", func.__qualname__)
        try:
            yield span
        except Exception as e:
            # Record the failure on the span, then let it propagate
            span.set_attribute("success", False)
            span.set_attribute("error.type", type(e).__name__)
            span.record_exception(e)
            raise
        span.set_attribute("success", True)


def traced(span_name: str | None = None, service_name: str = "menu-svc") -> Callable[[F], F]:
    """Decorator to run a function inside an OpenTelemetry span.

    Both plain and async functions are supported. Exceptions are recorded on
    the span and re-raised unchanged.

    Args:
        span_name: Name for the span (defaults to the function name)
        service_name: Service name recorded as a span attribute

    Returns:
        Decorated function with tracing

    Example:
        @traced("menu_repository.get_item")
        def get_item(self, item_id: int) -> MenuItem | None:
            ...
    """

    def decorator(func: F) -> F:
        # Use provided span name or default to function name
        name = span_name or func.__name__

        # Get tracer for this service
        tracer = trace.get_tracer(service_name)

        # Return appropriate wrapper based on function type
        if asyncio.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _operation_span(tracer, name, service_name, func):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _operation_span(tracer, name, service_name, func):
                return func(*args, **kwargs)

        return sync_wrapper  # type: ignore

    return decorator
