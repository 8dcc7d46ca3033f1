"""Custom metrics for the menu item service."""

from opentelemetry import metrics

meter = metrics.get_meter("menu-svc")

menu_item_write_counter = meter.create_counter(
    name="menu_item_writes_total",
    description="Total number of accepted menu item writes by operation",
    unit="1",
)

validation_failure_counter = meter.create_counter(
    name="menu_item_validation_failures_total",
    description="Total number of rejected menu item fields by field name",
    unit="1",
)


def record_menu_item_write(operation: str) -> None:
    """Record an accepted write to the menu item store.

    Args:
        operation: The store operation ("create", "update" or "delete")
    """
    menu_item_write_counter.add(1, {"operation": operation})


def record_validation_failures(fields: list[str]) -> None:
    """Record the fields that failed validation for a rejected payload.

    Args:
        fields: Names of the fields whose rules failed
    """
    for field in fields:
        validation_failure_counter.add(1, {"field": field})
