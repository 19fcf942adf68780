"""
Prometheus metrics for address book operations.
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    generate_latest,
)

registry = CollectorRegistry()


def get_registry() -> CollectorRegistry:
    """Get the registry all service metrics are registered on."""
    return registry


ADDRESS_BOOK_OPERATIONS = Counter(
    "address_book_operations_total",
    "Total number of address book operations",
    ["operation", "outcome"],
    registry=registry,
)

ACCOUNTS_CREATED = Counter(
    "accounts_created_total",
    "Total number of accounts created",
    ["role"],
    registry=registry,
)


def record_address_operation(operation: str, outcome: str) -> None:
    """Count an address book operation by name and outcome."""
    ADDRESS_BOOK_OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def record_account_created(role: str) -> None:
    """Count a newly registered account."""
    ACCOUNTS_CREATED.labels(role=role).inc()


def get_metrics() -> bytes:
    """Render metrics in the Prometheus exposition format."""
    return generate_latest(registry)


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
