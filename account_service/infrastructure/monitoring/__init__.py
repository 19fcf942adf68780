"""
Monitoring package.
"""

from .metrics import (
    get_metrics,
    get_metrics_content_type,
    record_account_created,
    record_address_operation,
)

__all__ = [
    "get_metrics",
    "get_metrics_content_type",
    "record_account_created",
    "record_address_operation",
]
