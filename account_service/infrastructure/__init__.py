"""
Infrastructure package.
"""

from .database import *
from .monitoring import *

__all__ = [
    # Database
    "AccountModel",
    "AccountRepository",
    "Base",
    # Monitoring
    "get_metrics",
    "get_metrics_content_type",
    "record_account_created",
    "record_address_operation",
]
