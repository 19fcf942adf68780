"""
API routes package.
"""

from .accounts import router as accounts_router
from .addresses import router as addresses_router
from .health import metrics_router
from .health import router as health_router

__all__ = [
    "accounts_router",
    "addresses_router",
    "health_router",
    "metrics_router",
]
