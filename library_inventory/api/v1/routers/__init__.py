"""API v1 routers."""

from .books import router as books_router
from .health import router as health_router
from .inventory import router as inventory_router

__all__ = [
    "books_router",
    "health_router",
    "inventory_router",
]
