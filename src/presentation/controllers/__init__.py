"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses, mapping pipeline errors onto
HTTP status codes.
"""

from .flyover_controller import router as flyover_router
from .system_controller import router as system_router

__all__ = ["flyover_router", "system_router"]
