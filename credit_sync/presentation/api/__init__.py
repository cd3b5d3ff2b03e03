"""HTTP API routers."""

from .v1.router import router as v1_router

__all__ = ["v1_router"]
