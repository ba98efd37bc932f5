"""API routers for REST endpoints."""

from slogi.server.routers.texts import router as texts_router

__all__ = ["texts_router"]
