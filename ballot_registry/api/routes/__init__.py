"""Top level API router registration."""
from fastapi import APIRouter, FastAPI

from ballot_registry.api.routes import ballots, health, voters


def register_routes(application: FastAPI) -> None:
    """Register all API routers with the FastAPI application."""
    api_router = APIRouter(prefix="/api")

    api_router.include_router(health.router, tags=["health"])
    api_router.include_router(voters.router, tags=["voters"])
    api_router.include_router(ballots.router, tags=["ballots"])

    application.include_router(api_router)


__all__ = ["register_routes"]
