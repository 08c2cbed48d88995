"""FastAPI dependency injection: provides the GalaxyService singleton."""

from __future__ import annotations

from starfield.api.galaxy_service import GalaxyService

_galaxy_service: GalaxyService | None = None


def set_galaxy_service(service: GalaxyService | None) -> None:
    global _galaxy_service
    _galaxy_service = service


def get_galaxy_service() -> GalaxyService:
    if _galaxy_service is None:
        raise RuntimeError("GalaxyService not initialized; server not started correctly.")
    return _galaxy_service
