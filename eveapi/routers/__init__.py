"""API routers."""
from eveapi.routers import corporations, health, sovereignty

__all__ = [
    "corporations",
    "health",
    "sovereignty",
]
