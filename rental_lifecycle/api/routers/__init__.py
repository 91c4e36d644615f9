"""API router package for endpoint composition."""

from .applications import api_create_applications_router
from .health import api_create_health_router
from .registries import api_create_registries_router

__all__ = ["api_create_applications_router", "api_create_health_router", "api_create_registries_router"]
