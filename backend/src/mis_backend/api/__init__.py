"""API layer: application factory, routers, models and services."""

from mis_backend.api.app import API_PREFIX, create_api

__all__ = ["API_PREFIX", "create_api"]
