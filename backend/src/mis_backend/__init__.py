"""MIS backend: session-gated administration and reporting API."""

from mis_backend.main import app, run_dev, run_prod
from mis_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "app",
    "get_settings",
    "run_dev",
    "run_prod",
]
