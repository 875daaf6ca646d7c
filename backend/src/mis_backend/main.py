"""MIS API entrypoint.

``mis-dev`` and ``mis-prod`` serve :data:`app` through uvicorn using the
host, port and log level from :class:`~mis_backend.settings.BackendSettings`.
"""

from __future__ import annotations

import uvicorn

from mis_backend.api import create_api
from mis_backend.observability import setup_logging
from mis_backend.settings import get_settings

app = create_api()


def _serve(*, reload: bool, proxy_headers: bool) -> None:
    config = get_settings()
    setup_logging(config.log_level, config.log_format)
    uvicorn.run(
        "mis_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        proxy_headers=proxy_headers,
        log_level=config.log_level.lower(),
        log_config=None,
    )


def run_dev() -> None:
    """Serve with auto-reload for local work."""
    _serve(reload=True, proxy_headers=False)


def run_prod() -> None:
    """Serve behind a reverse proxy; session cookies rely on forwarded scheme."""
    _serve(reload=False, proxy_headers=True)
