"""Route definitions for the public HTTP API."""

from mis_backend.api.routers.auth import router as auth_router
from mis_backend.api.routers.branding import router as branding_router
from mis_backend.api.routers.catalog import router as catalog_router
from mis_backend.api.routers.complaints import router as complaints_router
from mis_backend.api.routers.dashboard import router as dashboard_router
from mis_backend.api.routers.dashboard_v2 import router as dashboard_v2_router
from mis_backend.api.routers.data_entry import router as data_entry_router
from mis_backend.api.routers.dev_auth import router as dev_auth_router
from mis_backend.api.routers.projects import router as projects_router
from mis_backend.api.routers.reporting_years import router as reporting_years_router
from mis_backend.api.routers.sectors import router as sectors_router
from mis_backend.api.routers.users import router as users_router

ROUTERS = (
    auth_router,
    branding_router,
    catalog_router,
    complaints_router,
    dashboard_router,
    dashboard_v2_router,
    data_entry_router,
    dev_auth_router,
    projects_router,
    reporting_years_router,
    sectors_router,
    users_router,
)

__all__ = [
    "ROUTERS",
    "auth_router",
    "branding_router",
    "catalog_router",
    "complaints_router",
    "dashboard_router",
    "dashboard_v2_router",
    "data_entry_router",
    "dev_auth_router",
    "projects_router",
    "reporting_years_router",
    "sectors_router",
    "users_router",
]
