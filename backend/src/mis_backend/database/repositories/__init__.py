"""Repositories wrapping SQLAlchemy sessions, one per aggregate."""

from mis_backend.database.repositories.branding import (
    BrandingRepository,
    parse_data_url,
    to_data_url,
)
from mis_backend.database.repositories.catalog import (
    CatalogRepository,
    ClusterCatalogRepository,
    MainSectorRepository,
    SectorCatalogRepository,
    SubSectorRepository,
)
from mis_backend.database.repositories.complaint import ComplaintRepository
from mis_backend.database.repositories.dashboard import DashboardRepository
from mis_backend.database.repositories.data_entry import DataEntryRepository
from mis_backend.database.repositories.project import (
    BeneficiaryEntry,
    ProjectFields,
    ProjectRepository,
    complete_beneficiaries,
)
from mis_backend.database.repositories.reporting import (
    ReportingYearRepository,
    SectorFields,
    SectorRepository,
)
from mis_backend.database.repositories.session import SessionRepository
from mis_backend.database.repositories.user import UserRepository

__all__ = [
    "BeneficiaryEntry",
    "BrandingRepository",
    "CatalogRepository",
    "ClusterCatalogRepository",
    "ComplaintRepository",
    "DashboardRepository",
    "DataEntryRepository",
    "MainSectorRepository",
    "ProjectFields",
    "ProjectRepository",
    "ReportingYearRepository",
    "SectorCatalogRepository",
    "SectorFields",
    "SectorRepository",
    "SessionRepository",
    "SubSectorRepository",
    "UserRepository",
    "complete_beneficiaries",
    "parse_data_url",
    "to_data_url",
]
