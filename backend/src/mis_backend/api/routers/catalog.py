"""Catalog endpoints: clusters, standard sectors, main sectors and sub-sectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, status

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import (
    CatalogEntryRequest,
    CatalogEntryResponse,
    SubSectorRequest,
    SubSectorResponse,
    SuccessResponse,
)
from mis_backend.database.repositories import (
    CatalogRepository,
    ClusterCatalogRepository,
    MainSectorRepository,
    SectorCatalogRepository,
    SubSectorRepository,
)

router = APIRouter(
    prefix="/catalog", tags=["catalog"], dependencies=[Depends(require_session)]
)

CatalogPayload = Annotated[CatalogEntryRequest, Depends(json_body(CatalogEntryRequest))]
SubSectorPayload = Annotated[SubSectorRequest, Depends(json_body(SubSectorRequest))]


@dataclass(frozen=True, slots=True)
class CatalogRoutes:
    """Path and failure messages for one name-unique catalog."""

    path: str
    repository: type[CatalogRepository]
    load_failure: str
    create_failure: str
    update_failure: str
    delete_failure: str


def _register(routes: CatalogRoutes) -> None:
    repository_cls = routes.repository
    label = repository_cls.label
    name = label.replace(" ", "_")

    @router.get(
        routes.path,
        response_model=list[CatalogEntryResponse],
        name=f"list_{name}_entries",
    )
    def list_entries(session: DbSession) -> list[CatalogEntryResponse]:
        with translate_errors(f"list {label}", failure_message=routes.load_failure):
            return [
                CatalogEntryResponse.model_validate(entry)
                for entry in repository_cls(session).list_entries()
            ]

    @router.post(
        routes.path,
        response_model=CatalogEntryResponse,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{name}_entry",
    )
    def create_entry(payload: CatalogPayload, session: DbSession) -> CatalogEntryResponse:
        with translate_errors(f"create {label}", failure_message=routes.create_failure):
            entry = repository_cls(session).create(
                name=payload.name or "", description=payload.description
            )
            return CatalogEntryResponse.model_validate(entry)

    @router.patch(
        f"{routes.path}/{{entry_id}}",
        response_model=CatalogEntryResponse,
        name=f"update_{name}_entry",
    )
    def update_entry(
        entry_id: str, payload: CatalogPayload, session: DbSession
    ) -> CatalogEntryResponse:
        with translate_errors(f"update {label}", failure_message=routes.update_failure):
            entry = repository_cls(session).update(
                entry_id, name=payload.name or "", description=payload.description
            )
            return CatalogEntryResponse.model_validate(entry)

    @router.delete(
        f"{routes.path}/{{entry_id}}",
        response_model=SuccessResponse,
        name=f"delete_{name}_entry",
    )
    def delete_entry(entry_id: str, session: DbSession) -> SuccessResponse:
        with translate_errors(f"delete {label}", failure_message=routes.delete_failure):
            repository_cls(session).delete(entry_id)
        return SuccessResponse()


for _routes in (
    CatalogRoutes(
        path="/clusters",
        repository=ClusterCatalogRepository,
        load_failure="Failed to load cluster catalog",
        create_failure="Failed to store cluster",
        update_failure="Failed to update cluster",
        delete_failure="Failed to delete cluster",
    ),
    CatalogRoutes(
        path="/sectors",
        repository=SectorCatalogRepository,
        load_failure="Failed to load sector catalog",
        create_failure="Failed to store sector",
        update_failure="Failed to update sector",
        delete_failure="Failed to delete sector",
    ),
    CatalogRoutes(
        path="/main-sectors",
        repository=MainSectorRepository,
        load_failure="Failed to load main sectors.",
        create_failure="Failed to create main sector.",
        update_failure="Failed to update main sector.",
        delete_failure="Failed to delete main sector.",
    ),
):
    _register(_routes)


@router.get("/sub-sectors", response_model=list[SubSectorResponse])
def list_sub_sectors(session: DbSession) -> list[SubSectorResponse]:
    with translate_errors("list sub-sectors", failure_message="Failed to load sub-sectors."):
        return [
            SubSectorResponse.model_validate(entry)
            for entry in SubSectorRepository(session).list_entries()
        ]


@router.post(
    "/sub-sectors",
    response_model=SubSectorResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_sub_sector(payload: SubSectorPayload, session: DbSession) -> SubSectorResponse:
    """Sub-sector names only need to be unique under their main sector."""

    with translate_errors("create sub-sector", failure_message="Failed to create sub-sector."):
        entry = SubSectorRepository(session).create(
            main_sector_id=payload.main_sector_id,
            name=payload.name or "",
            description=payload.description,
        )
        return SubSectorResponse.model_validate(entry)


@router.patch("/sub-sectors/{entry_id}", response_model=SubSectorResponse)
def update_sub_sector(
    entry_id: str, payload: SubSectorPayload, session: DbSession
) -> SubSectorResponse:
    with translate_errors("update sub-sector", failure_message="Failed to update sub-sector."):
        entry = SubSectorRepository(session).update(
            entry_id,
            main_sector_id=payload.main_sector_id,
            name=payload.name or "",
            description=payload.description,
        )
        return SubSectorResponse.model_validate(entry)


@router.delete("/sub-sectors/{entry_id}", response_model=SuccessResponse)
def delete_sub_sector(entry_id: str, session: DbSession) -> SuccessResponse:
    with translate_errors("delete sub-sector", failure_message="Failed to delete sub-sector."):
        SubSectorRepository(session).delete(entry_id)
    return SuccessResponse()
