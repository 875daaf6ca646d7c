"""Project portfolio endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from mis_backend.api.dependencies import DbSession, json_body, require_session
from mis_backend.api.errors import translate_errors
from mis_backend.api.models import MessageResponse, ProjectRequest, ProjectResponse
from mis_backend.database.repositories import ProjectRepository
from mis_backend.shared import parse_identifier

router = APIRouter(
    prefix="/projects", tags=["projects"], dependencies=[Depends(require_session)]
)

ProjectPayload = Annotated[ProjectRequest, Depends(json_body(ProjectRequest))]

PROJECT_ID_REQUIRED = "A valid project id is required."


@router.get("", response_model=list[ProjectResponse])
def list_projects(session: DbSession) -> list[ProjectResponse]:
    with translate_errors("list projects", failure_message="Failed to load projects"):
        return [
            ProjectResponse.from_schema(project)
            for project in ProjectRepository(session).list_all()
        ]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_project(payload: ProjectPayload, session: DbSession) -> ProjectResponse:
    """Create a project together with its locations, clusters and reach."""

    with translate_errors("create project", failure_message="Failed to create project"):
        project = ProjectRepository(session).create(payload.to_fields())
        return ProjectResponse.from_schema(project)


@router.put("/{project_id}", response_model=MessageResponse)
def update_project(
    project_id: str, payload: ProjectPayload, session: DbSession
) -> MessageResponse:
    """Overwrite a project. Beneficiaries are left alone unless supplied."""

    with translate_errors("update project", failure_message="Failed to update project"):
        numeric_id = parse_identifier(project_id, PROJECT_ID_REQUIRED)
        ProjectRepository(session).update(numeric_id, payload.to_fields())
    return MessageResponse(message="Project updated")


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(project_id: str, session: DbSession) -> MessageResponse:
    with translate_errors("delete project", failure_message="Failed to delete project"):
        numeric_id = parse_identifier(project_id, PROJECT_ID_REQUIRED)
        ProjectRepository(session).delete(numeric_id)
    return MessageResponse(message="Project removed")
