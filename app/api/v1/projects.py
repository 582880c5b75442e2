"""Project endpoints: public listing, admin CRUD, project image upload, section settings."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.api.v1.images import get_blob_store, image_metadata, read_upload
from app.core.database import get_db
from app.models import Project, ProjectsSettings
from app.schemas.assets import ImageMetadata
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.projects import (
    ProjectCreate,
    ProjectListResponse,
    ProjectOut,
    ProjectsSettingsIn,
    ProjectsSettingsOut,
    ProjectUpdate,
)
from app.services.blobs import BlobStore
from app.services.content import (
    PROJECTS_SETTINGS_DEFAULTS,
    apply_changes,
    get_or_404,
    get_or_create_singleton,
    list_projects,
    save_singleton,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/settings", response_model=ProjectsSettingsOut)
def get_projects_settings(db: Annotated[Session, Depends(get_db)]) -> ProjectsSettings:
    return get_or_create_singleton(db, ProjectsSettings, PROJECTS_SETTINGS_DEFAULTS)


@router.put("/settings", response_model=ProjectsSettingsOut)
def update_projects_settings(
    body: ProjectsSettingsIn,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ProjectsSettings:
    return save_singleton(
        db, ProjectsSettings, body.model_dump(), PROJECTS_SETTINGS_DEFAULTS
    )


@router.get("", response_model=ProjectListResponse)
def get_projects(
    db: Annotated[Session, Depends(get_db)],
    status_filter: Annotated[
        str,
        Query(alias="status", description="active, inactive, archived or all"),
    ] = "active",
    featured: bool | None = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> ProjectListResponse:
    """Public project list, ordered by `order` then newest first."""
    projects, count = list_projects(db, status=status_filter, featured=featured, limit=limit)
    return ProjectListResponse(
        items=[ProjectOut.model_validate(p) for p in projects], count=count
    )


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Annotated[Session, Depends(get_db)]) -> Project:
    return get_or_404(db, Project, project_id, "Project")


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Project:
    project = Project(**body.model_dump(), status="active")
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Project created", extra={"project_id": project.id})
    return project


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: int,
    body: ProjectUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Project:
    """Partial update: fields omitted from the body keep their values."""
    project = get_or_404(db, Project, project_id, "Project")
    apply_changes(project, body.model_dump(exclude_unset=True, exclude_none=True))
    db.commit()
    db.refresh(project)
    return project


@router.post(
    "/{project_id}/image",
    response_model=ImageMetadata,
    status_code=status.HTTP_201_CREATED,
)
async def upload_project_image(
    project_id: int,
    image: Annotated[UploadFile, File(description="JPEG, PNG, GIF or WebP, at most 5 MB")],
    admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ImageMetadata:
    """Store an image owned by the project and point the project's image field at it."""
    project = get_or_404(db, Project, project_id, "Project")
    data = await read_upload(image)
    row = store.upload(
        "image",
        data,
        mime_type=image.content_type or "",
        original_name=image.filename or "",
        owner_ref=admin.id,
        project_id=project.id,
    )
    project.image = store.url_for("image", row.id)
    db.commit()
    return image_metadata(store, row)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    project = get_or_404(db, Project, project_id, "Project")
    db.delete(project)
    db.commit()
    logger.info("Project deleted", extra={"project_id": project_id})
    return MessageResponse(message="Project deleted successfully")
