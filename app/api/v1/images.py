"""Image endpoints: upload (admin), public binary delivery, metadata list/edit, soft delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.config import get_settings
from app.core.database import get_db
from app.models import Image
from app.schemas.assets import ImageListResponse, ImageMetadata, ImageUpdateRequest
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse, Pagination
from app.services.blobs import BlobPayload, BlobStore, Page

router = APIRouter()


def get_blob_store(db: Annotated[Session, Depends(get_db)]) -> BlobStore:
    """Dependency: blob store bound to this request's session."""
    return BlobStore(db, get_settings())


async def read_upload(upload: UploadFile) -> bytes:
    """Read at most MAX_UPLOAD_BYTES + 1 so the size check sees an oversize file without buffering all of it."""
    return await upload.read(get_settings().MAX_UPLOAD_BYTES + 1)


def binary_response(payload: BlobPayload, headers: dict[str, str] | None = None) -> Response:
    """Raw bytes framed with type, length, cache and entity-tag headers."""
    return Response(
        content=payload.data,
        media_type=payload.mime_type,
        headers={
            "Content-Length": str(payload.size),
            "Cache-Control": payload.cache_control,
            "ETag": payload.etag,
            **(headers or {}),
        },
    )


def page_info(page: Page) -> Pagination:
    return Pagination(
        page=page.page,
        page_size=page.page_size,
        total=page.total,
        total_pages=page.total_pages,
        has_next=page.has_next,
        has_prev=page.has_prev,
    )


def image_metadata(store: BlobStore, image: Image) -> ImageMetadata:
    return ImageMetadata(
        id=image.id,
        filename=image.filename,
        original_name=image.original_name,
        mime_type=image.mime_type,
        size=image.size,
        url=store.url_for("image", image.id),
        uploaded_by=image.uploaded_by,
        project_id=image.project_id,
        is_active=image.is_active,
        created_at=image.created_at,
        updated_at=image.updated_at,
    )


@router.post("/upload", response_model=ImageMetadata, status_code=status.HTTP_201_CREATED)
async def upload_image(
    image: Annotated[UploadFile, File(description="JPEG, PNG, GIF or WebP, at most 5 MB")],
    admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ImageMetadata:
    """
    Store an image in the database (admin only).

    Send `multipart/form-data` with the file in field `image`. Oversized or
    non-image files are rejected with 400. The response `url` serves the bytes.
    """
    data = await read_upload(image)
    row = store.upload(
        "image",
        data,
        mime_type=image.content_type or "",
        original_name=image.filename or "",
        owner_ref=admin.id,
    )
    return image_metadata(store, row)


@router.get("", response_model=ImageListResponse)
def list_images(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
    project_id: int | None = None,
) -> ImageListResponse:
    """Active images, newest first, without payload bytes (admin only)."""
    result = store.list_metadata("image", page=page, page_size=page_size, project_id=project_id)
    return ImageListResponse(
        items=[image_metadata(store, img) for img in result.items],
        pagination=page_info(result),
    )


@router.get("/{image_id}")
def get_image(
    image_id: int,
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> Response:
    """Serve image bytes. Content is immutable, so responses are cacheable for a year."""
    return binary_response(store.fetch("image", image_id))


@router.put("/{image_id}", response_model=ImageMetadata)
def update_image(
    image_id: int,
    body: ImageUpdateRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ImageMetadata:
    if "project_id" in body.model_fields_set:
        row = store.update_image(image_id, filename=body.filename, project_id=body.project_id)
    else:
        row = store.update_image(image_id, filename=body.filename)
    return image_metadata(store, row)


@router.delete("/{image_id}", response_model=MessageResponse)
def delete_image(
    image_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> MessageResponse:
    """Soft delete (admin only). Refused with 409 while a project uses the image."""
    store.soft_delete(image_id)
    return MessageResponse(message="Image deleted successfully")
