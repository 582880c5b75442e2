"""Resume endpoints: PDF upload, single active resume selection, public download."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status

from app.api.v1.auth import require_admin
from app.api.v1.images import binary_response, get_blob_store, page_info, read_upload
from app.models import Resume
from app.schemas.assets import ActiveResumeResponse, ResumeListResponse, ResumeMetadata
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.services.blobs import BlobPayload, BlobStore

router = APIRouter()


def resume_metadata(store: BlobStore, resume: Resume) -> ResumeMetadata:
    return ResumeMetadata(
        id=resume.id,
        filename=resume.filename,
        original_name=resume.original_name,
        mime_type=resume.mime_type,
        size=resume.size,
        is_active=resume.is_active,
        url=store.url_for("resume", resume.id),
        upload_date=resume.upload_date,
    )


def _attachment(payload: BlobPayload, cache_control: str | None = None) -> Response:
    """Download response; filename* carries non-ASCII names, filename an ASCII fallback."""
    fallback = payload.filename.encode("ascii", "ignore").decode().replace('"', "")
    disposition = (
        f'attachment; filename="{fallback or "resume.pdf"}"; '
        f"filename*=UTF-8''{quote(payload.filename)}"
    )
    headers = {"Content-Disposition": disposition}
    if cache_control:
        headers["Cache-Control"] = cache_control
    return binary_response(payload, headers=headers)


@router.post("/upload", response_model=ResumeMetadata, status_code=status.HTTP_201_CREATED)
async def upload_resume(
    resume: Annotated[UploadFile, File(description="PDF, at most 5 MB")],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ResumeMetadata:
    """Store a PDF resume (admin only). New resumes start inactive."""
    data = await read_upload(resume)
    row = store.upload(
        "resume",
        data,
        mime_type=resume.content_type or "",
        original_name=resume.filename or "",
    )
    return resume_metadata(store, row)


@router.get("/all", response_model=ResumeListResponse)
def list_resumes(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 20,
) -> ResumeListResponse:
    result = store.list_metadata("resume", page=page, page_size=page_size)
    return ResumeListResponse(
        items=[resume_metadata(store, r) for r in result.items],
        pagination=page_info(result),
    )


@router.get("/info", response_model=ActiveResumeResponse)
def active_resume_info(
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ActiveResumeResponse:
    """Public: metadata of the active resume, or null when none is active."""
    resume = store.active_resume_info()
    if resume is None:
        return ActiveResumeResponse(resume=None, message="No active resume available")
    return ActiveResumeResponse(resume=resume_metadata(store, resume))


@router.put("/activate/{resume_id}", response_model=ResumeMetadata)
def activate_resume(
    resume_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> ResumeMetadata:
    """Make this the only active resume (admin only)."""
    return resume_metadata(store, store.activate(resume_id))


@router.get("/download/{resume_id}")
def download_resume(
    resume_id: int,
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> Response:
    return _attachment(store.fetch("resume", resume_id))


@router.get("/download")
def download_active_resume(
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> Response:
    """Public: the active resume. Not cached, since activation can switch it."""
    return _attachment(store.fetch_active_resume(), cache_control="no-cache")


@router.delete("/delete/{resume_id}", response_model=MessageResponse)
def delete_resume(
    resume_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    store: Annotated[BlobStore, Depends(get_blob_store)],
) -> MessageResponse:
    """Permanently delete an inactive resume (admin only). The active one is refused with 409."""
    store.delete(resume_id)
    return MessageResponse(message="Resume deleted successfully")
