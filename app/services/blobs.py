"""Blob store: accept, persist, serve and retire binary assets (images and resumes).

Payloads live in the database next to their metadata and never change after
upload. Images are retired by soft delete (is_active=false). Resumes have an
exclusive active flag: activation flips every row in a single UPDATE, so the
"at most one active resume" invariant holds without a read-modify-write gap.
"""

import logging
import math
import ntpath
import secrets
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import case, update
from sqlalchemy.orm import Session, undefer

from app.models import Image, Project, Resume
from app.services.errors import ConflictError, NotFoundError, ValidationError

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

AssetKind = Literal["image", "resume"]

IMAGE_MIME_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
)
RESUME_MIME_TYPES = frozenset({"application/pdf"})

# Content never changes once stored, so clients may cache for a year.
CACHE_CONTROL = "public, max-age=31536000"

MAX_PAGE_SIZE = 100
ORIGINAL_NAME_MAX_LEN = 200

_UNSET: Any = object()


@dataclass(frozen=True)
class AssetRule:
    """Per-kind upload policy and retrieval route."""

    model: type
    allowed_mime_types: frozenset[str]
    type_error: str
    label: str
    route: str


ASSET_RULES: dict[str, AssetRule] = {
    "image": AssetRule(
        model=Image,
        allowed_mime_types=IMAGE_MIME_TYPES,
        type_error="Invalid file type. Only JPEG, PNG, GIF, and WebP images are allowed.",
        label="Image",
        route="images",
    ),
    "resume": AssetRule(
        model=Resume,
        allowed_mime_types=RESUME_MIME_TYPES,
        type_error="Only PDF files are allowed",
        label="Resume",
        route="resume/download",
    ),
}


@dataclass(frozen=True)
class BlobPayload:
    """Everything needed to frame a binary response."""

    data: bytes
    mime_type: str
    size: int
    etag: str
    filename: str
    cache_control: str = CACHE_CONTROL


@dataclass(frozen=True)
class Page:
    """One page of metadata rows plus totals."""

    items: list[Any]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1


def _rule(kind: str) -> AssetRule:
    rule = ASSET_RULES.get(kind)
    if rule is None:
        raise ValidationError(f"Unknown asset kind {kind!r}.")
    return rule


def _clean_original_name(name: str | None) -> str:
    """Drop client-side directory components and control characters; bound the length."""
    base = ntpath.basename((name or "").strip()).strip()
    base = "".join(ch for ch in base if ch.isprintable())
    return base[-ORIGINAL_NAME_MAX_LEN:] or "upload"


def _normalize_mime(mime_type: str | None) -> str:
    return (mime_type or "").split(";")[0].strip().lower()


def _generate_filename(kind: str, original_name: str, project_id: int | None) -> str:
    """Timestamp plus a random component; collisions need the same ms and token."""
    millis = int(time.time() * 1000)
    if kind == "resume":
        return f"resume-{millis}-{secrets.randbelow(10**9)}.pdf"
    token = secrets.token_hex(4)
    if project_id is not None:
        return f"project_{project_id}_{millis}_{token}_{original_name}"
    return f"img_{millis}_{token}_{original_name}"


class BlobStore:
    """Binary asset persistence and delivery bound to one Session."""

    def __init__(self, session: Session, settings: "Settings") -> None:
        self.session = session
        self.settings = settings

    def url_for(self, kind: AssetKind, asset_id: int) -> str:
        """Retrieval URL for an asset; projects reference images by this URL."""
        return f"{self.settings.API_V1_PREFIX}/{_rule(kind).route}/{asset_id}"

    def _get(self, kind: AssetKind, asset_id: int, with_data: bool = False) -> Any:
        rule = _rule(kind)
        query = self.session.query(rule.model)
        if with_data:
            query = query.options(undefer(rule.model.data))
        row = query.filter(rule.model.id == asset_id).first()
        if row is None:
            raise NotFoundError(f"{rule.label} not found")
        return row

    def upload(
        self,
        kind: AssetKind,
        data: bytes,
        mime_type: str,
        original_name: str,
        owner_ref: int | None = None,
        project_id: int | None = None,
    ) -> Image | Resume:
        """
        Validate and store a payload. Returns the persisted row.

        Raises ValidationError for empty or oversized payloads, a MIME type outside
        the kind's whitelist, or an image without an uploader.
        """
        rule = _rule(kind)
        if not data:
            raise ValidationError("Uploaded file is empty.")
        max_bytes = self.settings.MAX_UPLOAD_BYTES
        if len(data) > max_bytes:
            raise ValidationError(
                f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
            )
        mime = _normalize_mime(mime_type)
        if mime not in rule.allowed_mime_types:
            raise ValidationError(rule.type_error)

        name = _clean_original_name(original_name)
        filename = _generate_filename(kind, name, project_id)

        if kind == "image":
            if owner_ref is None:
                raise ValidationError("Uploader is required")
            row: Image | Resume = Image(
                filename=filename,
                original_name=name,
                mime_type=mime,
                size=len(data),
                data=data,
                uploaded_by=owner_ref,
                project_id=project_id,
                is_active=True,
            )
        else:
            row = Resume(
                filename=filename,
                original_name=name,
                mime_type=mime,
                size=len(data),
                data=data,
                is_active=False,
            )
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        logger.info(
            "Asset uploaded",
            extra={
                "kind": kind,
                "asset_id": row.id,
                "size": row.size,
                "mime_type": mime,
            },
        )
        return row

    def fetch(self, kind: AssetKind, asset_id: int) -> BlobPayload:
        """Return payload and framing metadata. Soft-deleted images are not found."""
        row = self._get(kind, asset_id, with_data=True)
        if kind == "image" and not row.is_active:
            raise NotFoundError("Image not available")
        return self._payload(row)

    def fetch_active_resume(self) -> BlobPayload:
        row = (
            self.session.query(Resume)
            .options(undefer(Resume.data))
            .filter(Resume.is_active.is_(True))
            .order_by(Resume.updated_at.desc(), Resume.id.desc())
            .first()
        )
        if row is None:
            raise NotFoundError("No active resume found")
        return self._payload(row)

    @staticmethod
    def _payload(row: Image | Resume) -> BlobPayload:
        return BlobPayload(
            data=row.data,
            mime_type=row.mime_type,
            size=row.size,
            etag=f'"{row.id}"',
            filename=row.original_name,
        )

    def active_resume_info(self) -> Resume | None:
        return (
            self.session.query(Resume)
            .filter(Resume.is_active.is_(True))
            .order_by(Resume.updated_at.desc(), Resume.id.desc())
            .first()
        )

    def soft_delete(self, image_id: int) -> Image:
        """Mark an image inactive. Refused while any project's image field points at it."""
        image = self._get("image", image_id)
        url = self.url_for("image", image.id)
        in_use = (
            self.session.query(Project.id)
            .filter(Project.image.endswith(url, autoescape=True))
            .first()
        )
        if in_use is not None:
            raise ConflictError(
                "Cannot delete image. It is currently being used by a project."
            )
        image.is_active = False
        self.session.commit()
        logger.info("Image soft-deleted", extra={"asset_id": image.id})
        return image

    def update_image(
        self,
        image_id: int,
        filename: str | None = None,
        project_id: int | None = _UNSET,
    ) -> Image:
        """Rename an image or (re)assign its owning project. The payload is untouched."""
        image = self._get("image", image_id)
        if filename:
            image.filename = filename.strip()[:512]
        if project_id is not _UNSET:
            if project_id is not None and self.session.get(Project, project_id) is None:
                raise NotFoundError("Project not found")
            image.project_id = project_id
        self.session.commit()
        self.session.refresh(image)
        return image

    def activate(self, resume_id: int) -> Resume:
        """Make resume_id the only active resume, in one statement."""
        resume = self._get("resume", resume_id)
        self.session.execute(
            update(Resume)
            .values(is_active=case((Resume.id == resume.id, True), else_=False))
            .execution_options(synchronize_session=False)
        )
        self.session.commit()
        self.session.refresh(resume)
        logger.info("Resume activated", extra={"asset_id": resume.id})
        return resume

    def delete(self, resume_id: int) -> None:
        """Physically remove an inactive resume and its payload."""
        resume = self._get("resume", resume_id)
        if resume.is_active:
            raise ConflictError(
                "Cannot delete active resume. Please activate another resume first."
            )
        self.session.delete(resume)
        self.session.commit()
        logger.info("Resume deleted", extra={"asset_id": resume_id})

    def list_metadata(
        self,
        kind: AssetKind,
        page: int = 1,
        page_size: int = 20,
        project_id: int | None = None,
    ) -> Page:
        """
        Payload-free metadata, newest first.

        Images: only active rows, optionally restricted to one project.
        Resumes: every row, active or not.
        """
        rule = _rule(kind)
        if page < 1:
            raise ValidationError("page must be at least 1.")
        if not (1 <= page_size <= MAX_PAGE_SIZE):
            raise ValidationError(f"page_size must be between 1 and {MAX_PAGE_SIZE}.")

        model = rule.model
        query = self.session.query(model)
        if kind == "image":
            query = query.filter(Image.is_active.is_(True))
            if project_id is not None:
                query = query.filter(Image.project_id == project_id)

        total = query.count()
        items = (
            query.order_by(model.created_at.desc(), model.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return Page(items=items, total=total, page=page, page_size=page_size)
