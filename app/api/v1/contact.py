"""Contact form (public submit), contact settings and the admin inbox."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.api.v1.images import page_info
from app.core.database import get_db
from app.models import Contact, ContactSettings
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactOut,
    ContactSettingsIn,
    ContactSettingsOut,
    ContactStatus,
    ContactStatusUpdate,
    ContactSubmitted,
)
from app.services.blobs import Page
from app.services.content import (
    CONTACT_SETTINGS_DEFAULTS,
    get_or_404,
    get_or_create_singleton,
    list_contacts,
    save_singleton,
    set_contact_status,
    submit_contact,
)

router = APIRouter()


def client_ip(request: Request) -> str | None:
    """First X-Forwarded-For hop when behind a proxy, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()[:64] or None
    return request.client.host if request.client else None


@router.post("", response_model=ContactSubmitted, status_code=status.HTTP_201_CREATED)
def submit_message(
    body: ContactCreate,
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Contact:
    """Public contact form. Stores the sender's IP and user agent with the message."""
    return submit_contact(
        db,
        body.model_dump(),
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )


@router.get("/settings", response_model=ContactSettingsOut)
def get_contact_settings(db: Annotated[Session, Depends(get_db)]) -> ContactSettings:
    return get_or_create_singleton(db, ContactSettings, CONTACT_SETTINGS_DEFAULTS)


@router.put("/settings", response_model=ContactSettingsOut)
def update_contact_settings(
    body: ContactSettingsIn,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ContactSettings:
    return save_singleton(
        db, ContactSettings, body.model_dump(), CONTACT_SETTINGS_DEFAULTS
    )


@router.get("", response_model=ContactListResponse)
def get_messages(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    status_filter: Annotated[ContactStatus | None, Query(alias="status")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1, le=100)] = 50,
) -> ContactListResponse:
    items, total = list_contacts(db, status=status_filter, page=page, page_size=page_size)
    return ContactListResponse(
        items=[ContactOut.model_validate(c) for c in items],
        pagination=page_info(Page(items=items, total=total, page=page, page_size=page_size)),
    )


@router.get("/{contact_id}", response_model=ContactOut)
def get_message(
    contact_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Contact:
    return get_or_404(db, Contact, contact_id, "Contact message")


@router.patch("/{contact_id}/status", response_model=ContactOut)
def update_message_status(
    contact_id: int,
    body: ContactStatusUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Contact:
    return set_contact_status(
        db, contact_id, body.status, reply_message=body.reply_message
    )


@router.delete("/{contact_id}", response_model=MessageResponse)
def delete_message(
    contact_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    contact = get_or_404(db, Contact, contact_id, "Contact message")
    db.delete(contact)
    db.commit()
    return MessageResponse(message="Contact message deleted successfully")
