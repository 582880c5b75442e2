"""About document: public read, admin replace."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.models import About
from app.schemas.auth import CurrentUser
from app.schemas.content import AboutIn, AboutOut
from app.services.content import ABOUT_DEFAULTS, get_or_create_singleton, save_singleton

router = APIRouter()


@router.get("", response_model=AboutOut)
def get_about(db: Annotated[Session, Depends(get_db)]) -> About:
    """Created with placeholder content on first read."""
    return get_or_create_singleton(db, About, ABOUT_DEFAULTS)


@router.put("", response_model=AboutOut)
def update_about(
    body: AboutIn,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> About:
    return save_singleton(db, About, body.model_dump(), ABOUT_DEFAULTS)
