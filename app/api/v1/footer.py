"""Footer document: public read, admin replace."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.models import Footer
from app.schemas.auth import CurrentUser
from app.schemas.content import FooterIn, FooterOut
from app.services.content import FOOTER_DEFAULTS, get_or_create_singleton, save_singleton

router = APIRouter()


@router.get("", response_model=FooterOut)
def get_footer(db: Annotated[Session, Depends(get_db)]) -> Footer:
    return get_or_create_singleton(db, Footer, FOOTER_DEFAULTS)


@router.put("", response_model=FooterOut)
def update_footer(
    body: FooterIn,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Footer:
    return save_singleton(db, Footer, body.model_dump(), FOOTER_DEFAULTS)
