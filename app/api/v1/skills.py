"""Skill category endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.database import get_db
from app.models import Skill
from app.schemas.auth import CurrentUser
from app.schemas.common import MessageResponse
from app.schemas.skills import (
    AdditionalTechnologies,
    SkillCategoryCreate,
    SkillCategoryOut,
    SkillCategoryUpdate,
    SkillListResponse,
)
from app.services.content import (
    apply_changes,
    get_additional_technologies,
    get_or_404,
    list_skills,
    set_additional_technologies,
)

router = APIRouter()


@router.get("", response_model=SkillListResponse)
def get_skills(
    db: Annotated[Session, Depends(get_db)],
    category: str | None = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> SkillListResponse:
    """Active skill categories, ordered by `order` then newest first."""
    skills, count = list_skills(db, category=category, limit=limit)
    return SkillListResponse(
        items=[SkillCategoryOut.model_validate(s) for s in skills], count=count
    )


@router.get("/additional-technologies", response_model=AdditionalTechnologies)
def read_additional_technologies(
    db: Annotated[Session, Depends(get_db)],
) -> AdditionalTechnologies:
    return AdditionalTechnologies(additional_technologies=get_additional_technologies(db))


@router.put("/additional-technologies", response_model=AdditionalTechnologies)
def update_additional_technologies(
    body: AdditionalTechnologies,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> AdditionalTechnologies:
    techs = set_additional_technologies(db, body.additional_technologies)
    return AdditionalTechnologies(additional_technologies=techs)


@router.get("/{skill_id}", response_model=SkillCategoryOut)
def get_skill(skill_id: int, db: Annotated[Session, Depends(get_db)]) -> Skill:
    return get_or_404(db, Skill, skill_id, "Skill category")


@router.post("", response_model=SkillCategoryOut, status_code=status.HTTP_201_CREATED)
def create_skill(
    body: SkillCategoryCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Skill:
    skill = Skill(**body.model_dump(), is_active=True, additional_technologies=[])
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return skill


@router.put("/{skill_id}", response_model=SkillCategoryOut)
def update_skill(
    skill_id: int,
    body: SkillCategoryUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Skill:
    skill = get_or_404(db, Skill, skill_id, "Skill category")
    apply_changes(skill, body.model_dump(exclude_unset=True, exclude_none=True))
    db.commit()
    db.refresh(skill)
    return skill


@router.delete("/{skill_id}", response_model=MessageResponse)
def delete_skill(
    skill_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    skill = get_or_404(db, Skill, skill_id, "Skill category")
    db.delete(skill)
    db.commit()
    return MessageResponse(message="Skill category deleted successfully")
