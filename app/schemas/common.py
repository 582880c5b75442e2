"""Shared response shapes."""

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    has_next: bool
    has_prev: bool


class MessageResponse(BaseModel):
    message: str
