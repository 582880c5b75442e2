"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import (
    about,
    analytics,
    auth,
    contact,
    dashboard,
    footer,
    health,
    images,
    projects,
    resume,
    skills,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(about.router, prefix="/about", tags=["about"])
router.include_router(footer.router, prefix="/footer", tags=["footer"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(images.router, prefix="/images", tags=["images"])
router.include_router(resume.router, prefix="/resume", tags=["resume"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
