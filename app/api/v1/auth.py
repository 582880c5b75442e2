"""Login, account management and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.auth import (
    AccountProfile,
    CurrentUser,
    EmailResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UpdateEmailRequest,
    UpdatePasswordRequest,
    UsersListResponse,
)
from app.schemas.common import MessageResponse
from app.services.credentials import CredentialGuard
from app.services.errors import AuthError

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_credential_guard(
    db: Annotated[Session, Depends(get_db)],
) -> CredentialGuard:
    """Dependency: credential guard bound to this request's session."""
    return CredentialGuard(db, get_settings())


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Not authenticated", reason="invalid_token")
    return credentials.credentials


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    user = guard.verify(_bearer_token(credentials))
    return CurrentUser.model_validate(user)


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    user = guard.require_role(_bearer_token(credentials), "admin")
    return CurrentUser.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>

    Five consecutive wrong passwords lock the account (423) for LOGIN_LOCK_MINUTES.
    """
    result = guard.login(body.email, body.password)
    return TokenResponse(
        access_token=result.token,
        token_type="bearer",
        user=AccountProfile.model_validate(result.user),
    )


@router.post(
    "/register",
    response_model=AccountProfile,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> AccountProfile:
    """Create an account (admin only). Emails differing only in case conflict (409)."""
    user = guard.register(
        body.email,
        body.password,
        first_name=body.first_name,
        last_name=body.last_name,
        role=body.role,
    )
    return AccountProfile.model_validate(user)


@router.get("/profile", response_model=AccountProfile)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> AccountProfile:
    return AccountProfile.model_validate(guard.get_profile(current_user.id))


@router.put("/update-email", response_model=EmailResponse)
def update_email(
    body: UpdateEmailRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> EmailResponse:
    user = guard.change_email(current_user.id, body.email)
    return EmailResponse(email=user.email)


@router.put("/update-password", response_model=MessageResponse)
def update_password(
    body: UpdatePasswordRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> MessageResponse:
    guard.change_password(current_user.id, body.current_password, body.new_password)
    return MessageResponse(message="Password updated successfully")


@router.post("/logout", response_model=MessageResponse)
def logout() -> MessageResponse:
    """Tokens are stateless; the client discards its copy."""
    return MessageResponse(message="Logout successful")


@router.get("/users", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    guard: Annotated[CredentialGuard, Depends(get_credential_guard)],
) -> UsersListResponse:
    """List all accounts (admin only)."""
    return UsersListResponse(
        users=[AccountProfile.model_validate(u) for u in guard.list_accounts()]
    )
