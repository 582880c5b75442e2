"""Credential guard: account registration, login with lockout, token verification.

The guard owns no global state: it is built per request from a Session and the
Settings, so tests construct it against an isolated database.

Lockout: LOGIN_MAX_ATTEMPTS consecutive failures set lock_until to now plus
LOGIN_LOCK_MINUTES. While locked, login is refused even with the right password.
A failure after the lock expired restarts the counter at 1; a success resets it.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import jwt
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    is_valid_email,
    normalize_email,
    verify_password,
)
from app.models.base import as_utc
from app.models.user import User
from app.services.errors import (
    AccountLockedError,
    AuthError,
    AuthzError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

ROLES = frozenset({"admin", "user"})

# Client-facing messages. not_found and invalid_credentials share one message
# so login responses do not reveal which emails are registered.
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
INACTIVE_MESSAGE = "Account is deactivated"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass(frozen=True)
class LoginResult:
    """Issued token plus the authenticated account."""

    token: str
    user: User


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _validate_password(password: str, field: str = "Password") -> None:
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        raise ValidationError(
            f"{field} must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters."
        )


def _validate_email(email: str) -> str:
    normalized = normalize_email(email or "")
    if not is_valid_email(normalized):
        raise ValidationError("A valid email address is required.")
    return normalized


def _validate_name(value: str | None, field: str) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not (NAME_MIN_LEN <= len(value) <= NAME_MAX_LEN):
        raise ValidationError(
            f"{field} must be {NAME_MIN_LEN}-{NAME_MAX_LEN} characters."
        )
    return value


class CredentialGuard:
    """Authenticate accounts, issue/verify bearer tokens, enforce lockout policy."""

    def __init__(self, session: Session, settings: "Settings") -> None:
        self.session = session
        self.settings = settings
        self.clock = _utcnow

    def _find_by_email(self, email: str) -> User | None:
        return (
            self.session.query(User)
            .filter(func.lower(User.email) == normalize_email(email))
            .first()
        )

    def _get(self, account_id: int) -> User:
        user = self.session.get(User, account_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def register(
        self,
        email: str,
        password: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: str = "user",
    ) -> User:
        """Create an account with a bcrypt hash. Raises ValidationError or ConflictError."""
        normalized = _validate_email(email)
        _validate_password(password)
        first_name = _validate_name(first_name, "First name")
        last_name = _validate_name(last_name, "Last name")
        if role not in ROLES:
            raise ValidationError(f"role must be one of {sorted(ROLES)}.")

        if self._find_by_email(normalized) is not None:
            raise ConflictError("User with this email already exists")

        user = User(
            email=normalized,
            password_hash=hash_password(password, rounds=self.settings.BCRYPT_ROUNDS),
            first_name=first_name,
            last_name=last_name,
            role=role,
            is_active=True,
            failed_login_attempts=0,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Another request stored the same email after the lookup above.
            self.session.rollback()
            raise ConflictError("User with this email already exists", cause=e) from e
        self.session.refresh(user)
        logger.info("Account registered", extra={"account_id": user.id, "role": role})
        return user

    def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue a token.

        Order of checks: unknown email, lock window, deactivated, password.
        Only a password mismatch counts toward the lockout.
        """
        user = self._find_by_email(email or "")
        if user is None:
            logger.warning("Login failed", extra={"reason": "not_found"})
            raise AuthError(INVALID_CREDENTIALS_MESSAGE, reason="not_found")

        now = self.clock()
        if user.is_locked(now):
            logger.warning(
                "Login refused for locked account", extra={"account_id": user.id}
            )
            raise AccountLockedError()

        if not user.is_active:
            raise AuthError(INACTIVE_MESSAGE, reason="inactive")

        if not verify_password(password, user.password_hash):
            self._register_failure(user, now)
            raise AuthError(INVALID_CREDENTIALS_MESSAGE, reason="invalid_credentials")

        user.failed_login_attempts = 0
        user.lock_until = None
        user.last_login = now
        self.session.commit()
        self.session.refresh(user)

        token = create_access_token(
            sub=user.id, email=user.email, role=user.role, settings=self.settings
        )
        logger.info("Login succeeded", extra={"account_id": user.id})
        return LoginResult(token=token, user=user)

    def _register_failure(self, user: User, now: datetime) -> None:
        lock_until = as_utc(user.lock_until)
        if lock_until is not None and lock_until <= now:
            # Previous lock expired: start a fresh window.
            user.failed_login_attempts = 1
            user.lock_until = None
        else:
            user.failed_login_attempts = (user.failed_login_attempts or 0) + 1

        if user.failed_login_attempts >= self.settings.LOGIN_MAX_ATTEMPTS:
            user.lock_until = now + timedelta(minutes=self.settings.LOGIN_LOCK_MINUTES)
            logger.warning(
                "Account locked after repeated failed logins",
                extra={
                    "account_id": user.id,
                    "failed_login_attempts": user.failed_login_attempts,
                },
            )
        else:
            logger.warning(
                "Login failed",
                extra={
                    "reason": "invalid_credentials",
                    "account_id": user.id,
                    "failed_login_attempts": user.failed_login_attempts,
                },
            )
        self.session.commit()

    def verify(self, token: str) -> User:
        """Resolve a bearer token to its account. Raises AuthError on any failure."""
        try:
            payload = decode_access_token(token, settings=self.settings)
        except jwt.PyJWTError as e:
            raise AuthError(INVALID_TOKEN_MESSAGE, reason="invalid_token", cause=e) from e
        try:
            account_id = int(payload.get("sub"))
        except (TypeError, ValueError) as e:
            raise AuthError("Invalid token payload", reason="invalid_token", cause=e) from e

        user = self.session.get(User, account_id)
        if user is None:
            raise AuthError("User not found", reason="invalid_token")
        if not user.is_active:
            raise AuthError(INACTIVE_MESSAGE, reason="inactive")
        return user

    def require_role(self, token: str, role: str) -> User:
        """As verify, plus AuthzError when the account's role differs."""
        user = self.verify(token)
        if user.role != role:
            raise AuthzError(f"{role.capitalize()} access required")
        return user

    def change_password(
        self, account_id: int, current_password: str, new_password: str
    ) -> None:
        user = self._get(account_id)
        if not verify_password(current_password, user.password_hash):
            raise AuthError("Current password is incorrect", reason="invalid_credentials")
        _validate_password(new_password, field="New password")
        user.password_hash = hash_password(
            new_password, rounds=self.settings.BCRYPT_ROUNDS
        )
        self.session.commit()
        logger.info("Password changed", extra={"account_id": user.id})

    def change_email(self, account_id: int, new_email: str) -> User:
        user = self._get(account_id)
        normalized = _validate_email(new_email)
        existing = self._find_by_email(normalized)
        if existing is not None and existing.id != user.id:
            raise ConflictError("Email is already in use")
        user.email = normalized
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("Email is already in use", cause=e) from e
        self.session.refresh(user)
        logger.info("Email changed", extra={"account_id": user.id})
        return user

    def get_profile(self, account_id: int) -> User:
        return self._get(account_id)

    def list_accounts(self) -> list[User]:
        return self.session.query(User).order_by(User.id).all()
