"""Service-layer error taxonomy. Routes never see raw driver errors, only these.

The API layer maps each class to an HTTP status via status_code.
"""


class ServiceError(Exception):
    """Base class for failures raised by service operations."""

    status_code = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or missing input (bad email, short password, oversized upload)."""

    status_code = 400


class AuthError(ServiceError):
    """
    Missing, invalid or expired credential.

    reason is a stable code for callers and logs: not_found, locked, inactive,
    invalid_credentials, invalid_token. message is what the client sees.
    """

    status_code = 401

    def __init__(
        self,
        message: str,
        reason: str = "invalid_credentials",
        cause: Exception | None = None,
    ) -> None:
        self.reason = reason
        super().__init__(message, cause)


class AccountLockedError(AuthError):
    """Login refused because the account is inside its lock window."""

    status_code = 423

    def __init__(
        self,
        message: str = (
            "Account is temporarily locked due to too many failed attempts. "
            "Please try again later."
        ),
    ) -> None:
        super().__init__(message, reason="locked")


class AuthzError(ServiceError):
    """Authenticated, but the account's role does not allow the operation."""

    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    """A state precondition failed (duplicate email, image in use, active resume)."""

    status_code = 409


class UnavailableError(ServiceError):
    """The backing store is unreachable or timed out."""

    status_code = 503
