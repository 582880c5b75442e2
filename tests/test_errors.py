"""Tests for mapping service and database failures to HTTP responses."""

import asyncio
import json
import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from app.api.errors import handle_database_unavailable, service_error_response
from app.services.errors import (
    AccountLockedError,
    AuthError,
    AuthzError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class TestServiceErrorResponse(unittest.TestCase):
    def test_status_codes(self) -> None:
        cases = [
            (ValidationError("bad"), 400),
            (AuthError("no"), 401),
            (AccountLockedError(), 423),
            (AuthzError("forbidden"), 403),
            (NotFoundError("missing"), 404),
            (ConflictError("busy"), 409),
        ]
        for exc, expected in cases:
            response = service_error_response(exc)
            self.assertEqual(response.status_code, expected)
            self.assertEqual(json.loads(response.body), {"detail": exc.message})

    def test_only_401_carries_www_authenticate(self) -> None:
        self.assertEqual(
            service_error_response(AuthError("no")).headers["www-authenticate"], "Bearer"
        )
        self.assertNotIn("www-authenticate", service_error_response(AuthzError("x")).headers)


class TestDatabaseUnavailable(unittest.TestCase):
    def test_operational_error_maps_to_503_without_driver_text(self) -> None:
        request = MagicMock()
        request.url.path = "/api/v1/projects"
        exc = OperationalError("SELECT 1", {}, Exception("connection refused on 10.0.0.5"))
        response = asyncio.run(handle_database_unavailable(request, exc))
        self.assertEqual(response.status_code, 503)
        self.assertEqual(json.loads(response.body), {"detail": "Service temporarily unavailable"})
