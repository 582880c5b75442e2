"""Shared test helpers: isolated in-memory SQLite database and test settings."""

import unittest
from collections.abc import Generator
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.database import get_db
from app.models import Base
from app.services.credentials import CredentialGuard

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-password"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
PDF_BYTES = b"%PDF-1.4\n" + b"0" * 64 + b"\n%%EOF"


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": "test-secret",
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test on a single shared in-memory connection."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )
        self.session: Session = self.session_factory()
        self.settings = make_settings()

    def tearDown(self) -> None:
        self.session.close()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def guard(self) -> CredentialGuard:
        return CredentialGuard(self.session, self.settings)

    def create_admin(self) -> Any:
        return self.guard().register(
            ADMIN_EMAIL, ADMIN_PASSWORD, first_name="Ada", last_name="Admin", role="admin"
        )


class ApiTestCase(DatabaseTestCase):
    """TestClient against the real app with get_db pointed at the test database."""

    def setUp(self) -> None:
        super().setUp()
        from app.main import app

        def override_get_db() -> Generator[Session, None, None]:
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        self.app = app
        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.app.dependency_overrides.clear()
        super().tearDown()

    def login(self, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> dict[str, str]:
        response = self.client.post(
            "/api/v1/auth/login", json={"email": email, "password": password}
        )
        self.assertEqual(response.status_code, 200, response.text)
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    def admin_headers(self) -> dict[str, str]:
        self.create_admin()
        return self.login()
