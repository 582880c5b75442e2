"""HTTP-level tests: auth gates, status codes, binary framing headers."""

from unittest.mock import patch

from tests.support import ADMIN_EMAIL, ADMIN_PASSWORD, PDF_BYTES, PNG_BYTES, ApiTestCase

API = "/api/v1"


class TestAuthRoutes(ApiTestCase):
    def test_login_returns_token_and_profile(self) -> None:
        self.create_admin()
        response = self.client.post(
            f"{API}/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["token_type"], "bearer")
        self.assertEqual(body["user"]["email"], ADMIN_EMAIL)
        self.assertNotIn("password_hash", body["user"])

    def test_wrong_password_is_401_then_locked_is_423(self) -> None:
        self.create_admin()
        for _ in range(5):
            response = self.client.post(
                f"{API}/auth/login", json={"email": ADMIN_EMAIL, "password": "wrong-pass"}
            )
            self.assertEqual(response.status_code, 401)
            self.assertEqual(response.json()["detail"], "Invalid credentials")
        response = self.client.post(
            f"{API}/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
        )
        self.assertEqual(response.status_code, 423)

    def test_profile_requires_token(self) -> None:
        response = self.client.get(f"{API}/auth/profile")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

        response = self.client.get(
            f"{API}/auth/profile", headers={"Authorization": "Bearer not-a-jwt"}
        )
        self.assertEqual(response.status_code, 401)

    def test_register_is_admin_only(self) -> None:
        headers = self.admin_headers()
        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "member@example.com", "password": "member-pw"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201)

        member = self.login("member@example.com", "member-pw")
        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "other@example.com", "password": "other-pw"},
            headers=member,
        )
        self.assertEqual(response.status_code, 403)

        response = self.client.post(
            f"{API}/auth/register",
            json={"email": "MEMBER@example.com", "password": "member-pw"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 409)

    def test_register_race_on_unique_email_is_409(self) -> None:
        headers = self.admin_headers()
        body = {"email": "member@example.com", "password": "member-pw"}
        self.assertEqual(
            self.client.post(f"{API}/auth/register", json=body, headers=headers).status_code,
            201,
        )
        with patch(
            "app.services.credentials.CredentialGuard._find_by_email", return_value=None
        ):
            response = self.client.post(f"{API}/auth/register", json=body, headers=headers)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["detail"], "User with this email already exists")

    def test_malformed_body_is_400(self) -> None:
        response = self.client.post(f"{API}/auth/login", json={"email": ADMIN_EMAIL})
        self.assertEqual(response.status_code, 400)

    def test_update_password_and_email(self) -> None:
        headers = self.admin_headers()
        response = self.client.put(
            f"{API}/auth/update-password",
            json={"current_password": ADMIN_PASSWORD, "new_password": "brand-new-pw"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 200)
        response = self.client.put(
            f"{API}/auth/update-email", json={"email": "Boss@Example.com"}, headers=headers
        )
        self.assertEqual(response.json(), {"email": "boss@example.com"})
        self.login("boss@example.com", "brand-new-pw")


class TestImageRoutes(ApiTestCase):
    def test_upload_requires_admin(self) -> None:
        response = self.client.post(
            f"{API}/images/upload", files={"image": ("a.png", PNG_BYTES, "image/png")}
        )
        self.assertEqual(response.status_code, 401)

    def test_upload_then_fetch_with_cache_headers(self) -> None:
        headers = self.admin_headers()
        response = self.client.post(
            f"{API}/images/upload",
            files={"image": ("a.png", PNG_BYTES, "image/png")},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201, response.text)
        meta = response.json()
        self.assertEqual(meta["url"], f"{API}/images/{meta['id']}")

        response = self.client.get(meta["url"])
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, PNG_BYTES)
        self.assertEqual(response.headers["content-type"], "image/png")
        self.assertEqual(response.headers["content-length"], str(len(PNG_BYTES)))
        self.assertEqual(response.headers["cache-control"], "public, max-age=31536000")
        self.assertEqual(response.headers["etag"], f'"{meta["id"]}"')

    def test_oversized_upload_is_400(self) -> None:
        headers = self.admin_headers()
        big = b"\x00" * (5 * 1024 * 1024 + 1)
        response = self.client.post(
            f"{API}/images/upload",
            files={"image": ("big.png", big, "image/png")},
            headers=headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "File too large. Maximum size is 5MB.")

    def test_in_use_image_delete_is_409(self) -> None:
        headers = self.admin_headers()
        project = self.client.post(
            f"{API}/projects",
            json={
                "title": "Portfolio",
                "description": "A portfolio website",
                "technologies": ["Python"],
            },
            headers=headers,
        ).json()
        response = self.client.post(
            f"{API}/projects/{project['id']}/image",
            files={"image": ("cover.png", PNG_BYTES, "image/png")},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201, response.text)
        image = response.json()
        self.assertEqual(image["project_id"], project["id"])
        self.assertEqual(
            self.client.get(f"{API}/projects/{project['id']}").json()["image"], image["url"]
        )

        response = self.client.delete(f"{API}/images/{image['id']}", headers=headers)
        self.assertEqual(response.status_code, 409)

    def test_project_without_image_gets_placeholder(self) -> None:
        response = self.client.post(
            f"{API}/projects",
            json={
                "title": "CLI",
                "description": "A command line tool",
                "technologies": ["Python"],
            },
            headers=self.admin_headers(),
        )
        self.assertEqual(response.status_code, 201, response.text)
        self.assertEqual(response.json()["image"], "/api/placeholder/400/250")

    def test_missing_image_is_404(self) -> None:
        self.assertEqual(self.client.get(f"{API}/images/12345").status_code, 404)


class TestResumeRoutes(ApiTestCase):
    def test_activate_and_download_active(self) -> None:
        headers = self.admin_headers()
        self.assertEqual(self.client.get(f"{API}/resume/download").status_code, 404)

        response = self.client.post(
            f"{API}/resume/upload",
            files={"resume": ("Jane Doe CV.pdf", PDF_BYTES, "application/pdf")},
            headers=headers,
        )
        self.assertEqual(response.status_code, 201, response.text)
        resume_id = response.json()["id"]
        self.assertFalse(response.json()["is_active"])

        response = self.client.put(f"{API}/resume/activate/{resume_id}", headers=headers)
        self.assertTrue(response.json()["is_active"])

        response = self.client.get(f"{API}/resume/download")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, PDF_BYTES)
        self.assertIn("attachment", response.headers["content-disposition"])
        self.assertIn('filename="Jane Doe CV.pdf"', response.headers["content-disposition"])

        info = self.client.get(f"{API}/resume/info").json()
        self.assertEqual(info["resume"]["id"], resume_id)

        response = self.client.delete(f"{API}/resume/delete/{resume_id}", headers=headers)
        self.assertEqual(response.status_code, 409)

    def test_non_pdf_is_400(self) -> None:
        headers = self.admin_headers()
        response = self.client.post(
            f"{API}/resume/upload",
            files={"resume": ("cv.txt", b"plain text", "text/plain")},
            headers=headers,
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Only PDF files are allowed")


class TestContentRoutes(ApiTestCase):
    def test_about_lazy_default_and_admin_put(self) -> None:
        response = self.client.get(f"{API}/about")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Your Name")

        payload = {
            "name": "Jane Doe",
            "title": "Engineer",
            "description": "Builds things",
            "email": "jane@example.com",
            "about_text": "Hello",
        }
        self.assertEqual(self.client.put(f"{API}/about", json=payload).status_code, 401)
        response = self.client.put(f"{API}/about", json=payload, headers=self.admin_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get(f"{API}/about").json()["name"], "Jane Doe")

    def test_contact_submit_is_public_and_inbox_is_admin(self) -> None:
        response = self.client.post(
            f"{API}/contact",
            json={
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "Grace@Example.com",
                "subject": "Hello there",
                "message": "I would like to talk about a project.",
            },
        )
        self.assertEqual(response.status_code, 201, response.text)
        contact_id = response.json()["id"]

        self.assertEqual(self.client.get(f"{API}/contact").status_code, 401)
        headers = self.admin_headers()
        inbox = self.client.get(f"{API}/contact", headers=headers).json()
        self.assertEqual(inbox["pagination"]["total"], 1)
        self.assertEqual(inbox["items"][0]["email"], "grace@example.com")

        response = self.client.patch(
            f"{API}/contact/{contact_id}/status",
            json={"status": "replied", "reply_message": "Thanks!"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertIsNotNone(response.json()["replied_at"])

    def test_invalid_contact_is_400(self) -> None:
        response = self.client.post(
            f"{API}/contact",
            json={
                "first_name": "G",
                "last_name": "Hopper",
                "email": "nope",
                "subject": "Hi",
                "message": "short",
            },
        )
        self.assertEqual(response.status_code, 400)

    def test_track_view_and_analytics(self) -> None:
        response = self.client.post(
            f"{API}/analytics/track-view", json={"page": "home", "session_id": "abc"}
        )
        self.assertEqual(response.status_code, 201)
        self.assertTrue(response.json()["is_unique"])
        repeat = self.client.post(
            f"{API}/analytics/track-view", json={"page": "home", "session_id": "abc"}
        )
        self.assertFalse(repeat.json()["is_unique"])

        summary = self.client.get(f"{API}/analytics?period=7d", headers=self.admin_headers())
        self.assertEqual(summary.status_code, 200)
        self.assertEqual(summary.json()["total_views"], 2)

    def test_dashboard_requires_admin(self) -> None:
        self.assertEqual(self.client.get(f"{API}/dashboard/stats").status_code, 401)
        response = self.client.get(f"{API}/dashboard/stats", headers=self.admin_headers())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["overview"]["total_users"], 1)

    def test_health(self) -> None:
        response = self.client.get(f"{API}/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")
        self.assertEqual(response.json()["database"], "connected")

    def test_health_degraded_when_database_unreachable(self) -> None:
        with patch("app.api.v1.health.check_db_connected", return_value=False):
            response = self.client.get(f"{API}/health")
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "degraded")
