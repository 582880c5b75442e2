"""Tests for the blob store: upload validation, delivery, soft delete, resume activation."""

from app.models import Image, Project, Resume
from app.services.blobs import CACHE_CONTROL, BlobStore
from app.services.errors import ConflictError, NotFoundError, ValidationError
from tests.support import PDF_BYTES, PNG_BYTES, DatabaseTestCase, make_settings


class BlobStoreTestCase(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.create_admin()
        self.store = BlobStore(self.session, self.settings)

    def upload_image(self, name: str = "photo.png", **kwargs) -> Image:
        return self.store.upload(
            "image", PNG_BYTES, "image/png", name, owner_ref=self.admin.id, **kwargs
        )

    def upload_resume(self, name: str = "cv.pdf") -> Resume:
        return self.store.upload("resume", PDF_BYTES, "application/pdf", name)


class TestUpload(BlobStoreTestCase):
    """upload enforces size and type limits and records metadata."""

    def test_image_round_trip(self) -> None:
        image = self.upload_image()
        self.assertTrue(image.is_active)
        self.assertEqual(image.size, len(PNG_BYTES))
        self.assertTrue(image.filename.startswith("img_"))
        self.assertTrue(image.filename.endswith("_photo.png"))

        payload = self.store.fetch("image", image.id)
        self.assertEqual(payload.data, PNG_BYTES)
        self.assertEqual(payload.mime_type, "image/png")
        self.assertEqual(payload.size, len(PNG_BYTES))
        self.assertEqual(payload.etag, f'"{image.id}"')
        self.assertEqual(payload.cache_control, CACHE_CONTROL)

    def test_project_image_filename(self) -> None:
        project = Project(
            title="Portfolio", description="A portfolio website", technologies=["Python"]
        )
        self.session.add(project)
        self.session.commit()
        image = self.upload_image(project_id=project.id)
        self.assertTrue(image.filename.startswith(f"project_{project.id}_"))
        self.assertEqual(image.project_id, project.id)

    def test_client_path_components_are_dropped(self) -> None:
        image = self.upload_image(name="C:\\Users\\me\\Pictures\\avatar.png")
        self.assertEqual(image.original_name, "avatar.png")

    def test_oversized_payload_rejected(self) -> None:
        data = b"\x00" * (6 * 1024 * 1024)
        with self.assertRaises(ValidationError) as ctx:
            self.store.upload("image", data, "image/png", "big.png", owner_ref=self.admin.id)
        self.assertEqual(ctx.exception.message, "File too large. Maximum size is 5MB.")
        self.assertEqual(self.session.query(Image).count(), 0)

    def test_exactly_max_size_accepted(self) -> None:
        data = b"\x00" * self.settings.MAX_UPLOAD_BYTES
        image = self.store.upload(
            "image", data, "image/png", "max.png", owner_ref=self.admin.id
        )
        self.assertEqual(image.size, self.settings.MAX_UPLOAD_BYTES)

    def test_empty_payload_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.upload("image", b"", "image/png", "x.png", owner_ref=self.admin.id)

    def test_wrong_mime_type_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.upload(
                "image", b"hello", "text/plain", "notes.txt", owner_ref=self.admin.id
            )
        with self.assertRaises(ValidationError) as ctx:
            self.store.upload("resume", PNG_BYTES, "image/png", "cv.png")
        self.assertEqual(ctx.exception.message, "Only PDF files are allowed")

    def test_mime_parameters_and_case_ignored(self) -> None:
        resume = self.store.upload(
            "resume", PDF_BYTES, "Application/PDF; charset=binary", "cv.pdf"
        )
        self.assertEqual(resume.mime_type, "application/pdf")

    def test_resume_starts_inactive(self) -> None:
        resume = self.upload_resume()
        self.assertFalse(resume.is_active)
        self.assertTrue(resume.filename.startswith("resume-"))
        self.assertTrue(resume.filename.endswith(".pdf"))


class TestFetch(BlobStoreTestCase):
    def test_missing_asset_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            self.store.fetch("image", 999)
        with self.assertRaises(NotFoundError):
            self.store.fetch("resume", 999)

    def test_active_resume_absent(self) -> None:
        self.upload_resume()
        with self.assertRaises(NotFoundError) as ctx:
            self.store.fetch_active_resume()
        self.assertEqual(ctx.exception.message, "No active resume found")
        self.assertIsNone(self.store.active_resume_info())


class TestSoftDelete(BlobStoreTestCase):
    """Images referenced by a project cannot be soft-deleted."""

    def test_in_use_image_conflicts(self) -> None:
        image = self.upload_image()
        self.session.add(
            Project(
                title="Portfolio",
                description="A portfolio website",
                technologies=["Python"],
                image=self.store.url_for("image", image.id),
            )
        )
        self.session.commit()
        with self.assertRaises(ConflictError):
            self.store.soft_delete(image.id)
        self.assertEqual(self.store.fetch("image", image.id).data, PNG_BYTES)

    def test_similar_url_does_not_block_delete(self) -> None:
        # "_" in the prefix must match only itself.
        self.store = BlobStore(self.session, make_settings(API_V1_PREFIX="/api/v_1"))
        image = self.upload_image()
        self.assertEqual(self.store.url_for("image", image.id), f"/api/v_1/images/{image.id}")
        self.session.add(
            Project(
                title="Portfolio",
                description="A portfolio website",
                technologies=["Python"],
                image=f"/api/vX1/images/{image.id}",
            )
        )
        self.session.commit()
        self.assertFalse(self.store.soft_delete(image.id).is_active)

    def test_soft_deleted_image_is_hidden(self) -> None:
        image = self.upload_image()
        self.store.soft_delete(image.id)
        with self.assertRaises(NotFoundError) as ctx:
            self.store.fetch("image", image.id)
        self.assertEqual(ctx.exception.message, "Image not available")
        self.assertEqual(self.store.list_metadata("image").total, 0)
        # Row is retained.
        self.assertEqual(self.session.query(Image).count(), 1)

    def test_unknown_image(self) -> None:
        with self.assertRaises(NotFoundError):
            self.store.soft_delete(42)


class TestResumeActivation(BlobStoreTestCase):
    """At most one resume is active; the active one cannot be deleted."""

    def test_activate_switches_single_active(self) -> None:
        first = self.upload_resume("first.pdf")
        second = self.upload_resume("second.pdf")

        self.store.activate(first.id)
        self.store.activate(second.id)

        flags = {r.id: r.is_active for r in self.store.list_metadata("resume").items}
        self.assertEqual(flags, {first.id: False, second.id: True})
        self.assertEqual(self.store.fetch_active_resume().filename, "second.pdf")
        self.assertEqual(self.store.active_resume_info().id, second.id)

    def test_activate_unknown_changes_nothing(self) -> None:
        resume = self.upload_resume()
        self.store.activate(resume.id)
        with self.assertRaises(NotFoundError):
            self.store.activate(resume.id + 100)
        self.session.refresh(resume)
        self.assertTrue(resume.is_active)

    def test_delete_active_conflicts(self) -> None:
        resume = self.upload_resume()
        self.store.activate(resume.id)
        with self.assertRaises(ConflictError):
            self.store.delete(resume.id)

    def test_delete_inactive_removes_row(self) -> None:
        resume = self.upload_resume()
        resume_id = resume.id
        self.store.delete(resume_id)
        with self.assertRaises(NotFoundError):
            self.store.fetch("resume", resume_id)


class TestListMetadata(BlobStoreTestCase):
    def test_pagination_newest_first(self) -> None:
        ids = [self.upload_image(f"{i}.png").id for i in range(3)]
        page = self.store.list_metadata("image", page=1, page_size=2)
        self.assertEqual(page.total, 3)
        self.assertEqual([img.id for img in page.items], [ids[2], ids[1]])
        self.assertTrue(page.has_next)
        self.assertFalse(page.has_prev)
        self.assertEqual(page.total_pages, 2)

        last = self.store.list_metadata("image", page=2, page_size=2)
        self.assertEqual([img.id for img in last.items], [ids[0]])
        self.assertFalse(last.has_next)
        self.assertTrue(last.has_prev)

    def test_filter_by_project(self) -> None:
        project = Project(
            title="Portfolio", description="A portfolio website", technologies=["Python"]
        )
        self.session.add(project)
        self.session.commit()
        owned = self.upload_image(project_id=project.id)
        self.upload_image()
        page = self.store.list_metadata("image", project_id=project.id)
        self.assertEqual([img.id for img in page.items], [owned.id])

    def test_resumes_include_inactive(self) -> None:
        self.upload_resume()
        self.upload_resume()
        self.assertEqual(self.store.list_metadata("resume").total, 2)

    def test_invalid_page_size(self) -> None:
        with self.assertRaises(ValidationError):
            self.store.list_metadata("image", page_size=0)
        with self.assertRaises(ValidationError):
            self.store.list_metadata("image", page=0)
