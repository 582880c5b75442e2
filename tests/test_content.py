"""Tests for content queries: singleton documents, listings, contact inbox."""

from datetime import UTC, datetime

from app.models import About, Contact, Footer, Project, ProjectsSettings, Skill
from app.services.content import (
    ABOUT_DEFAULTS,
    FOOTER_DEFAULTS,
    PROJECTS_SETTINGS_DEFAULTS,
    get_additional_technologies,
    get_or_404,
    get_or_create_singleton,
    list_contacts,
    list_projects,
    list_skills,
    save_singleton,
    set_additional_technologies,
    set_contact_status,
    submit_contact,
)
from app.services.errors import NotFoundError
from tests.support import DatabaseTestCase


class TestSingletons(DatabaseTestCase):
    """First read creates the default document; later reads reuse it."""

    def test_get_creates_exactly_one_row(self) -> None:
        first = get_or_create_singleton(self.session, About, ABOUT_DEFAULTS)
        second = get_or_create_singleton(self.session, About, ABOUT_DEFAULTS)
        self.assertEqual(first.id, second.id)
        self.assertEqual(self.session.query(About).count(), 1)
        self.assertEqual(first.name, "Your Name")

    def test_defaults_are_not_shared_between_rows(self) -> None:
        footer = get_or_create_singleton(self.session, Footer, FOOTER_DEFAULTS)
        footer.social_links = footer.social_links + [{"name": "GitHub", "url": "https://x"}]
        self.session.commit()
        self.assertEqual(FOOTER_DEFAULTS["social_links"], [])

    def test_save_replaces_fields_in_place(self) -> None:
        created = get_or_create_singleton(
            self.session, ProjectsSettings, PROJECTS_SETTINGS_DEFAULTS
        )
        saved = save_singleton(
            self.session,
            ProjectsSettings,
            {"projects_title": "Work", "projects_subtitle": "Things I built"},
            PROJECTS_SETTINGS_DEFAULTS,
        )
        self.assertEqual(saved.id, created.id)
        self.assertEqual(saved.projects_title, "Work")
        self.assertEqual(saved.max_featured_projects, 6)
        self.assertEqual(self.session.query(ProjectsSettings).count(), 1)


class TestListings(DatabaseTestCase):
    def _project(self, title: str, **kwargs) -> Project:
        project = Project(
            title=title,
            description="Some description",
            technologies=["Python"],
            **kwargs,
        )
        self.session.add(project)
        self.session.commit()
        return project

    def test_project_image_defaults_to_placeholder(self) -> None:
        project = self._project("Imageless")
        self.assertEqual(project.image, "/api/placeholder/400/250")

    def test_projects_filtered_and_ordered(self) -> None:
        b = self._project("Second", order=2)
        a = self._project("First", order=1, featured=True)
        self._project("Old", order=0, status="archived")

        projects, count = list_projects(self.session)
        self.assertEqual([p.id for p in projects], [a.id, b.id])
        self.assertEqual(count, 2)

        featured, _ = list_projects(self.session, featured=True)
        self.assertEqual([p.id for p in featured], [a.id])

        everything, total = list_projects(self.session, status="all", limit=1)
        self.assertEqual(len(everything), 1)
        self.assertEqual(total, 3)

    def test_skills_only_active(self) -> None:
        self.session.add_all(
            [
                Skill(category="Backend", skills=[{"name": "Python", "level": 90}]),
                Skill(category="Legacy", skills=[{"name": "Perl", "level": 40}], is_active=False),
            ]
        )
        self.session.commit()
        skills, count = list_skills(self.session)
        self.assertEqual([s.category for s in skills], ["Backend"])
        self.assertEqual(count, 1)
        self.assertEqual(list_skills(self.session, category="Frontend")[1], 0)

    def test_additional_technologies_creates_holder_category(self) -> None:
        self.assertEqual(get_additional_technologies(self.session), [])
        set_additional_technologies(self.session, ["Docker", "Redis"])
        self.assertEqual(get_additional_technologies(self.session), ["Docker", "Redis"])
        self.assertEqual(self.session.query(Skill).one().category, "General Skills")

    def test_get_or_404(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            get_or_404(self.session, Project, 7, "Project")
        self.assertEqual(ctx.exception.message, "Project not found")


class TestContacts(DatabaseTestCase):
    def _submit(self, subject: str = "Hello there") -> Contact:
        return submit_contact(
            self.session,
            {
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "grace@example.com",
                "subject": subject,
                "message": "I would like to talk about a project.",
            },
            ip_address="203.0.113.5",
            user_agent="pytest",
        )

    def test_submit_records_origin(self) -> None:
        contact = self._submit()
        self.assertEqual(contact.status, "unread")
        self.assertEqual(contact.ip_address, "203.0.113.5")
        self.assertEqual(contact.user_agent, "pytest")
        self.assertEqual(contact.full_name, "Grace Hopper")

    def test_reply_stamps_replied_at(self) -> None:
        contact = self._submit()
        now = datetime(2026, 2, 1, tzinfo=UTC)
        read = set_contact_status(self.session, contact.id, "read", reply_message="ignored")
        self.assertEqual(read.status, "read")
        self.assertIsNone(read.replied_at)
        replied = set_contact_status(
            self.session, contact.id, "replied", reply_message="Thanks!", now=now
        )
        self.assertEqual(replied.reply_message, "Thanks!")
        self.assertIsNotNone(replied.replied_at)

    def test_list_filters_and_paginates(self) -> None:
        first = self._submit("First message")
        self._submit("Second message")
        set_contact_status(self.session, first.id, "archived")
        items, total = list_contacts(self.session, status="unread")
        self.assertEqual(total, 1)
        self.assertEqual(items[0].subject, "Second message")
        items, total = list_contacts(self.session, page=2, page_size=1)
        self.assertEqual(total, 2)
        self.assertEqual(len(items), 1)

    def test_unknown_contact(self) -> None:
        with self.assertRaises(NotFoundError):
            set_contact_status(self.session, 99, "read")
