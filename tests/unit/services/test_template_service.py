import uuid

import pytest
from sqlalchemy.orm import Session

from core.exceptions import ErrorKind, PageforgeError
from models import ElementType, Page, Template
from repositories.template_repository import TemplateRepository
from schemas.template import TemplateCreate, TemplateUpdate
from services.template_service import TemplateService


@pytest.mark.unit
class TestTemplateService:

    @pytest.fixture(autouse=True)
    def setup(self, db_session: Session):
        self.db = db_session
        self.service = TemplateService(TemplateRepository(db_session))

    def test_create_and_get(self):
        template = self.service.create(TemplateCreate(name="Hero", html_content="<h1>{{title}}</h1>"))

        fetched = self.service.get(template.id)

        assert fetched.name == "Hero"
        assert fetched.css_content == ""
        assert fetched.is_active is True

    def test_get_unknown(self):
        with pytest.raises(PageforgeError) as exc_info:
            self.service.get(uuid.uuid4())

        assert exc_info.value.kind == ErrorKind.TEMPLATE_NOT_FOUND

    def test_update_only_supplied_fields(self):
        template = self.service.create(TemplateCreate(name="Hero", html_content="<h1>{{title}}</h1>", css_content="h1 {}"))

        updated = self.service.update(template.id, TemplateUpdate(html_content="<h2>{{title}}</h2>"))

        assert updated.html_content == "<h2>{{title}}</h2>"
        assert updated.css_content == "h1 {}"
        assert updated.name == "Hero"

    def test_preview_elements(self):
        template = self.service.create(
            TemplateCreate(name="Hero", html_content="<a href='{{ctaLink}}'>{{ctaText}}</a>{{ctaText}}")
        )

        previews = self.service.preview_elements(template.id)

        assert [(p.element_key, p.type, p.content, p.label) for p in previews] == [
            ("ctaLink", ElementType.LINK, "#", "Cta Link"),
            ("ctaText", ElementType.TEXT, "Cta Text", "Cta Text"),
        ]

    def test_search(self):
        self.service.create(TemplateCreate(name="Restaurant", html_content="<p></p>"))
        self.service.create(TemplateCreate(name="Portfolio", description="For photographers", html_content="<p></p>"))

        assert [t.name for t in self.service.list_templates(search="photo")] == ["Portfolio"]
        assert len(self.service.list_templates()) == 2

    def test_delete_unused_template(self, sample_template: Template):
        self.service.delete(sample_template.id)

        with pytest.raises(PageforgeError):
            self.service.get(sample_template.id)

    def test_delete_template_with_pages_is_refused(self, sample_page: Page):
        with pytest.raises(PageforgeError) as exc_info:
            self.service.delete(sample_page.template_id)

        assert exc_info.value.kind == ErrorKind.TEMPLATE_HAS_DEPENDENTS
        assert self.service.get(sample_page.template_id) is not None
