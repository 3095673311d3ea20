from uuid import UUID

from fastapi import Depends

from core.exceptions import ErrorKind, PageforgeError
from core.logging_config import get_logger
from models import ElementType, Page, PageElement
from repositories.customer_repository import CustomerRepository, get_customer_repository
from repositories.page_repository import PageRepository, get_page_repository
from repositories.template_repository import TemplateRepository, get_template_repository
from schemas.page import PageCreate, PageElementCreate, PageUpdate
from services.template_variables import default_content_for, extract_variables, synthesize_element

logger = get_logger(__name__)


class PageService:
    """
    Creates pages from templates and manages their elements.

    A page's element set is copied from its template's variables once, at
    creation. Later template edits do not reach existing pages.
    """

    def __init__(
        self,
        page_repository: PageRepository,
        template_repository: TemplateRepository,
        customer_repository: CustomerRepository,
    ):
        self.page_repository = page_repository
        self.template_repository = template_repository
        self.customer_repository = customer_repository

    def list_pages(self, customer_id: UUID | None = None, search: str | None = None) -> list[Page]:
        return self.page_repository.get_all(customer_id=customer_id, search=search)

    def get(self, page_id: UUID) -> Page:
        page = self.page_repository.get_by_id(page_id)
        if not page:
            raise PageforgeError(ErrorKind.PAGE_NOT_FOUND)
        return page

    def get_by_slug(self, slug: str) -> Page:
        page = self.page_repository.get_by_slug(slug)
        if not page:
            raise PageforgeError(ErrorKind.PAGE_NOT_FOUND)
        return self.get(page.id)

    def create_from_template(self, data: PageCreate) -> Page:
        template = self.template_repository.get_or_404(data.template_id)

        if not self.customer_repository.exists(data.customer_id):
            raise PageforgeError(ErrorKind.CUSTOMER_NOT_FOUND)

        if self.page_repository.slug_taken(data.slug):
            raise PageforgeError(ErrorKind.SLUG_ALREADY_EXISTS)

        elements = []
        for variable in extract_variables(template.html_content):
            defaults = synthesize_element(variable)
            elements.append(
                PageElement(
                    element_key=variable,
                    type=defaults.type,
                    content=defaults.default_content,
                    label=defaults.label,
                )
            )

        page = Page(
            template_id=template.id,
            customer_id=data.customer_id,
            name=data.name,
            slug=data.slug,
            custom_css=data.custom_css,
        )
        page = self.page_repository.create_with_elements(page, elements)

        logger.info_ctx(
            f"Page created from template: {page.slug}",
            page_id=str(page.id),
            template_id=str(template.id),
            element_count=len(elements),
        )
        return page

    def update(self, page_id: UUID, data: PageUpdate) -> Page:
        page = self.get(page_id)
        values = data.model_dump(exclude_unset=True)

        slug = values.get("slug")
        if slug and self.page_repository.slug_taken(slug, exclude_page_id=page.id):
            raise PageforgeError(ErrorKind.SLUG_ALREADY_EXISTS)

        return self.page_repository.update(page, values)

    def publish(self, page_id: UUID) -> Page:
        page = self.update(page_id, PageUpdate(is_published=True))
        logger.info(f"Page published: {page.slug}")
        return page

    def unpublish(self, page_id: UUID) -> Page:
        page = self.update(page_id, PageUpdate(is_published=False))
        logger.info(f"Page unpublished: {page.slug}")
        return page

    def delete(self, page_id: UUID) -> None:
        page = self.get(page_id)
        self.page_repository.delete(page)
        logger.info(f"Page deleted: {page_id}")

    def get_elements(self, page_id: UUID) -> list[PageElement]:
        self.get(page_id)
        return self.page_repository.get_elements(page_id)

    def upsert_element(self, page_id: UUID, element_key: str, content: str) -> PageElement:
        """Set the content of an element; unknown keys become new, unlabelled TEXT elements."""
        self.get(page_id)

        element = self.page_repository.get_element(page_id, element_key)
        if element is None:
            element = PageElement(
                page_id=page_id,
                element_key=element_key,
                type=ElementType.TEXT,
                content=content,
            )
        else:
            element.content = content

        return self.page_repository.save_element(element)

    def create_element(self, page_id: UUID, data: PageElementCreate) -> PageElement:
        self.get(page_id)

        if self.page_repository.get_element(page_id, data.element_key) is not None:
            raise PageforgeError(ErrorKind.ELEMENT_ALREADY_EXISTS)

        defaults = synthesize_element(data.element_key)
        element_type = data.type or defaults.type
        label = data.label or defaults.label
        if data.content is not None:
            content = data.content
        else:
            content = default_content_for(element_type, label)

        element = PageElement(
            page_id=page_id,
            element_key=data.element_key,
            type=element_type,
            content=content,
            label=label,
        )
        return self.page_repository.save_element(element)

    def delete_element(self, page_id: UUID, element_key: str) -> None:
        self.get(page_id)

        element = self.page_repository.get_element(page_id, element_key)
        if element is None:
            raise PageforgeError(ErrorKind.ELEMENT_NOT_FOUND)

        self.page_repository.delete_element(element)


def get_page_service(
    page_repository: PageRepository = Depends(get_page_repository),
    template_repository: TemplateRepository = Depends(get_template_repository),
    customer_repository: CustomerRepository = Depends(get_customer_repository),
) -> PageService:
    return PageService(page_repository, template_repository, customer_repository)
