from uuid import UUID

from fastapi import Depends

from core.exceptions import ErrorKind, PageforgeError
from core.logging_config import get_logger
from models import Template
from repositories.template_repository import TemplateRepository, get_template_repository
from schemas.template import TemplateCreate, TemplateElementPreview, TemplateUpdate
from services.template_variables import extract_variables, synthesize_element

logger = get_logger(__name__)


class TemplateService:
    def __init__(self, template_repository: TemplateRepository):
        self.template_repository = template_repository

    def list_templates(self, search: str | None = None) -> list[Template]:
        return self.template_repository.get_all(search=search)

    def get(self, template_id: UUID) -> Template:
        return self.template_repository.get_or_404(template_id)

    def create(self, data: TemplateCreate) -> Template:
        template = self.template_repository.create(data)
        logger.info(f"Template created: {template.name} ({template.id})")
        return template

    def update(self, template_id: UUID, data: TemplateUpdate) -> Template:
        # Existing pages keep the element set they were created with
        template = self.template_repository.get_or_404(template_id)
        return self.template_repository.update(template, data)

    def delete(self, template_id: UUID) -> None:
        template = self.template_repository.get_or_404(template_id)

        page_count = self.template_repository.count_pages(template.id)
        if page_count > 0:
            raise PageforgeError(
                ErrorKind.TEMPLATE_HAS_DEPENDENTS,
                f"Template is used by {page_count} page(s) and cannot be deleted",
            )

        self.template_repository.delete(template)
        logger.info(f"Template deleted: {template_id}")

    def preview_elements(self, template_id: UUID) -> list[TemplateElementPreview]:
        """The elements a page created from this template right now would start with."""
        template = self.template_repository.get_or_404(template_id)
        previews = []
        for variable in extract_variables(template.html_content):
            defaults = synthesize_element(variable)
            previews.append(
                TemplateElementPreview(
                    element_key=variable,
                    type=defaults.type,
                    content=defaults.default_content,
                    label=defaults.label,
                )
            )
        return previews


def get_template_service(
    template_repository: TemplateRepository = Depends(get_template_repository),
) -> TemplateService:
    return TemplateService(template_repository)
