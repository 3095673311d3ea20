from datetime import datetime, timezone
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from core.exceptions import ErrorKind, PageforgeError
from db.session import get_db
from models import Page, Template
from schemas.template import TemplateCreate, TemplateUpdate


class TemplateRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, search: str | None = None) -> list[Template]:
        """Get all templates, newest first, optionally filtered on name/description."""
        stmt = select(Template)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(or_(Template.name.ilike(pattern), Template.description.ilike(pattern)))
        return list(self.db.scalars(stmt.order_by(Template.created_at.desc())).all())

    def get_by_id(self, template_id: UUID) -> Template | None:
        return self.db.get(Template, template_id)

    def get_or_404(self, template_id: UUID) -> Template:
        template = self.get_by_id(template_id)
        if not template:
            raise PageforgeError(ErrorKind.TEMPLATE_NOT_FOUND)
        return template

    def create(self, data: TemplateCreate) -> Template:
        template = Template(**data.model_dump())

        self.db.add(template)
        self.db.commit()
        self.db.refresh(template)

        return template

    def update(self, template: Template, data: TemplateUpdate) -> Template:
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(template, field, value)

        template.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(template)

        return template

    def count_pages(self, template_id: UUID) -> int:
        return self.db.scalar(
            select(func.count(Page.id)).where(Page.template_id == template_id)
        ) or 0

    def delete(self, template: Template) -> None:
        self.db.delete(template)
        self.db.commit()


def get_template_repository(db: Session = Depends(get_db)) -> TemplateRepository:
    return TemplateRepository(db)
