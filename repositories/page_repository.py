from datetime import datetime, timezone
from uuid import UUID

from fastapi import Depends
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from core.exceptions import ErrorKind, PageforgeError
from core.logging_config import get_logger
from db.session import get_db
from models import Page, PageElement

logger = get_logger(__name__)


class PageRepository:
    def __init__(self, db: Session):
        self.db = db

    def _with_relations(self, stmt):
        return stmt.options(
            selectinload(Page.template),
            selectinload(Page.customer),
            selectinload(Page.elements),
        )

    def get_all(self, customer_id: UUID | None = None, search: str | None = None) -> list[Page]:
        """Get pages newest first, optionally for one customer and/or matching name or slug."""
        stmt = self._with_relations(select(Page))
        if customer_id:
            stmt = stmt.where(Page.customer_id == customer_id)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(or_(Page.name.ilike(pattern), Page.slug.ilike(pattern)))
        return list(self.db.scalars(stmt.order_by(Page.created_at.desc())).all())

    def get_by_id(self, page_id: UUID) -> Page | None:
        return self.db.scalar(self._with_relations(select(Page).where(Page.id == page_id)))

    def get_by_slug(self, slug: str) -> Page | None:
        """Load a page with its template and elements, as needed for rendering."""
        return self.db.scalar(
            select(Page)
            .where(Page.slug == slug)
            .options(selectinload(Page.template), selectinload(Page.elements))
        )

    def slug_taken(self, slug: str, exclude_page_id: UUID | None = None) -> bool:
        stmt = select(Page.id).where(Page.slug == slug)
        if exclude_page_id:
            stmt = stmt.where(Page.id != exclude_page_id)
        return self.db.scalar(stmt.limit(1)) is not None

    def _commit_or_slug_conflict(self, slug: str, exclude_page_id: UUID | None = None) -> None:
        # The unique index on pages.slug is the final arbiter when two writers race past the pre-check
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.slug_taken(slug, exclude_page_id):
                logger.warning(f"Slug conflict on commit: {slug}")
                raise PageforgeError(ErrorKind.SLUG_ALREADY_EXISTS)
            raise

    def create_with_elements(self, page: Page, elements: list[PageElement]) -> Page:
        """Insert the page and its full element set in a single transaction."""
        page.elements = elements
        self.db.add(page)
        self._commit_or_slug_conflict(page.slug)

        return self.get_by_id(page.id)

    def update(self, page: Page, values: dict) -> Page:
        for field, value in values.items():
            setattr(page, field, value)

        page.updated_at = datetime.now(timezone.utc)
        self._commit_or_slug_conflict(page.slug, exclude_page_id=page.id)

        return self.get_by_id(page.id)

    def delete(self, page: Page) -> None:
        self.db.delete(page)
        self.db.commit()

    def get_elements(self, page_id: UUID) -> list[PageElement]:
        return list(
            self.db.scalars(
                select(PageElement)
                .where(PageElement.page_id == page_id)
                .order_by(PageElement.element_key)
            ).all()
        )

    def get_element(self, page_id: UUID, element_key: str) -> PageElement | None:
        return self.db.scalar(
            select(PageElement).where(
                PageElement.page_id == page_id,
                PageElement.element_key == element_key,
            )
        )

    def save_element(self, element: PageElement) -> PageElement:
        """Insert or update a single element."""
        element.updated_at = datetime.now(timezone.utc)
        self.db.add(element)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise PageforgeError(ErrorKind.ELEMENT_ALREADY_EXISTS)
        self.db.refresh(element)
        return element

    def delete_element(self, element: PageElement) -> None:
        self.db.delete(element)
        self.db.commit()


def get_page_repository(db: Session = Depends(get_db)) -> PageRepository:
    return PageRepository(db)
