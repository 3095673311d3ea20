import uuid
from typing import Optional

from sqlalchemy import ForeignKey, String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from models.base import Base


class Page(Base):
    __tablename__ = "pages"

    template_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("templates.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    custom_css: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Serialized JSON: {"mode": "light"|"dark", "palette": {"--var": "value"}}
    theme: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    template: Mapped["Template"] = relationship(back_populates="pages")
    customer: Mapped["Customer"] = relationship(back_populates="pages")
    elements: Mapped[list["PageElement"]] = relationship(
        back_populates="page",
        cascade="all, delete-orphan",
        order_by="PageElement.element_key",
    )

    @property
    def element_count(self) -> int:
        return len(self.elements)

    def __repr__(self):
        return f"<Page(id={self.id}, slug={self.slug}, published={self.is_published})>"
