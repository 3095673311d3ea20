import enum
import uuid
from typing import Optional

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from models.base import Base


class ElementType(str, enum.Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    COLOR = "COLOR"
    LINK = "LINK"


class PageElement(Base):
    __tablename__ = "page_elements"
    __table_args__ = (
        UniqueConstraint("page_id", "element_key", name="uq_page_elements_page_key"),
    )

    page_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
    )
    element_key: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[ElementType] = mapped_column(
        SQLEnum(ElementType, name="page_element_type", values_callable=lambda x: [e.value for e in x]),
        default=ElementType.TEXT,
        nullable=False,
    )
    # Always a renderable string: hex color, URL or text
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    label: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    page: Mapped["Page"] = relationship(back_populates="elements")
