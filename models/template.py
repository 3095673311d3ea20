from typing import Optional

from sqlalchemy import String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base


class Template(Base):
    """
    Reusable HTML/CSS layout. Placeholders are written as {{variableName}} in
    html_content; that markup alone decides which elements a page created
    from the template receives.
    """
    __tablename__ = "templates"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    thumbnail: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    html_content: Mapped[str] = mapped_column(Text, nullable=False)
    css_content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # No cascade: a template cannot be removed while pages reference it
    pages: Mapped[list["Page"]] = relationship(back_populates="template")

    def __repr__(self):
        return f"<Template(id={self.id}, name={self.name})>"
