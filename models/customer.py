from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base


class Customer(Base):
    """
    Owner of pages. Customers are managed by the admin back office; the page
    pipeline only checks they exist and exposes their id/name/email.
    """
    __tablename__ = "customers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    pages: Mapped[list["Page"]] = relationship(back_populates="customer", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Customer(id={self.id}, email={self.email})>"
