from pydantic import BaseModel, Field, field_validator
from uuid import UUID
from datetime import datetime

from models.page_element import ElementType
from schemas.customer import CustomerSummary
from schemas.template import TemplateRead, TemplateSummary

SLUG_PATTERN = r'^[a-z0-9-]+$'


class PageCreate(BaseModel):
    template_id: UUID
    customer_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    custom_css: str | None = None


class PageUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    custom_css: str | None = None
    # Serialized theme JSON, stored as given
    theme: str | None = None
    is_published: bool | None = None

    @field_validator("name", "slug", "is_published", mode="before")
    @classmethod
    def not_null_when_given(cls, value):
        # Omit a field to leave it unchanged; null is not a value for these columns
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class PageElementRead(BaseModel):
    id: UUID
    page_id: UUID
    element_key: str
    type: ElementType
    content: str
    label: str | None = None

    model_config = {"from_attributes": True}


class PageElementCreate(BaseModel):
    """Explicit element creation; omitted fields are inferred from the key."""
    element_key: str = Field(..., min_length=1, max_length=255, pattern=r'^\w+$')
    type: ElementType | None = None
    content: str | None = None
    label: str | None = Field(None, max_length=255)


class PageElementUpdate(BaseModel):
    content: str


class PageRead(BaseModel):
    id: UUID
    template_id: UUID
    customer_id: UUID
    name: str
    slug: str
    custom_css: str | None = None
    theme: str | None = None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    template: TemplateRead
    customer: CustomerSummary
    elements: list[PageElementRead] = []

    model_config = {"from_attributes": True}


class PageListItem(BaseModel):
    id: UUID
    name: str
    slug: str
    is_published: bool
    created_at: datetime
    updated_at: datetime

    template: TemplateSummary
    customer: CustomerSummary
    element_count: int

    model_config = {"from_attributes": True}
