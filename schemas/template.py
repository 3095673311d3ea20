from pydantic import BaseModel, Field, field_validator
from uuid import UUID
from datetime import datetime

from models.page_element import ElementType


class TemplateCreate(BaseModel):
    """Schema for creating a new template."""
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    thumbnail: str | None = Field(None, max_length=2048)
    html_content: str = Field(..., min_length=1)
    css_content: str = Field(default="")
    is_active: bool = True


class TemplateUpdate(BaseModel):
    """Schema for updating an existing template. Only supplied fields change."""
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    thumbnail: str | None = Field(None, max_length=2048)
    html_content: str | None = Field(None, min_length=1)
    css_content: str | None = None
    is_active: bool | None = None

    @field_validator("name", "html_content", "css_content", "is_active", mode="before")
    @classmethod
    def not_null_when_given(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TemplateRead(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    thumbnail: str | None = None
    html_content: str
    css_content: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TemplateSummary(BaseModel):
    id: UUID
    name: str
    thumbnail: str | None = None

    model_config = {"from_attributes": True}


class TemplateElementPreview(BaseModel):
    """Element a page instantiated from the template would receive."""
    element_key: str
    type: ElementType
    content: str
    label: str
