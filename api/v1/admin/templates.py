from uuid import UUID

from fastapi import APIRouter, Depends, Query
from starlette import status

from schemas.template import (
    TemplateCreate,
    TemplateElementPreview,
    TemplateRead,
    TemplateUpdate,
)
from services.template_service import TemplateService, get_template_service

router = APIRouter()


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    search: str | None = Query(None),
    template_service: TemplateService = Depends(get_template_service),
):
    """List templates, newest first."""
    return template_service.list_templates(search=search)


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def create_template(
    data: TemplateCreate,
    template_service: TemplateService = Depends(get_template_service),
):
    return template_service.create(data)


@router.get("/{template_id}/", response_model=TemplateRead)
def get_template(
    template_id: UUID,
    template_service: TemplateService = Depends(get_template_service),
):
    return template_service.get(template_id)


@router.get("/{template_id}/elements/", response_model=list[TemplateElementPreview])
def preview_template_elements(
    template_id: UUID,
    template_service: TemplateService = Depends(get_template_service),
):
    """
    Elements a page created from this template would receive, with their
    inferred types, labels and default content.
    """
    return template_service.preview_elements(template_id)


@router.put("/{template_id}/", response_model=TemplateRead)
def update_template(
    template_id: UUID,
    data: TemplateUpdate,
    template_service: TemplateService = Depends(get_template_service),
):
    """Update a template. Pages already created from it keep their elements."""
    return template_service.update(template_id, data)


@router.delete("/{template_id}/")
def delete_template(
    template_id: UUID,
    template_service: TemplateService = Depends(get_template_service),
):
    """Delete a template. Refused with 409 while pages still use it."""
    template_service.delete(template_id)
    return {"message": "Template deleted successfully."}
