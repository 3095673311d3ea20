from uuid import UUID

from fastapi import APIRouter, Depends, Query
from starlette import status

from schemas.page import (
    PageCreate,
    PageElementCreate,
    PageElementRead,
    PageElementUpdate,
    PageListItem,
    PageRead,
    PageUpdate,
)
from services.page_service import PageService, get_page_service

router = APIRouter()


@router.get("/", response_model=list[PageListItem])
def list_pages(
    customer_id: UUID | None = Query(None),
    search: str | None = Query(None),
    page_service: PageService = Depends(get_page_service),
):
    return page_service.list_pages(customer_id=customer_id, search=search)


@router.post("/", response_model=PageRead, status_code=status.HTTP_201_CREATED)
def create_page(
    data: PageCreate,
    page_service: PageService = Depends(get_page_service),
):
    """
    Create a page from a template.

    Every `{{variable}}` in the template's HTML becomes an element of the new
    page, typed and pre-filled from its name.
    """
    return page_service.create_from_template(data)


@router.get("/slug/{slug}/", response_model=PageRead)
def get_page_by_slug(
    slug: str,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.get_by_slug(slug)


@router.get("/{page_id}/", response_model=PageRead)
def get_page(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.get(page_id)


@router.patch("/{page_id}/", response_model=PageRead)
def update_page(
    page_id: UUID,
    data: PageUpdate,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.update(page_id, data)


@router.delete("/{page_id}/")
def delete_page(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
):
    page_service.delete(page_id)
    return {"message": "Page deleted successfully."}


@router.post("/{page_id}/publish/", response_model=PageRead)
def publish_page(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.publish(page_id)


@router.post("/{page_id}/unpublish/", response_model=PageRead)
def unpublish_page(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.unpublish(page_id)


@router.get("/{page_id}/elements/", response_model=list[PageElementRead])
def list_elements(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.get_elements(page_id)


@router.post("/{page_id}/elements/", response_model=PageElementRead, status_code=status.HTTP_201_CREATED)
def create_element(
    page_id: UUID,
    data: PageElementCreate,
    page_service: PageService = Depends(get_page_service),
):
    return page_service.create_element(page_id, data)


@router.patch("/{page_id}/elements/{element_key}/", response_model=PageElementRead)
def update_element(
    page_id: UUID,
    element_key: str,
    data: PageElementUpdate,
    page_service: PageService = Depends(get_page_service),
):
    """Set an element's content; an unknown key is created as a TEXT element."""
    return page_service.upsert_element(page_id, element_key, data.content)


@router.delete("/{page_id}/elements/{element_key}/")
def delete_element(
    page_id: UUID,
    element_key: str,
    page_service: PageService = Depends(get_page_service),
):
    page_service.delete_element(page_id, element_key)
    return {"message": "Element deleted successfully."}
