from fastapi import APIRouter
from . import pages, templates

router = APIRouter()

router.include_router(templates.router, prefix="/templates", tags=["Templates"])
router.include_router(pages.router, prefix="/pages", tags=["Pages"])
