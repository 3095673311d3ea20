"""Public, unauthenticated endpoints"""

from fastapi import APIRouter
from . import render

router = APIRouter()
router.include_router(render.router, tags=["Public Pages"])
