"""
Public page rendering.

Always answers with a complete HTML document: the page itself (200), the
shared not-found page for missing or unpublished slugs (404), or a generic
error page (500). Nothing about the failure reaches the visitor.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from core.logging_config import get_logger, LogContext
from services.page_render_service import PageRenderService, RenderStatus, get_page_render_service
from services.page_renderer import ERROR_HTML

router = APIRouter()
logger = get_logger(__name__)


@router.get("/{slug}", response_class=HTMLResponse)
def render_page(
    slug: str,
    request: Request,
    render_service: PageRenderService = Depends(get_page_render_service),
):
    request_id = getattr(request.state, "request_id", "unknown")

    try:
        result = render_service.render_by_slug(slug)
    except Exception:
        with LogContext(request_id=request_id, slug=slug):
            logger.exception(f"Failed to render page: {slug}")
        return HTMLResponse(ERROR_HTML, status_code=500)

    if result.status == RenderStatus.NOT_FOUND:
        return HTMLResponse(result.html, status_code=404)

    max_age = render_service.cache.ttl_seconds
    return HTMLResponse(
        result.html,
        status_code=200,
        headers={
            "Cache-Control": f"public, max-age={max_age}",
            "X-Cache": "HIT" if result.cache_hit else "MISS",
        },
    )
