import enum
from dataclasses import dataclass

from fastapi import Depends

from core.logging_config import get_logger
from repositories.page_repository import PageRepository, get_page_repository
from services.page_renderer import NOT_FOUND_HTML, render_page_html
from services.render_cache import RenderCache, get_render_cache

logger = get_logger(__name__)


class RenderStatus(str, enum.Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class RenderResult:
    status: RenderStatus
    html: str
    cache_hit: bool = False


class PageRenderService:
    """Resolves a public slug to servable HTML, through the render cache."""

    def __init__(self, page_repository: PageRepository, cache: RenderCache):
        self.page_repository = page_repository
        self.cache = cache

    def render_by_slug(self, slug: str) -> RenderResult:
        cached = self.cache.get(slug)
        if cached is not None:
            logger.debug(f"Render cache hit: {slug}")
            return RenderResult(RenderStatus.OK, cached, cache_hit=True)

        page = self.page_repository.get_by_slug(slug)
        if page is None or not page.is_published:
            # Missing and draft pages get the same answer
            logger.debug(f"No published page for slug: {slug}")
            return RenderResult(RenderStatus.NOT_FOUND, NOT_FOUND_HTML)

        html = render_page_html(page)
        self.cache.set(slug, html)
        logger.debug(f"Rendered and cached page: {slug}")

        return RenderResult(RenderStatus.OK, html)


def get_page_render_service(
    page_repository: PageRepository = Depends(get_page_repository),
    cache: RenderCache = Depends(get_render_cache),
) -> PageRenderService:
    return PageRenderService(page_repository, cache)
