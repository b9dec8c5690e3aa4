import asyncio
import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from blogreader.errors import (
    ContentUnavailable,
    MissingIdentifier,
    PostNotFound,
    RenderingUnavailable,
)
from blogreader.services.catalog_loader import sort_catalog

logger = logging.getLogger(__name__)


class PostViewState(str, enum.Enum):
    INIT = "init"
    LOADING = "loading"
    READY = "ready"
    AWAITING_DEPENDENCIES = "awaiting_dependencies"
    RENDERED = "rendered"
    NOT_FOUND = "not_found"
    REDIRECT = "redirect"


@dataclass
class PostPage:
    states: List[PostViewState] = field(default_factory=lambda: [PostViewState.INIT])
    title: Optional[str] = None
    html: Optional[str] = None
    redirect_to: Optional[str] = None

    @property
    def state(self) -> PostViewState:
        return self.states[-1]

    def advance(self, state: PostViewState) -> None:
        logger.debug(f"Post view {self.state.value} -> {state.value}")
        self.states.append(state)


class BlogPageService:
    def __init__(self, catalog_loader, resolver, renderer, gate, composer):
        self.catalog_loader = catalog_loader
        self.resolver = resolver
        self.renderer = renderer
        self.gate = gate
        self.composer = composer

    async def listing_page(self) -> str:
        catalog = await self.catalog_loader.load_catalog()
        fragment = self.composer.compose_listing(sort_catalog(catalog))
        return self.composer.render_page(self.composer.site_name, fragment)

    async def post_page(self, post_id: Optional[str]) -> PostPage:
        page = PostPage()
        if not post_id:
            page.advance(PostViewState.REDIRECT)
            page.redirect_to = self.composer.listing_url
            return page

        page.advance(PostViewState.LOADING)
        record, content = await asyncio.gather(
            self.resolver.resolve_post(post_id),
            self.resolver.fetch_content(post_id),
            return_exceptions=True,
        )

        failure = _first_failure(post_id, record, content)
        if failure is not None:
            return self._not_found(page)

        page.advance(PostViewState.READY)
        page.advance(PostViewState.AWAITING_DEPENDENCIES)
        try:
            await self.gate.wait_until_ready()
            body = self.renderer.render(content)
        except RenderingUnavailable as e:
            logger.warning(f"{e}; rendering post {post_id} as plain text")
            body = self.renderer.render_plain(content)

        page.title = self.composer.post_title(record)
        page.html = self.composer.render_page(
            page.title, self.composer.compose_post(record, body)
        )
        page.advance(PostViewState.RENDERED)
        return page

    def _not_found(self, page: PostPage) -> PostPage:
        page.advance(PostViewState.NOT_FOUND)
        page.title = f"Post Not Found - {self.composer.site_name}"
        page.html = self.composer.render_page(
            page.title, self.composer.compose_not_found()
        )
        return page


def _first_failure(post_id: str, record, content) -> Optional[Exception]:
    """Metadata failures take precedence over content failures."""
    for result in (record, content):
        if not isinstance(result, BaseException):
            continue
        if isinstance(result, (PostNotFound, MissingIdentifier)):
            logger.warning(f"Error loading post: {result}")
        elif isinstance(result, ContentUnavailable):
            logger.error(f"Error loading post content: {result}")
        elif isinstance(result, Exception):
            logger.error(f"Unexpected error loading post {post_id}: {result}")
        else:
            raise result
        return result
    return None
