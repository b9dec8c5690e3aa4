import logging
from typing import Iterable

from blogreader.errors import MissingIdentifier, PostNotFound
from blogreader.schemas.blog import PostRecord

logger = logging.getLogger(__name__)


class PostResolver:
    def __init__(self, catalog_loader, repo):
        self.catalog_loader = catalog_loader
        self.repo = repo

    async def resolve_post(self, post_id: str) -> PostRecord:
        _require_id(post_id)
        catalog = await self.catalog_loader.load_catalog()
        return find_post(catalog, post_id)

    async def fetch_content(self, post_id: str) -> str:
        _require_id(post_id)
        return await self.repo.fetch_post_content(post_id)


def find_post(catalog: Iterable[PostRecord], post_id: str) -> PostRecord:
    """Return the last catalog entry with a matching id."""
    match = None
    for post in catalog:
        if post.id == post_id:
            if match is not None:
                logger.warning(f"Duplicate catalog id {post_id}, using the later entry")
            match = post
    if match is None:
        raise PostNotFound(post_id)
    return match


def _require_id(post_id: str) -> None:
    if not post_id:
        raise MissingIdentifier("No post id supplied")
