import datetime
import logging
from typing import Iterable, List

import httpx
from pydantic import ValidationError

from blogreader.errors import CatalogUnavailable
from blogreader.schemas.blog import PostRecord

logger = logging.getLogger(__name__)

_UNDATED = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)


class CatalogLoader:
    def __init__(self, repo):
        self.repo = repo

    async def load_catalog(self) -> List[PostRecord]:
        """Fetch the catalog. Any failure degrades to an empty catalog."""
        try:
            document = await self.repo.fetch_catalog()
            return parse_catalog(document)
        except (
            httpx.HTTPError,
            httpx.InvalidURL,
            httpx.StreamError,
            ValueError,
            CatalogUnavailable,
        ) as e:
            logger.error(f"Catalog unavailable: {e}")
            return []


def parse_catalog(document) -> List[PostRecord]:
    if not isinstance(document, list):
        raise CatalogUnavailable(
            f"expected a list of posts, got {type(document).__name__}"
        )

    posts = []
    for index, entry in enumerate(document):
        try:
            posts.append(PostRecord.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping invalid catalog entry #{index}: {e}")
    return posts


def sort_catalog(catalog: Iterable[PostRecord]) -> List[PostRecord]:
    """Newest first. Undated or unparseable posts go last."""
    return sorted(catalog, key=lambda post: _parse_date(post.date), reverse=True)


def _parse_date(value: str) -> datetime.datetime:
    if isinstance(value, str) and value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return _UNDATED
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed
