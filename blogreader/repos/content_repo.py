import logging
from typing import Any

import httpx

from blogreader.errors import ContentUnavailable, PostNotFound
from blogreader.settings import Settings

logger = logging.getLogger(__name__)


class HttpContentRepo:
    """Reads the catalog and post documents from the static content origin."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def fetch_catalog(self) -> Any:
        response = await self.client.get(self.settings.CATALOG_PATH)
        response.raise_for_status()
        return response.json()

    async def fetch_post_content(self, post_id: str) -> str:
        path = self.settings.content_path(post_id)
        try:
            response = await self.client.get(path)
        except httpx.HTTPError as e:
            raise ContentUnavailable(post_id, str(e)) from e

        if response.status_code == 404:
            raise PostNotFound(post_id)
        if response.is_error:
            raise ContentUnavailable(post_id, f"HTTP {response.status_code}")

        logger.debug(f"Fetched {len(response.text)} chars for post {post_id}")
        return response.text
