import httpx

from blogreader.errors import PostNotFound
from blogreader.schemas.blog import PostRecord

CONTENT_BASE_URL = "http://content.test/"


class FakeContentRepo:
    """
    Minimal content repo stand-in.
    Pass an exception instance as `catalog` or as a content value to have it raised.
    """

    def __init__(self, catalog=None, contents: dict | None = None):
        self.catalog = catalog if catalog is not None else []
        self.contents = contents or {}
        self.calls = []

    async def fetch_catalog(self):
        self.calls.append("catalog")
        if isinstance(self.catalog, Exception):
            raise self.catalog
        return self.catalog

    async def fetch_post_content(self, post_id: str) -> str:
        self.calls.append(post_id)
        if post_id not in self.contents:
            raise PostNotFound(post_id)
        content = self.contents[post_id]
        if isinstance(content, Exception):
            raise content
        return content


class FakeCatalogLoader:
    def __init__(self, posts):
        self.posts = [
            p if isinstance(p, PostRecord) else PostRecord(**p) for p in posts
        ]
        self.calls = 0

    async def load_catalog(self):
        self.calls += 1
        return list(self.posts)


class StaticReadiness:
    def __init__(self, ready: bool = True):
        self.ready = ready

    def is_ready(self) -> bool:
        return self.ready


class ReadyAfter:
    """Reports ready once `is_ready` has been asked `checks` times."""

    def __init__(self, checks: int):
        self.checks = checks
        self.asked = 0

    def is_ready(self) -> bool:
        self.asked += 1
        return self.asked > self.checks


class FakeGate:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.waited = False

    async def wait_until_ready(self):
        self.waited = True
        if self.error:
            raise self.error


class FakePageService:
    """
    Minimal page service stand-in for router tests.
    """

    def __init__(self, listing_html="<html></html>", post_page_return=None):
        self._listing_html = listing_html
        self._post_page_return = post_page_return
        self.requested_ids = []

    async def listing_page(self):
        return self._listing_html

    async def post_page(self, post_id):
        self.requested_ids.append(post_id)
        return self._post_page_return


def make_content_client(catalog=None, contents: dict | None = None, status=None):
    """
    An httpx.AsyncClient backed by an in-memory content origin.
    `status` maps a path to a forced status code.
    """
    contents = contents or {}
    status = status or {}
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.lstrip("/")
        requested.append(path)
        if path in status:
            return httpx.Response(status[path], text="error")
        if path == "posts/posts.json" and catalog is not None:
            return httpx.Response(200, json=catalog)
        if path in contents:
            return httpx.Response(200, text=contents[path])
        return httpx.Response(404, text="not found")

    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url=CONTENT_BASE_URL
    )
    client.requested = requested
    return client
