import asyncio

import pytest

from blogreader.errors import ContentUnavailable, MissingIdentifier, PostNotFound
from blogreader.schemas.blog import PostRecord
from blogreader.services.post_resolver import PostResolver, find_post
from tests.conftest import FakeCatalogLoader, FakeContentRepo


def make_resolver(posts, contents=None):
    return PostResolver(FakeCatalogLoader(posts), FakeContentRepo(contents=contents))


def test_find_post_returns_matching_record():
    catalog = [
        PostRecord(id="a", title="A", date="2024-01-01"),
        PostRecord(id="b", title="B", date="2024-01-02"),
    ]
    assert find_post(catalog, "b").title == "B"


def test_find_post_duplicate_ids_last_match_wins():
    catalog = [
        PostRecord(id="a", title="First", date="2024-01-01"),
        PostRecord(id="b", title="Other", date="2024-01-02"),
        PostRecord(id="a", title="Second", date="2024-01-03"),
    ]
    assert find_post(catalog, "a").title == "Second"


def test_find_post_raises_when_missing():
    with pytest.raises(PostNotFound):
        find_post([PostRecord(id="a", title="A", date="2024-01-01")], "missing")


def test_resolve_post_loads_catalog_each_time():
    loader = FakeCatalogLoader([{"id": "a", "title": "Hello", "date": "2024-01-01"}])
    resolver = PostResolver(loader, FakeContentRepo())

    asyncio.run(resolver.resolve_post("a"))
    record = asyncio.run(resolver.resolve_post("a"))

    assert record.title == "Hello"
    assert loader.calls == 2


def test_resolve_post_without_id_is_missing_identifier():
    with pytest.raises(MissingIdentifier):
        asyncio.run(make_resolver([]).resolve_post(""))


def test_fetch_content_returns_markdown():
    resolver = make_resolver([], contents={"a": "# Hi"})
    assert asyncio.run(resolver.fetch_content("a")) == "# Hi"


def test_fetch_content_failure_is_not_folded_into_not_found():
    resolver = make_resolver(
        [{"id": "a", "title": "A", "date": "2024-01-01"}],
        contents={"a": ContentUnavailable("a", "HTTP 500")},
    )

    assert asyncio.run(resolver.resolve_post("a")).id == "a"
    with pytest.raises(ContentUnavailable):
        asyncio.run(resolver.fetch_content("a"))
