import httpx
from fastapi import Depends, Request

from blogreader.repos.content_repo import HttpContentRepo
from blogreader.services.catalog_loader import CatalogLoader
from blogreader.services.content_renderer import ContentRenderer
from blogreader.services.dependency_gate import DependencyGate
from blogreader.services.page_service import BlogPageService
from blogreader.services.post_resolver import PostResolver
from blogreader.services.view_composer import ViewComposer
from blogreader.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_content_repo(
    client=Depends(get_http_client),
    current_settings: Settings = Depends(get_settings),
):
    return HttpContentRepo(client, current_settings)


def get_catalog_loader(repo=Depends(get_content_repo)):
    return CatalogLoader(repo)


def get_post_resolver(
    catalog_loader=Depends(get_catalog_loader),
    repo=Depends(get_content_repo),
):
    return PostResolver(catalog_loader, repo)


def get_content_renderer(request: Request):
    state = request.app.state
    return ContentRenderer(state.markdown_engine, state.highlighter)


def get_dependency_gate(
    request: Request, current_settings: Settings = Depends(get_settings)
):
    state = request.app.state
    return DependencyGate(
        state.markdown_engine,
        state.highlighter,
        poll_interval=current_settings.READINESS_POLL_INTERVAL_SECONDS,
        timeout=current_settings.READINESS_TIMEOUT_SECONDS,
    )


def get_view_composer(current_settings: Settings = Depends(get_settings)):
    return ViewComposer(
        site_name=current_settings.SITE_NAME,
        listing_url=current_settings.LISTING_URL,
        post_url=current_settings.POST_URL,
    )


def get_page_service(
    catalog_loader=Depends(get_catalog_loader),
    resolver=Depends(get_post_resolver),
    renderer=Depends(get_content_renderer),
    gate=Depends(get_dependency_gate),
    composer=Depends(get_view_composer),
):
    return BlogPageService(
        catalog_loader=catalog_loader,
        resolver=resolver,
        renderer=renderer,
        gate=gate,
        composer=composer,
    )
