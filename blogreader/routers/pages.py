import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from blogreader import dependencies as deps
from blogreader.services.page_service import BlogPageService, PostViewState
from blogreader.services.view_composer import ViewComposer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse, include_in_schema=False)
async def listing(
    service: BlogPageService = Depends(deps.get_page_service),
    composer: ViewComposer = Depends(deps.get_view_composer),
):
    """Listing of all posts, newest first."""
    try:
        return HTMLResponse(await service.listing_page())
    except Exception as e:
        logger.error(f"Unexpected error rendering listing: {e}")
        return HTMLResponse(
            composer.render_page(composer.site_name, composer.compose_listing([])),
            status_code=500,
        )


@router.get("/post", response_class=HTMLResponse)
@router.get("/post.html", response_class=HTMLResponse, include_in_schema=False)
async def post(
    id: Optional[str] = None,
    service: BlogPageService = Depends(deps.get_page_service),
    composer: ViewComposer = Depends(deps.get_view_composer),
):
    """A single post, selected by the `id` query parameter."""
    try:
        page = await service.post_page(id)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {id}: {e}")
        return HTMLResponse(
            composer.render_page("Post Not Found", composer.compose_not_found()),
            status_code=500,
        )

    if page.state is PostViewState.REDIRECT:
        return RedirectResponse(page.redirect_to, status_code=302)
    if page.state is PostViewState.NOT_FOUND:
        return HTMLResponse(page.html, status_code=404)
    return HTMLResponse(page.html)
