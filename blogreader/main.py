import asyncio
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from blogreader.routers import pages
from blogreader.services.highlighter import PygmentsHighlighter
from blogreader.services.markdown_engine import MarkdownEngine
from blogreader.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_http_client(current_settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=current_settings.CONTENT_BASE_URL,
        timeout=current_settings.HTTP_TIMEOUT_SECONDS,
        follow_redirects=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = build_http_client(settings)
    app.state.markdown_engine = MarkdownEngine()
    app.state.highlighter = PygmentsHighlighter()

    # Warm up in the background; only the single-post path waits on these.
    warmups = [
        asyncio.create_task(app.state.markdown_engine.load()),
        asyncio.create_task(app.state.highlighter.load()),
    ]
    logger.info(f"Reading content from {settings.CONTENT_BASE_URL}")

    try:
        yield
    finally:
        for task in warmups:
            task.cancel()
        await asyncio.gather(*warmups, return_exceptions=True)
        await app.state.http_client.aclose()
        logger.info("Content client closed")


app = FastAPI(
    title="blogreader",
    description="Renders a static blog's catalog and posts",
    lifespan=lifespan,
)

app.include_router(pages.router)


@app.get("/status")
async def status(request: Request):
    state = request.app.state
    return {
        "message": "blogreader is running",
        "rendering_ready": state.markdown_engine.is_ready()
        and state.highlighter.is_ready(),
    }
