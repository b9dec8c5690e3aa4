import logging
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape

from blogreader.schemas.blog import PostRecord

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
SAFE_URL_SCHEMES = {"", "http", "https"}

NOT_FOUND_FALLBACK = (
    "<h1>Post Not Found</h1>\n"
    "<p>Sorry, the requested post could not be found.</p>\n"
    '<a href="/">Return to Home</a>\n'
)


def safe_url(value: Optional[str]) -> Optional[str]:
    """Drop urls with schemes other than http(s), e.g. `javascript:`."""
    if not value:
        return None
    try:
        scheme = urlsplit(value.strip()).scheme.lower()
    except ValueError:
        return None
    return value if scheme in SAFE_URL_SCHEMES else None


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["safe_url"] = safe_url
    return env


class ViewComposer:
    def __init__(
        self,
        site_name: str,
        listing_url: str = "/",
        post_url: str = "/post",
        env: Optional[Environment] = None,
    ):
        self.site_name = site_name
        self.listing_url = listing_url
        self.post_url = post_url
        self.env = env or build_environment()

    def compose_listing(self, catalog: Iterable[PostRecord]) -> str:
        return self.env.get_template("listing.html").render(
            posts=list(catalog), post_url=self.post_url
        )

    def compose_post(self, record: PostRecord, html: str) -> str:
        return self.env.get_template("post.html").render(post=record, body=html)

    def post_title(self, record: PostRecord) -> str:
        return f"{record.title} - {self.site_name}"

    def compose_not_found(self) -> str:
        try:
            return self.env.get_template("not_found.html").render(
                listing_url=self.listing_url
            )
        except Exception as e:
            logger.error(f"Failed to render not-found template: {e}")
            return NOT_FOUND_FALLBACK

    def render_page(self, title: str, fragment: str) -> str:
        return self.env.get_template("page.html").render(
            title=title,
            fragment=fragment,
            site_name=self.site_name,
            listing_url=self.listing_url,
        )
