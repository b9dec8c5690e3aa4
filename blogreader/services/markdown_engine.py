import asyncio
import logging
import threading
from typing import Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll
from mdit_py_plugins.anchors import anchors_plugin

logger = logging.getLogger(__name__)

# (code, language) -> highlighted markup, or "" to fall back to escaped code
HighlightCallback = Callable[[str, str], str]


class MarkdownEngine:
    """
    GitHub-flavoured markdown to HTML via markdown-it-py.

    The parser is built once, on `load()` or on first use. Fenced code is handed to
    the `highlight` callback passed to `render`, so no per-render state is kept on
    the parser itself.
    """

    def __init__(self):
        self._md: Optional[MarkdownIt] = None
        self._lock = threading.Lock()

    def is_ready(self) -> bool:
        return self._md is not None

    async def load(self) -> None:
        await asyncio.to_thread(self._parser)
        logger.info("Markdown engine ready")

    def render(self, text: str, highlight: Optional[HighlightCallback] = None) -> str:
        return self._parser().render(text, {"highlight": highlight})

    def _parser(self) -> MarkdownIt:
        with self._lock:
            if self._md is None:
                self._md = _build_parser()
            return self._md


def _build_parser() -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": False, "breaks": True})
    md.enable("table").enable("strikethrough")
    md.use(anchors_plugin, min_level=1, max_level=6)
    md.add_render_rule("fence", _render_fence)
    return md


def _render_fence(self, tokens, idx, options, env):
    highlight = env.get("highlight")
    if highlight is None:
        return self.fence(tokens, idx, options, env)

    token = tokens[idx]
    info = unescapeAll(token.info).strip() if token.info else ""
    language = info.split(maxsplit=1)[0] if info else ""

    highlighted = (highlight(token.content, language) if language else "") or escapeHtml(
        token.content
    )
    class_attr = (
        f' class="{escapeHtml(options.langPrefix + language)}"' if language else ""
    )
    return f"<pre><code{class_attr}>{highlighted}</code></pre>\n"
