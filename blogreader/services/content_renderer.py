import html
import logging

from blogreader.errors import HighlightFailure

logger = logging.getLogger(__name__)


class ContentRenderer:
    """Markdown to sanitized HTML, delegating fenced code to the highlighter."""

    def __init__(self, markdown_engine, highlighter):
        self.markdown_engine = markdown_engine
        self.highlighter = highlighter

    def render(self, markdown: str) -> str:
        try:
            return self.markdown_engine.render(markdown, highlight=self._highlight)
        except Exception as e:
            logger.error(f"Markdown rendering failed, falling back to plain text: {e}")
            return self.render_plain(markdown)

    def render_plain(self, markdown: str) -> str:
        return f'<pre class="plain-text">{html.escape(markdown or "", quote=False)}</pre>\n'

    def _highlight(self, code: str, language: str) -> str:
        # An empty result makes the engine emit the escaped code unchanged.
        try:
            return self.highlighter.highlight(code, language)
        except HighlightFailure as e:
            logger.debug(str(e))
            return ""
        except Exception as e:
            logger.warning(f"Highlighter error for {language!r}: {e}")
            return ""
