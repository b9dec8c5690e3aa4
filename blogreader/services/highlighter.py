import asyncio
import html
import logging
from typing import Optional

from pygments.lexers import get_lexer_by_name
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
)
from pygments.util import ClassNotFound

from blogreader.errors import HighlightFailure

logger = logging.getLogger(__name__)

# Most specific token types first: a type matches the first entry it descends from.
TOKEN_CATEGORIES = (
    (Comment, "comment"),
    (Keyword.Constant, "constant"),
    (Keyword, "keyword"),
    (String, "string"),
    (Name.Function, "function"),
    (Name.Class, "class-name"),
    (Name.Constant, "constant"),
    (Name.Builtin.Pseudo, "constant"),
    (Name.Attribute, "property"),
    (Name.Property, "property"),
    (Number, "number"),
    (Operator.Word, "keyword"),
    (Operator, "operator"),
    (Punctuation, "punctuation"),
)


def token_category(ttype) -> Optional[str]:
    for parent, category in TOKEN_CATEGORIES:
        if ttype in parent:
            return category
    return None


class PygmentsHighlighter:
    """Wraps each lexical token in `<span class="token <category>">`."""

    def __init__(self):
        self._ready = False

    def is_ready(self) -> bool:
        return self._ready

    async def load(self) -> None:
        # Ready only means the lexer registry import is warm; lexers still load per language.
        await asyncio.to_thread(get_lexer_by_name, "text")
        self._ready = True
        logger.info("Highlighter ready")

    def highlight(self, code: str, language: str) -> str:
        try:
            lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound as e:
            raise HighlightFailure(language, "no lexer") from e

        try:
            parts = []
            for ttype, value in lexer.get_tokens(code):
                escaped = html.escape(value, quote=False)
                category = token_category(ttype)
                if category and value.strip():
                    parts.append(f'<span class="token {category}">{escaped}</span>')
                else:
                    parts.append(escaped)
            return "".join(parts)
        except Exception as e:
            raise HighlightFailure(language, str(e)) from e
