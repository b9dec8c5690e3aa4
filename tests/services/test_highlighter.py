import asyncio

import pytest
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String, Text

from blogreader.errors import HighlightFailure
from blogreader.services.highlighter import PygmentsHighlighter, token_category


@pytest.mark.parametrize(
    "ttype, category",
    [
        (Comment.Single, "comment"),
        (Keyword.Declaration, "keyword"),
        (Keyword.Constant, "constant"),
        (String.Double, "string"),
        (Name.Function, "function"),
        (Name.Class, "class-name"),
        (Name.Attribute, "property"),
        (Number.Integer, "number"),
        (Operator, "operator"),
        (Punctuation, "punctuation"),
        (Text, None),
        (Name.Other, None),
    ],
)
def test_token_category(ttype, category):
    assert token_category(ttype) == category


def test_highlight_wraps_javascript_tokens():
    html = PygmentsHighlighter().highlight("const x = 1;\n", "js")

    assert '<span class="token keyword">const</span>' in html
    assert '<span class="token operator">=</span>' in html
    assert '<span class="token number">1</span>' in html
    assert '<span class="token punctuation">;</span>' in html
    assert html.endswith("\n")


def test_highlight_escapes_token_text():
    html = PygmentsHighlighter().highlight('s = "<b>"\n', "python")

    assert "<b>" not in html
    assert "&lt;b&gt;" in html


def test_highlight_unknown_language_raises_highlight_failure():
    with pytest.raises(HighlightFailure) as exc:
        PygmentsHighlighter().highlight("whatever", "no-such-language")
    assert exc.value.language == "no-such-language"


def test_load_marks_highlighter_ready():
    highlighter = PygmentsHighlighter()
    assert highlighter.is_ready() is False

    asyncio.run(highlighter.load())

    assert highlighter.is_ready() is True
