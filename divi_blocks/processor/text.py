"""Default inline text parser: HTML inside a text module -> styled spans.

Only inline formatting survives (bold, italic, underline, code, links).
Block-level elements become line breaks; everything else is flattened.
"""

import re
from html.parser import HTMLParser
from typing import Callable

from divi_blocks.common.models import Span

TextParser = Callable[[str], list[Span]]

_FORMAT_TAGS = {
    "strong": "bold",
    "b": "bold",
    "em": "italic",
    "i": "italic",
    "u": "underline",
    "code": "code",
}
_BREAK_TAGS = {"p", "div", "li", "blockquote", "h1", "h2", "h3", "h4", "h5", "h6", "ul", "ol", "tr"}
_SKIP_TAGS = {"script", "style"}
_FORMAT_ORDER = ("bold", "italic", "underline", "code")

_WHITESPACE = re.compile(r"[ \t\r\f\v\n]+")
# stray builder shortcodes inside text content carry no text of their own
_SHORTCODE = re.compile(r"\[/?et_pb_\w+[^\]]*\]")


class _InlineHTMLParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.spans: list[Span] = []
        self._formats: list[str] = []
        self._links: list[str | None] = []
        self._skip_depth = 0

    def _current_formats(self) -> tuple[str, ...]:
        active = set(self._formats)
        formats = tuple(fmt for fmt in _FORMAT_ORDER if fmt in active)
        return formats or ("none",)

    def _append(self, text: str) -> None:
        if not text:
            return
        href = next((h for h in reversed(self._links) if h), None)
        span = Span(text=text, formats=self._current_formats(), href=href)
        if self.spans and self.spans[-1].same_style(span):
            last = self.spans.pop()
            span = Span(text=last.text + text, formats=last.formats, href=last.href)
        self.spans.append(span)

    def _newline(self) -> None:
        if not self.spans:
            return
        last = self.spans[-1]
        if last.text.endswith("\n"):
            return
        self.spans[-1] = Span(text=last.text.rstrip(" ") + "\n", formats=last.formats, href=last.href)

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIP_TAGS:
            self._skip_depth += 1
        elif tag in _FORMAT_TAGS:
            self._formats.append(_FORMAT_TAGS[tag])
        elif tag == "a":
            self._links.append(dict(attrs).get("href") or None)
        elif tag == "br" or tag in _BREAK_TAGS:
            self._newline()

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIP_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
        elif tag in _FORMAT_TAGS:
            fmt = _FORMAT_TAGS[tag]
            if fmt in self._formats:
                # remove the innermost occurrence; tolerate misnesting
                idx = len(self._formats) - 1 - self._formats[::-1].index(fmt)
                del self._formats[idx]
        elif tag == "a":
            if self._links:
                self._links.pop()
        elif tag in _BREAK_TAGS:
            self._newline()

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        text = _WHITESPACE.sub(" ", data)
        if self.spans and self.spans[-1].text.endswith(("\n", " ")):
            text = text.lstrip(" ")
        elif not self.spans:
            text = text.lstrip(" ")
        self._append(text)


def _trim(spans: list[Span]) -> list[Span]:
    """Strip leading/trailing whitespace of the whole run and drop empty spans."""
    while spans and not spans[0].text.strip():
        spans.pop(0)
    while spans and not spans[-1].text.strip():
        spans.pop()
    if not spans:
        return []
    first = spans[0]
    spans[0] = Span(text=first.text.lstrip(), formats=first.formats, href=first.href)
    last = spans[-1]
    spans[-1] = Span(text=last.text.rstrip(), formats=last.formats, href=last.href)
    return spans


def parse_inline_html(markup: str) -> list[Span]:
    """Parse the inner markup of a text module into spans; `[]` when nothing visible remains."""
    if not markup or not markup.strip():
        return []
    parser = _InlineHTMLParser()
    parser.feed(_SHORTCODE.sub("", markup))
    parser.close()
    return _trim(parser.spans)


__all__ = ["TextParser", "parse_inline_html"]
