# src/a11y_auditor/dom/builder.py
import logging
import warnings
from typing import List, Optional

from bs4 import BeautifulSoup, Doctype, MarkupResemblesLocatorWarning, NavigableString, Tag
from bs4.element import PreformattedString

from .core import ElementNode, TextNode
from .models import HTMLDocument
from ..exceptions import InvalidInputError
from ..managers.config_manager import config_manager

logger = logging.getLogger(__name__)

DEFAULT_FEATURES = "html.parser"

HEADINGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# HTML5 "special" category; these stop the search for an open <li>, <dt> or <dd>
SPECIAL = frozenset({
    "address", "applet", "area", "article", "aside", "base", "basefont", "bgsound",
    "blockquote", "body", "br", "button", "caption", "center", "col", "colgroup",
    "dd", "details", "dir", "div", "dl", "dt", "embed", "fieldset", "figcaption",
    "figure", "footer", "form", "frame", "frameset", "head", "header", "hgroup",
    "hr", "html", "iframe", "img", "input", "keygen", "li", "link", "listing",
    "main", "marquee", "menu", "meta", "nav", "noembed", "noframes", "noscript",
    "object", "ol", "p", "param", "plaintext", "pre", "script", "search", "section",
    "select", "source", "style", "summary", "table", "tbody", "td", "template",
    "textarea", "tfoot", "th", "thead", "title", "tr", "track", "ul", "wbr", "xmp",
}) | HEADINGS

LIST_ITEM_BOUNDARY = SPECIAL - {"address", "div", "p"}

BUTTON_SCOPE = frozenset({
    "applet", "caption", "html", "table", "td", "th", "marquee", "object", "template", "button",
})

# Start tags that close an open <p>
P_CLOSERS = frozenset({
    "address", "article", "aside", "blockquote", "center", "details", "dialog", "dir",
    "div", "dl", "fieldset", "figcaption", "figure", "footer", "form", "header",
    "hgroup", "hr", "li", "dd", "dt", "main", "menu", "nav", "ol", "p", "pre",
    "search", "section", "summary", "table", "ul", "listing", "xmp", "plaintext",
}) | HEADINGS

TABLE_SECTIONS = frozenset({"caption", "colgroup", "thead", "tbody", "tfoot"})
CELL_BOUNDARY = frozenset({"tr", "table", "tbody", "thead", "tfoot", "html", "template"})
ROW_BOUNDARY = frozenset({"table", "tbody", "thead", "tfoot", "html", "template"})


class DOMBuilder:
    """
    Builder responsible for parsing raw HTML into a structured HTMLDocument model.

    BeautifulSoup does the tolerant parsing; this class converts its tree into
    the engine's own node models so rules never depend on the parsing backend.
    """

    def __init__(self, features: Optional[str] = None):
        self.features = features or config_manager.get_nested("parser.features", DEFAULT_FEATURES)

    def parse(self, html: str, source: str = "") -> HTMLDocument:
        """
        Parses raw HTML content (a full document or a fragment) into an HTMLDocument.

        Args:
            html (str): The raw HTML string.
            source (str): Optional label for the input (file name, URL) used in reports.

        Returns:
            HTMLDocument: The parsed tree. Malformed markup never raises; recovery
            steps are recorded in `HTMLDocument.notices`.

        Raises:
            InvalidInputError: if `html` is None or not a string.
        """
        if html is None:
            raise InvalidInputError("Cannot parse None as HTML")
        if not isinstance(html, str):
            raise InvalidInputError(f"HTML input must be a string, got {type(html).__name__}")

        notices: List[str] = []
        soup = self._make_soup(html.lstrip("\ufeff"), notices)

        doc = HTMLDocument(
            source=source,
            has_doctype=any(isinstance(item, Doctype) for item in soup.contents),
            has_html_root=soup.find("html") is not None,
        )

        stack = [doc.root]
        for child in soup.contents:
            self._build_tree(child, stack, notices)

        if not html.strip():
            notices.append("empty_document")

        doc.notices = notices
        for notice in notices:
            logger.debug(f"Parse recovery notice ({source or 'inline html'}): {notice}")

        return doc

    def _make_soup(self, html: str, notices: List[str]) -> BeautifulSoup:
        def keep_first(attrs, key, value):
            notices.append(f"duplicate_attribute:{key}")

        kwargs = {"multi_valued_attributes": None}
        if self.features == DEFAULT_FEATURES:
            # Only the stdlib-backed tree builder supports this hook
            kwargs["on_duplicate_attribute"] = keep_first

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            return BeautifulSoup(html, self.features, **kwargs)

    def _build_tree(self, item, stack: List[ElementNode], notices: List[str]) -> None:
        """
        Replays a BeautifulSoup node against the stack of open elements.

        html.parser nests every unclosed tag inside the previous one, so the
        HTML5 implied end tags (li, dt/dd, p, option/optgroup, tr, td/th) and
        the implied <tbody> are applied here. New nodes go to `stack[-1]`.
        """
        if isinstance(item, PreformattedString):
            # Comments, doctype, CDATA and processing instructions are not content
            return

        if isinstance(item, NavigableString):
            stack[-1].adopt(TextNode(text=str(item)))
            return

        if not isinstance(item, Tag):
            return

        element = ElementNode(
            tag=item.name.lower(),
            attrs={str(k).lower(): self._attr_value(v) for k, v in item.attrs.items()},
        )
        self._close_implied(element.tag, stack)

        if element.tag == "tr" and stack[-1].tag == "table":
            tbody = ElementNode(tag="tbody")
            stack[-1].adopt(tbody)
            stack.append(tbody)
            notices.append("implied_tbody")

        stack[-1].adopt(element)

        # Void elements never own children; stray content becomes following siblings
        if element.is_void:
            if item.contents:
                notices.append(f"void_element_content_hoisted:{element.tag}")
            for child in item.contents:
                self._build_tree(child, stack, notices)
            return

        stack.append(element)
        for child in item.contents:
            self._build_tree(child, stack, notices)

        # End tag; a no-op when a later start tag already closed the element
        for i in range(len(stack) - 1, 0, -1):
            if stack[i] is element:
                del stack[i:]
                break

    @staticmethod
    def _close_implied(tag: str, stack: List[ElementNode]) -> None:
        """Pops the open elements that the start tag `tag` implicitly ends."""
        if tag == "li":
            _close_in_scope(stack, {"li"}, LIST_ITEM_BOUNDARY)
        elif tag in ("dt", "dd"):
            _close_in_scope(stack, {"dt", "dd"}, LIST_ITEM_BOUNDARY)

        if tag in P_CLOSERS:
            _close_in_scope(stack, {"p"}, BUTTON_SCOPE)

        if tag in HEADINGS and stack[-1].tag in HEADINGS:
            stack.pop()
        elif tag == "option":
            if stack[-1].tag == "option":
                stack.pop()
        elif tag == "optgroup":
            if stack[-1].tag == "option":
                stack.pop()
            if stack[-1].tag == "optgroup":
                stack.pop()
        elif tag in ("td", "th"):
            _close_in_scope(stack, {"td", "th"}, CELL_BOUNDARY)
        elif tag == "tr":
            _close_in_scope(stack, {"tr", "caption", "colgroup"}, ROW_BOUNDARY)
        elif tag in TABLE_SECTIONS:
            for i in range(len(stack) - 1, 0, -1):
                if stack[i].tag == "table":
                    del stack[i + 1:]
                    break

    @staticmethod
    def _attr_value(value) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)


def _close_in_scope(stack: List[ElementNode], targets, boundary) -> None:
    """Pops up to and including the nearest open element in `targets`, unless a `boundary` element comes first."""
    for i in range(len(stack) - 1, 0, -1):
        tag = stack[i].tag
        if tag in targets:
            del stack[i:]
            return
        if tag in boundary:
            return


def parse(html: str, source: str = "") -> HTMLDocument:
    """Shortcut for `DOMBuilder().parse(html)`."""
    return DOMBuilder().parse(html, source=source)
