# src/a11y_auditor/dom/models.py
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from .core import ElementNode


class HTMLDocument(BaseModel):
    """
    Represents a parsed HTML document or fragment.

    `root` is a synthetic `#document` element; its children are the top-level
    nodes of the input. Fragments are not wrapped in implied <html>/<body>
    elements, so a bare `<li>` really has the document as its parent.
    """
    source: str = ""
    has_doctype: bool = False
    has_html_root: bool = False
    notices: List[str] = Field(default_factory=list)

    root: ElementNode = Field(default_factory=lambda: ElementNode(tag="#document"))

    def iter_elements(self) -> Iterator[ElementNode]:
        """All elements in document order (the synthetic root excluded)."""
        return self.root.iter_descendants()

    def find_all(self, *tags: str) -> List[ElementNode]:
        wanted = {t.lower() for t in tags}
        return [el for el in self.iter_elements() if el.tag in wanted]

    def find(self, tag: str) -> Optional[ElementNode]:
        tag = tag.lower()
        for el in self.iter_elements():
            if el.tag == tag:
                return el
        return None

    @property
    def html(self) -> Optional[ElementNode]:
        return self.find("html")

    @property
    def head(self) -> Optional[ElementNode]:
        return self.find("head")

    @property
    def body(self) -> Optional[ElementNode]:
        return self.find("body")
