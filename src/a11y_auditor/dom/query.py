# src/a11y_auditor/dom/query.py
"""
Traversal and attribute helpers shared by every rule module.

All walks are depth-first pre-order, i.e. document order.
"""
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .core import ElementNode, Node, TextNode
from .models import HTMLDocument

Scope = Union[HTMLDocument, ElementNode]


def _root(node: Scope) -> ElementNode:
    return node.root if isinstance(node, HTMLDocument) else node


def iter_elements(node: Scope) -> Iterator[ElementNode]:
    return _root(node).iter_descendants()


def descendants_by_tag(node: Scope, *tags: str) -> List[ElementNode]:
    wanted = {t.lower() for t in tags}
    return [el for el in iter_elements(node) if el.tag in wanted]


def find_by_attr(node: Scope, name: str) -> List[ElementNode]:
    """Elements carrying attribute `name`, whatever its value."""
    name = name.lower()
    return [el for el in iter_elements(node) if name in el.attrs]


def find_by_id(node: Scope, element_id: str) -> Optional[ElementNode]:
    for el in iter_elements(node):
        if el.attrs.get("id") == element_id:
            return el
    return None


def direct_children(node: ElementNode, include_text: bool = False) -> List[Node]:
    if include_text:
        return list(node.children)
    return node.element_children


def ancestors(node: Node) -> Iterator[ElementNode]:
    """Enclosing elements from the nearest outwards; the synthetic document root is excluded."""
    current = node.parent
    while current is not None and current.parent is not None:
        yield current
        current = current.parent


def ancestor_of_tag(node: Node, *tags: str) -> Optional[ElementNode]:
    wanted = {t.lower() for t in tags}
    for anc in ancestors(node):
        if anc.tag in wanted:
            return anc
    return None


def first_element_child(node: ElementNode) -> Optional[ElementNode]:
    for child in node.children:
        if isinstance(child, ElementNode):
            return child
    return None


def last_element_child(node: ElementNode) -> Optional[ElementNode]:
    for child in reversed(node.children):
        if isinstance(child, ElementNode):
            return child
    return None


def _siblings(node: ElementNode) -> List[ElementNode]:
    return node.parent.element_children if node.parent is not None else [node]


def previous_element_sibling(node: ElementNode) -> Optional[ElementNode]:
    siblings = _siblings(node)
    idx = next(i for i, s in enumerate(siblings) if s is node)
    return siblings[idx - 1] if idx > 0 else None


def next_element_sibling(node: ElementNode) -> Optional[ElementNode]:
    siblings = _siblings(node)
    idx = next(i for i, s in enumerate(siblings) if s is node)
    return siblings[idx + 1] if idx + 1 < len(siblings) else None


def attr(el: ElementNode, name: str) -> Optional[str]:
    return el.get(name)


def has_attr(el: ElementNode, name: str) -> bool:
    return el.has(name)


def attr_equals_ci(el: ElementNode, name: str, *values: str) -> bool:
    """True if the trimmed attribute value equals one of `values`, ignoring case."""
    value = el.get(name)
    if value is None:
        return False
    return value.strip().lower() in {v.lower() for v in values}


def text_content(node: Node) -> str:
    """Concatenated character data of the node and its descendants (untrimmed)."""
    if isinstance(node, TextNode):
        return node.text
    parts = []
    stack: List[Node] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, TextNode):
            parts.append(current.text)
        else:
            stack.extend(reversed(current.children))
    return "".join(parts)


def is_whitespace_only(value: Optional[str]) -> bool:
    """True for strings that are non-empty but contain nothing except whitespace."""
    return bool(value) and not value.strip()


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_hidden(el: ElementNode) -> bool:
    """Hidden from everyone via the `hidden` attribute or from AT via aria-hidden="true"."""
    return el.has("hidden") or attr_equals_ci(el, "aria-hidden", "true")


def has_accessible_name(el: ElementNode) -> bool:
    """True if one of title, aria-label or aria-labelledby carries a non-blank value."""
    return any(not is_blank(el.get(a)) for a in ("title", "aria-label", "aria-labelledby"))


def element_identifier(el: ElementNode) -> str:
    """` id="..."` when the element has an id, else ` name="..."`, else an empty string."""
    if el.has("id"):
        return f' id="{el.get("id")}"'
    if el.has("name"):
        return f' name="{el.get("name")}"'
    return ""


def format_attrs(el: ElementNode, names: Iterable[str]) -> str:
    """` a="x" b="y"` for every listed attribute that is present, in the order given."""
    return "".join(f' {n}="{el.get(n)}"' for n in names if el.has(n))


def opening_tag(el: ElementNode, names: Sequence[str] = (), upper: bool = False) -> str:
    tag = el.tag.upper() if upper else el.tag
    return f"<{tag}{format_attrs(el, names)}>"


def truncate(value: str, limit: int = 50) -> str:
    return value if len(value) <= limit else value[:limit] + "..."


def _escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def outer_html(node: Node) -> str:
    """Re-serialises a node and its subtree the way a DOM serializer would."""
    if isinstance(node, TextNode):
        return _escape_text(node.text)
    attrs = "".join(f' {name}="{_escape_attr(value)}"' for name, value in node.attrs.items())
    if node.is_void:
        return f"<{node.tag}{attrs}>"
    inner = "".join(outer_html(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
