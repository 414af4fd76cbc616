from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, PrivateAttr

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta",
    "param", "source", "track", "wbr",
    # Obsolete elements that browsers still parse as void
    "basefont", "bgsound", "frame", "isindex", "keygen",
})


class Category(str, Enum):
    """Severity/intent bucket a rule belongs to."""
    ADVICE = "advice"
    ERRORS = "errors"
    OBSOLETES = "obsoletes"
    WARNINGS = "warnings"


class ReportStyle(str, Enum):
    # COLLECT: detail line for one offender, summary header + details for more.
    # FIRST_MATCH: always the first offender's full sentence.
    COLLECT = "collect"
    FIRST_MATCH = "first_match"


def rule_spec(name: str, summary: Optional[str] = None, style: ReportStyle = ReportStyle.COLLECT):
    """
    Decorator to declare the public name and reporting behaviour of a rule function.
    Facilitates auto-discovery by the RuleRegistry.

    `summary` is the header used when two or more elements violate the rule;
    it may reference `{count}`.
    """
    def decorator(func):
        func.rule_name = name
        func.summary = summary
        func.report_style = style
        return func
    return decorator


class TextNode(BaseModel):
    """A run of character data inside an element."""
    text: str = ""
    _parent: Optional["ElementNode"] = PrivateAttr(default=None)

    @property
    def parent(self) -> Optional["ElementNode"]:
        return self._parent


class ElementNode(BaseModel):
    """
    Data model representing a single element in the simplified tree.
    Attribute names are stored lowercase, values verbatim.
    """
    tag: str
    attrs: Dict[str, str] = Field(default_factory=dict)
    children: List[Union["ElementNode", TextNode]] = Field(default_factory=list)
    _parent: Optional["ElementNode"] = PrivateAttr(default=None)

    @property
    def parent(self) -> Optional["ElementNode"]:
        return self._parent

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    @property
    def element_children(self) -> List["ElementNode"]:
        return [c for c in self.children if isinstance(c, ElementNode)]

    @property
    def is_empty(self) -> bool:
        """Returns True if the element has no element children and no non-blank text."""
        if self.element_children:
            return False
        return all(not c.text.strip() for c in self.children)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attrs.get(name.lower(), default)

    def has(self, name: str) -> bool:
        return name.lower() in self.attrs

    def adopt(self, child: Union["ElementNode", TextNode]) -> None:
        """Appends a child and sets its parent back reference."""
        child._parent = self
        self.children.append(child)

    def iter_descendants(self) -> Iterator["ElementNode"]:
        """Depth-first pre-order walk over element descendants (self excluded)."""
        stack = list(reversed(self.element_children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.element_children))


ElementNode.model_rebuild()
TextNode.model_rebuild()

Node = Union[ElementNode, TextNode]

# What a rule function yields: (offending element or None for document-level, detail message)
Finding = Tuple[Optional[ElementNode], str]


class RuleSpec:
    """A discovered rule: its function plus the metadata needed to run and report it."""

    def __init__(self, func: Callable[[Any], List[Finding]], category: Category):
        self.func = func
        self.category = category
        self.name: str = getattr(func, "rule_name", func.__name__)
        self.summary: Optional[str] = getattr(func, "summary", None)
        self.style: ReportStyle = getattr(func, "report_style", ReportStyle.COLLECT)

    def __call__(self, doc: Any) -> List[Finding]:
        return self.func(doc)

    def __repr__(self) -> str:
        return f"RuleSpec({self.category.value}.{self.name})"


class RuleDefinition:
    """
    Configuration object binding a category to its ordered list of rule functions.
    The order of `rules` is the full-scan order for that category.
    """

    def __init__(self, category: Category, rules: Optional[List[Callable[[Any], List[Finding]]]] = None):
        self.category = category
        self.rules: List[RuleSpec] = [RuleSpec(func, category) for func in (rules or [])]

    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self.rules]
