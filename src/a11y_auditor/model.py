from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from a11y_auditor.dom.core import Category, ElementNode
from a11y_auditor.dom.query import element_identifier


class Violation(BaseModel):
    """
    A single rule failure tied to one element of a parsed document.
    `element` is None only for document-level failures (e.g. no <title> at all).
    """
    model_config = ConfigDict(frozen=True)

    rule: str
    message: str
    element: Optional[ElementNode] = Field(default=None, exclude=True, repr=False)
    # Kept as plain fields so they survive model_dump/model_validate without the element
    tag_name: str = ""
    identifier: str = ""

    @classmethod
    def from_finding(cls, rule: str, message: str, element: Optional[ElementNode] = None) -> "Violation":
        """Builds a violation, taking the uppercased DOM `tagName` and identifier from `element`."""
        if element is None:
            return cls(rule=rule, message=message)
        return cls(
            rule=rule,
            message=message,
            element=element,
            tag_name=element.tag.upper(),
            identifier=element_identifier(element).strip(),
        )


class RuleResult(BaseModel):
    """
    Outcome of running one rule on one document.
    An empty `violations` list means the rule passed; `message` is the
    rendered failure text (empty when passed).
    """
    rule: str
    category: Category
    violations: List[Violation] = Field(default_factory=list)
    message: str = ""

    @property
    def passed(self) -> bool:
        return not self.violations


class ScanReport(BaseModel):
    """Aggregate of a full or per-category scan; only failing rules are kept."""
    source: str = ""
    categories: List[Category] = Field(default_factory=list)
    rules_run: int = 0
    results: Dict[str, RuleResult] = Field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not self.results

    @property
    def violations(self) -> List[Violation]:
        return [v for result in self.results.values() for v in result.violations]

    def by_category(self, category: Category) -> List[RuleResult]:
        return [r for r in self.results.values() if r.category == category]

    def summary(self) -> Dict[str, int]:
        """Violation counts per category, in category order."""
        counts = {c.value: 0 for c in self.categories}
        for result in self.results.values():
            counts[result.category.value] = counts.get(result.category.value, 0) + len(result.violations)
        return counts
