# src/a11y_auditor/api.py
"""
Public entry points.

Every registered rule is reachable as `check_<rule>(html)` (returns a
RuleResult) and `assert_<rule>(html)` (raises AccessibilityAssertionError).
`html` may be a string or an already parsed HTMLDocument.
"""
import logging
from functools import partial
from typing import Iterable, List, Optional, Union

from a11y_auditor.dom.builder import parse
from a11y_auditor.dom.core import Category
from a11y_auditor.dom.models import HTMLDocument
from a11y_auditor.dom.qngine import QNGINE
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.exceptions import AccessibilityAssertionError
from a11y_auditor.model import RuleResult, ScanReport

logger = logging.getLogger(__name__)

HtmlInput = Union[str, HTMLDocument]

_engine: Optional[QNGINE] = None


def _get_engine() -> QNGINE:
    global _engine
    if _engine is None:
        _engine = QNGINE()
    return _engine


def _ensure_document(html: HtmlInput) -> HTMLDocument:
    if isinstance(html, HTMLDocument):
        return html
    return parse(html)


def check(rule_name: str, html: HtmlInput) -> RuleResult:
    """Runs a single rule and returns its result; never raises for HTML defects."""
    spec = RuleRegistry.get_rule(rule_name)
    return _get_engine().run_rule(spec, _ensure_document(html))


def assert_rule(rule_name: str, html: HtmlInput) -> RuleResult:
    """Runs a single rule and raises AccessibilityAssertionError if it fails."""
    result = check(rule_name, html)
    if not result.passed:
        raise AccessibilityAssertionError(result)
    return result


def _assert_categories(categories: Iterable[Union[Category, str]], html: HtmlInput) -> None:
    """Runs categories in full-scan order and stops at the first failing rule."""
    doc = _ensure_document(html)
    engine = _get_engine()
    for category in RuleRegistry.resolve_categories(categories):
        for spec in RuleRegistry.get_rules(category):
            result = engine.run_rule(spec, doc)
            if not result.passed:
                raise AccessibilityAssertionError(result)


def assert_no_accessibility_advice(html: HtmlInput) -> None:
    _assert_categories([Category.ADVICE], html)


def assert_no_accessibility_errors(html: HtmlInput) -> None:
    _assert_categories([Category.ERRORS], html)


def assert_no_accessibility_obsoletes(html: HtmlInput) -> None:
    _assert_categories([Category.OBSOLETES], html)


def assert_no_accessibility_warnings(html: HtmlInput) -> None:
    _assert_categories([Category.WARNINGS], html)


def assert_no_accessibility_issues(html: HtmlInput) -> None:
    _assert_categories(list(Category), html)


def scan(html: HtmlInput, categories: Optional[Iterable[Union[Category, str]]] = None) -> ScanReport:
    """Collects every violation of the selected categories, grouped by rule."""
    return _get_engine().run_audit(_ensure_document(html), categories)


def list_rules(category: Optional[Union[Category, str]] = None) -> List[str]:
    if category is None:
        return RuleRegistry.get_all_rule_names()
    return [spec.name for spec in RuleRegistry.get_rules(category)]


def __getattr__(name: str):
    for prefix, func in (("check_", check), ("assert_", assert_rule)):
        if name.startswith(prefix) and RuleRegistry.has_rule(name[len(prefix):]):
            return partial(func, name[len(prefix):])
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "assert_no_accessibility_advice",
    "assert_no_accessibility_errors",
    "assert_no_accessibility_issues",
    "assert_no_accessibility_obsoletes",
    "assert_no_accessibility_warnings",
    "assert_rule",
    "check",
    "list_rules",
    "parse",
    "scan",
]
