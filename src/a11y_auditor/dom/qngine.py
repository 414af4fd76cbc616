# src/a11y_auditor/dom/qngine.py
import logging
from typing import Iterable, List, Optional, Union

from .core import Category, RuleSpec
from .models import HTMLDocument
from .registry import RuleRegistry
from .. import reporting
from ..model import RuleResult, ScanReport, Violation

logger = logging.getLogger(__name__)


class QNGINE:
    """
    Quality Engine (QNGINE) for auditing HTML documents.

    Runs registered accessibility rules against a document parsed by the
    DOMBuilder and turns their findings into rendered RuleResults.
    """

    def __init__(self):
        """Initializes the engine by discovering and loading all available rules."""
        RuleRegistry.discover()

    @staticmethod
    def run_rule(spec: RuleSpec, doc: HTMLDocument) -> RuleResult:
        """Evaluates one rule; the rule itself never raises for HTML defects."""
        violations = [
            Violation.from_finding(spec.name, msg, el)
            for el, msg in spec(doc)
        ]
        return RuleResult(
            rule=spec.name,
            category=spec.category,
            violations=violations,
            message=reporting.render(spec, violations)
        )

    def run_rules(self, doc: HTMLDocument, specs: Iterable[RuleSpec]) -> List[RuleResult]:
        return [self.run_rule(spec, doc) for spec in specs]

    def run_audit(
            self,
            doc: HTMLDocument,
            categories: Optional[Iterable[Union[Category, str]]] = None
    ) -> ScanReport:
        """
        Runs the full suite (or the selected categories) on a parsed document.

        Args:
            doc (HTMLDocument): The parsed document.
            categories: Category values or names; None or 'all' selects everything.

        Returns:
            ScanReport: failing rules only, keyed by rule name in full-scan order.
        """
        selected = RuleRegistry.resolve_categories(categories)
        report = ScanReport(source=doc.source, categories=selected)

        for category in selected:
            for spec in RuleRegistry.get_rules(category):
                result = self.run_rule(spec, doc)
                report.rules_run += 1
                if not result.passed:
                    report.results[spec.name] = result

        logger.debug(
            f"Audit of '{doc.source or '<string>'}': {report.rules_run} rules run, "
            f"{len(report.results)} failing"
        )
        return report
