# src/a11y_auditor/reporting.py
from typing import List, Optional, Sequence

from a11y_auditor.dom.core import ReportStyle, RuleSpec
from a11y_auditor.model import ScanReport, Violation

DEFAULT_SUMMARY = "Found {count} elements violating {rule}:"


def render(spec: RuleSpec, violations: Sequence[Violation]) -> str:
    """
    Renders the failure message for one rule.

    - No violations: an empty string.
    - First-match rules: the first violation's sentence, whatever the count.
    - Collect rules with one violation: that violation's detail line.
    - Collect rules with two or more: the summary header followed by one
      '- ' prefixed line per violation, in document order.
    """
    if not violations:
        return ""
    if spec.style == ReportStyle.FIRST_MATCH or len(violations) == 1:
        return violations[0].message
    return render_summary(spec.summary, violations, rule=spec.name)


def render_summary(summary: Optional[str], violations: Sequence[Violation], rule: str = "") -> str:
    header = (summary or DEFAULT_SUMMARY).format(count=len(violations), rule=rule)
    lines: List[str] = [header]
    lines.extend(f"- {v.message}" for v in violations)
    return "\n".join(lines)


def render_report(report: ScanReport) -> str:
    """Joins the messages of every failing rule, separated by a blank line."""
    return "\n\n".join(result.message for result in report.results.values())
