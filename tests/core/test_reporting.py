# tests/core/test_reporting.py
from a11y_auditor.dom.core import Category, ReportStyle, RuleSpec, rule_spec
from a11y_auditor.model import RuleResult, ScanReport, Violation
from a11y_auditor.reporting import render, render_report, render_summary


@rule_spec("collect_rule", summary="Found {count} bad things:")
def _collect_rule(doc):
    return []


@rule_spec("plain_header_rule", summary="Found bad things:")
def _plain_header_rule(doc):
    return []


@rule_spec("first_match_rule", style=ReportStyle.FIRST_MATCH)
def _first_match_rule(doc):
    return []


def _violations(*messages):
    return [Violation(rule="r", message=m) for m in messages]


def test_rule_spec_metadata():
    """The decorator attaches name, summary and style."""
    spec = RuleSpec(_first_match_rule, Category.WARNINGS)
    assert spec.name == "first_match_rule"
    assert spec.summary is None
    assert spec.style == ReportStyle.FIRST_MATCH
    assert repr(spec) == "RuleSpec(warnings.first_match_rule)"


def test_no_violations_renders_nothing():
    assert render(RuleSpec(_collect_rule, Category.ERRORS), []) == ""


def test_single_violation_renders_detail_line():
    """Exactly one offender yields its own message, without a header."""
    spec = RuleSpec(_collect_rule, Category.ERRORS)
    assert render(spec, _violations("<img> is missing alt")) == "<img> is missing alt"


def test_multiple_violations_render_summary():
    """Two or more offenders yield the header plus one '- ' line each, in order."""
    spec = RuleSpec(_collect_rule, Category.ERRORS)
    message = render(spec, _violations("first", "second"))
    assert message == "Found 2 bad things:\n- first\n- second"


def test_summary_without_count_placeholder():
    spec = RuleSpec(_plain_header_rule, Category.ADVICE)
    assert render(spec, _violations("a", "b", "c")).splitlines() == ["Found bad things:", "- a", "- b", "- c"]


def test_first_match_always_renders_first_violation():
    """First-match rules report the first offender only, whatever the count."""
    spec = RuleSpec(_first_match_rule, Category.WARNINGS)
    assert render(spec, _violations("first sentence.", "second sentence.")) == "first sentence."


def test_default_summary_header():
    """Rules without a summary fall back to a generic header."""
    message = render_summary(None, _violations("a", "b"), rule="some_rule")
    assert message.splitlines()[0] == "Found 2 elements violating some_rule:"


def test_render_report_joins_failing_rules():
    """Failing rule messages are separated by a blank line."""
    report = ScanReport(results={
        "a": RuleResult(rule="a", category=Category.ERRORS, violations=_violations("x"), message="x"),
        "b": RuleResult(rule="b", category=Category.WARNINGS, violations=_violations("y"), message="y"),
    }, categories=[Category.ERRORS, Category.WARNINGS])
    assert render_report(report) == "x\n\ny"
    assert report.summary() == {"errors": 1, "warnings": 1}
    assert [r.rule for r in report.by_category(Category.WARNINGS)] == ["b"]
    assert not report.passed


def test_violation_without_element():
    """Document-level violations have no tag or identifier."""
    v = Violation(rule="title_not_empty", message="Document is missing a <title> tag")
    assert v.tag_name == ""
    assert v.identifier == ""
    assert "element" not in v.model_dump()
