import logging
from collections import Counter, defaultdict
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd
from tqdm.auto import tqdm

from a11y_auditor.dom.builder import DOMBuilder
from a11y_auditor.dom.qngine import QNGINE
from a11y_auditor.dom.registry import RuleRegistry
from a11y_auditor.managers.config_manager import config_manager
from a11y_auditor.model import ScanReport

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Source", "Category", "Rule", "Tag", "Element", "Message"]
SOURCE_COLUMNS = ("source", "url")
CONTENT_COLUMNS = ("content", "html")

Sources = Union[pd.DataFrame, Dict[str, str], Iterable[Tuple[str, str]]]


def _worker_audit_document(
        item: Tuple[str, str],
        categories: Sequence[str]
) -> Optional[Dict[str, Any]]:
    """
    Worker function to audit a single document in a separate process.
    Returns plain data only; element references never cross the process boundary.
    """
    source, html = item
    if html is None:
        return None

    builder = DOMBuilder()
    engine = QNGINE()

    results = {
        "source": source,
        "report": None,
        "export_rows": [],
        "stats": Counter(),
    }

    try:
        doc = builder.parse(html, source=source)
        report = engine.run_audit(doc, categories)

        for result in report.results.values():
            results["stats"][(result.category.value, result.rule)] += len(result.violations)
            for v in result.violations:
                results["export_rows"].append({
                    "Source": source,
                    "Category": result.category.value,
                    "Rule": v.rule,
                    "Tag": v.tag_name,
                    "Element": v.identifier,
                    "Message": v.message
                })

        results["report"] = report.model_dump(mode="json")
        return results

    except Exception as e:
        logger.error(f"Worker failed on {source}: {e}")
        return {"error": str(e), "source": source}


class AuditController:
    """
    Orchestrates batch auditing: fans documents out to a process pool,
    aggregates the per-document reports and exposes them for export.
    """

    def __init__(self, categories: Optional[Iterable[str]] = None):
        self.categories = [c.value for c in RuleRegistry.resolve_categories(categories)]

        # Results Buffers
        self.reports: List[ScanReport] = []
        self.export_rows: List[Dict[str, Any]] = []
        self.errors: List[Dict[str, str]] = []
        self.stats = defaultdict(Counter)

    @staticmethod
    def _prepare_tasks(sources: Sources) -> List[Tuple[str, str]]:
        """Accepts a DataFrame (source/url + content/html columns), a mapping or (source, html) pairs."""
        if isinstance(sources, pd.DataFrame):
            src_col = next((c for c in SOURCE_COLUMNS if c in sources.columns), None)
            html_col = next((c for c in CONTENT_COLUMNS if c in sources.columns), None)
            if html_col is None:
                raise ValueError(f"DataFrame needs one of the columns {CONTENT_COLUMNS}")
            tasks = []
            for idx, row in sources.iterrows():
                source = str(row[src_col]) if src_col else str(idx)
                html = row[html_col]
                tasks.append((source, html if isinstance(html, str) else None))
            return tasks
        if isinstance(sources, dict):
            return list(sources.items())
        return [(str(source), html) for source, html in sources]

    def run_audit(
            self,
            sources: Sources,
            workers: Optional[int] = None,
            progress_callback: Optional[Callable[[int, int], None]] = None,
            show_progress: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Runs the audit on every document and aggregates the results."""
        tasks = self._prepare_tasks(sources)
        total = len(tasks)
        n_workers = int(workers or config_manager.get_nested("audit.workers", 4))
        if show_progress is None:
            show_progress = bool(config_manager.get_nested("audit.show_progress", True))

        # Reset Buffers
        self.reports = []
        self.export_rows = []
        self.errors = []
        self.stats = defaultdict(Counter)

        documents_with_issues = 0
        total_issues = 0
        skipped = 0

        logger.info(f"Auditing {total} documents with {n_workers} workers ({', '.join(self.categories)})")

        with ProcessPoolExecutor(max_workers=n_workers) as executor:
            func = partial(_worker_audit_document, categories=self.categories)
            results_iter = executor.map(func, tasks)
            if show_progress:
                results_iter = tqdm(results_iter, total=total, desc="Auditing", unit="doc")

            for i, result in enumerate(results_iter):
                if progress_callback:
                    progress_callback(i + 1, total)

                if not result:
                    skipped += 1
                    continue
                if "error" in result:
                    self.errors.append({"source": result["source"], "error": result["error"]})
                    continue

                self.reports.append(ScanReport.model_validate(result["report"]))
                if result["export_rows"]:
                    documents_with_issues += 1
                    total_issues += len(result["export_rows"])
                    for (cat, rule), count in result["stats"].items():
                        self.stats[cat][rule] += count
                    self.export_rows.extend(result["export_rows"])

        logger.info(
            f"Audit finished: {total_issues} violations in {documents_with_issues}/{total} documents"
            + (f", {len(self.errors)} failed" if self.errors else "")
        )

        return {
            "total_documents": total,
            "documents_with_issues": documents_with_issues,
            "total_issues": total_issues,
            "failed": len(self.errors),
            "skipped": skipped,
            "stats": self.stats
        }

    # --- Result Getters ---
    def get_results_for_export(self) -> List[Dict[str, Any]]:
        return self.export_rows

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.export_rows, columns=EXPORT_COLUMNS)

    def get_summary(self) -> List[Dict[str, Any]]:
        """Violation counts per category and rule, most frequent first within a category."""
        return [
            {"category": cat, "rule": rule, "count": count}
            for cat in self.categories if cat in self.stats
            for rule, count in self.stats[cat].most_common()
        ]

    def get_reports(self) -> List[ScanReport]:
        return self.reports

    def get_errors(self) -> List[Dict[str, str]]:
        return self.errors
