"""JSON report generator for suite runs.

Generates structured JSON reports from execution results.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..runner.result_collector import CollectedResult

DEFAULT_REPORT_NAME = "suite_report.json"


class JsonReporter:
    """Generates JSON reports from suite run results."""

    def generate(
        self,
        collected: CollectedResult,
        duration_ms: int = 0,
    ) -> dict[str, Any]:
        """Generate a JSON report from run results.

        Args:
            collected: Case outcomes and failure records of the run.
            duration_ms: Run duration in milliseconds.

        Returns:
            Report dictionary ready for JSON serialization.
        """
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": "failed" if collected.has_failures else "passed",
            "summary": {
                "total": collected.total_count,
                "passed": collected.passed_count,
                "failed": collected.failed_count,
                "duration_ms": duration_ms,
            },
            "cases": [o.to_dict() for o in collected.outcomes],
            "failures": [f.to_dict() for f in collected.failures],
        }

    def save(self, report: dict[str, Any], path: Path) -> Path:
        """Save report to a JSON file.

        Args:
            report: Report dictionary.
            path: Output file path.

        Returns:
            Path to the saved file.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return path

    def to_json_string(self, report: dict[str, Any], pretty: bool = True) -> str:
        """Convert report to JSON string."""
        if pretty:
            return json.dumps(report, indent=2, ensure_ascii=False)
        return json.dumps(report, ensure_ascii=False)
