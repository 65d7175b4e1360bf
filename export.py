"""
Export functionality for cleanup results.

Provides JSON and CSV export of a RunSummary for automation and
integration. Both formats are built-in to Python (no external dependencies).

Usage:
    >>> from export import export_to_json, export_to_csv
    >>> summary = run_cleanup(config)
    >>> print(export_to_json(summary))
    >>> print(export_to_csv(summary))
"""

import csv
import json
from datetime import datetime
from io import StringIO
from typing import Any, Dict

from config import EXPORT_FIELDS
from models import MatchEvent, RunSummary

TOOL_NAME = "begone"
TOOL_VERSION = "0.1.0"


def _event_to_dict(event: MatchEvent) -> Dict[str, Any]:
    """
    Convert MatchEvent to dictionary for serialization.

    Args:
        event: Event to convert

    Returns:
        Dictionary with path, action and reason (None unless failed)
    """
    return {
        "path": str(event.path),
        "action": event.action.value,
        "reason": event.reason,
    }


def export_to_json(
    summary: RunSummary,
    indent: int = 2,
    include_metadata: bool = True
) -> str:
    """
    Export a run to JSON format.

    Args:
        summary: Completed run summary
        indent: Number of spaces for JSON indentation (default: 2)
        include_metadata: Include timestamp, run settings and counts (default: True)

    Returns:
        JSON string with "metadata" (optional) and "events"
    """
    data: Dict[str, Any] = {}

    if include_metadata:
        data["metadata"] = {
            "timestamp": datetime.now().isoformat(),
            "tool": TOOL_NAME,
            "version": TOOL_VERSION,
            "ecosystem": summary.kind.value,
            "root": str(summary.root),
            "dry_run": summary.dry_run,
            "summary": {
                "deleted": summary.deleted,
                "would_delete": summary.would_delete,
                "failed": summary.failed,
                "visited": summary.visited,
            },
        }

    data["events"] = [_event_to_dict(event) for event in summary.events]

    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_to_csv(
    summary: RunSummary,
    include_header: bool = True,
    delimiter: str = ","
) -> str:
    """
    Export a run's events to CSV format, one row per event.

    Args:
        summary: Completed run summary
        include_header: Include column headers as first row (default: True)
        delimiter: CSV delimiter character (default: ",")

    Returns:
        CSV string with columns path, action, reason
    """
    output = StringIO()

    writer = csv.DictWriter(
        output,
        fieldnames=EXPORT_FIELDS,
        delimiter=delimiter,
        lineterminator="\n"
    )

    if include_header:
        writer.writeheader()

    for event in summary.events:
        row = _event_to_dict(event)
        row["reason"] = row["reason"] or ""
        writer.writerow(row)

    return output.getvalue()


def save_json(summary: RunSummary, filepath: str) -> None:
    """
    Save a run to a JSON file.

    Raises:
        OSError: If file cannot be written
    """
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(export_to_json(summary))


def save_csv(summary: RunSummary, filepath: str) -> None:
    """
    Save a run to a CSV file.

    Raises:
        OSError: If file cannot be written
    """
    with open(filepath, "w", encoding="utf-8", newline="") as f:
        f.write(export_to_csv(summary))
