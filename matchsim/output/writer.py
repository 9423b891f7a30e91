"""Persist formatted reports to timestamped files."""

import logging
from datetime import UTC, datetime
from pathlib import Path

from matchsim.core.constants import RESULT_TIMESTAMP_FORMAT
from matchsim.core.exceptions import ReportWriteError

logger = logging.getLogger(__name__)


def build_report_path(prefix: str, results_dir: str | Path, now: datetime | None = None) -> Path:
    """Return ``<results_dir>/<prefix>_<UTC timestamp>.txt``."""
    timestamp = (now or datetime.now(UTC)).strftime(RESULT_TIMESTAMP_FORMAT)
    return Path(results_dir) / f"{prefix}_{timestamp}.txt"


def write_report(
    text: str,
    prefix: str,
    results_dir: str | Path,
    now: datetime | None = None,
) -> Path:
    """
    Write a report, creating the results directory if needed.

    Args:
        text: Rendered report
        prefix: File name prefix
        results_dir: Directory receiving the file
        now: Timestamp to use (defaults to the current UTC time)

    Returns:
        Path of the written file

    Raises:
        ReportWriteError: If the directory or file cannot be written
    """
    path = build_report_path(prefix, results_dir, now)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(
            f"Error writing to file: {e}", details={"path": str(path)}
        ) from e

    logger.info("Report written to %s", path)
    return path
