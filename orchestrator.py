"""
Cleanup orchestration module.

Drives the tree walker for one ecosystem selection, forwards each event to
the caller as it arrives, and collects the run summary.
"""

from typing import Callable, Optional

from cleaning.walker import walk
from config import ECOSYSTEM_LABELS
from logging_config import get_logger
from models import MatchEvent, RunSummary, WalkConfig
from utils.system import sanitize_for_log

logger = get_logger(__name__)

EventSink = Callable[[MatchEvent], None]


def _plural(count: int) -> str:
    return "project" if count == 1 else "projects"


def log_summary(summary: RunSummary) -> None:
    """
    Log the closing summary of a run.

    Args:
        summary: Completed run summary
    """
    label = ECOSYSTEM_LABELS[summary.kind.value]

    if summary.matched == 0 and summary.failed == 0:
        logger.info("No %s projects found to clean", label)
        return

    action = "Would remove" if summary.dry_run else "Removed"
    logger.info("%s %d %s %s", action, summary.matched, label, _plural(summary.matched))

    if summary.failed:
        logger.warning(
            "Failed to process %d directories (permission denied or in use)",
            summary.failed
        )


def run_cleanup(config: WalkConfig, on_event: Optional[EventSink] = None) -> RunSummary:
    """
    Run a cleanup walk and collect its events.

    Each event is passed to on_event as soon as the walker yields it, so
    output appears while large trees are still being scanned.

    Args:
        config: Walk settings
        on_event: Optional callback invoked once per event

    Returns:
        RunSummary with every event in walk order

    Raises:
        ConfigError: If the root path is invalid (before anything is walked)
    """
    label = ECOSYSTEM_LABELS[config.kind.value]
    events = walk(config)

    logger.info("Cleaning %s projects in: %s", label, sanitize_for_log(config.root))
    if config.dry_run:
        logger.info("Dry run: nothing will be deleted")

    summary = RunSummary(kind=config.kind, root=config.root, dry_run=config.dry_run)

    for event in events:
        summary.events.append(event)
        if on_event is not None:
            on_event(event)

    log_summary(summary)
    return summary
