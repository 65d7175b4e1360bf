"""
Display and formatting module.

Turns walk events and run summaries into human-readable terminal lines.
Color is presentation only; every line carries a text label as well.
"""

from config import ACTION_LABELS, ECOSYSTEM_LABELS, LISTING_FAILED_LABEL, Colors
from enums import Action
from exceptions import ListingError
from models import MatchEvent, RunSummary


ACTION_COLORS = {
    Action.DELETED: Colors.GREEN,
    Action.WOULD_DELETE: Colors.YELLOW,
    Action.FAILED: Colors.RED,
    Action.VISITED: Colors.DIM,
}


def event_label(event: MatchEvent) -> str:
    """
    Get the line prefix for an event.

    Failed listings and failed deletions get different labels so the user
    can tell an unreadable directory from one that could not be removed.
    """
    if isinstance(event.error, ListingError):
        return LISTING_FAILED_LABEL
    return ACTION_LABELS[event.action.value]


def format_event(event: MatchEvent, use_colors: bool = True) -> str:
    """
    Format one event as an output line.

    Args:
        event: Event to format
        use_colors: Wrap the label in ANSI color codes

    Returns:
        Line such as "Removed: /src/app/target" or
        "Failed to remove: /src/locked (Permission denied)"

    Examples:
        >>> format_event(MatchEvent(Path("/p/target"), Action.DELETED), use_colors=False)
        'Removed: /p/target'
    """
    label = event_label(event)
    line_path = str(event.path)
    suffix = f" ({event.reason})" if event.reason else ""

    if not use_colors:
        return f"{label} {line_path}{suffix}"

    color = ACTION_COLORS[event.action]
    if event.action is Action.VISITED:
        return f"{color}{label} {line_path}{Colors.RESET}"
    return f"{color}{Colors.BOLD}{label}{Colors.RESET} {line_path}{suffix}"


def print_event(event: MatchEvent, use_colors: bool = True) -> None:
    """Print one event line."""
    print(format_event(event, use_colors))


def format_summary(summary: RunSummary, use_colors: bool = True) -> str:
    """
    Format the closing summary line of a run.

    Args:
        summary: Completed run summary
        use_colors: Apply ANSI color codes

    Returns:
        Summary line, e.g. "Removed 3 Rust directories, 1 failed"
    """
    label = ECOSYSTEM_LABELS[summary.kind.value]
    noun = "directory" if summary.matched == 1 else "directories"

    if summary.matched == 0 and summary.failed == 0:
        text = f"No {label} directories found to clean"
    else:
        action = "Would remove" if summary.dry_run else "Removed"
        text = f"{action} {summary.matched} {label} {noun}"
        if summary.failed:
            text += f", {summary.failed} failed"

    if not use_colors:
        return text

    color = Colors.RED if summary.failed else Colors.GREEN
    return f"{color}{text}{Colors.RESET}"


def print_summary(summary: RunSummary, use_colors: bool = True) -> None:
    """Print the closing summary line."""
    print(format_summary(summary, use_colors))
