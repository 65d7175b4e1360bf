"""Tests for display.py - event and summary formatting."""

from pathlib import Path

import pytest
from _pytest.capture import CaptureFixture

from config import Colors
from enums import Action, EcosystemKind
from exceptions import DeletionError, ListingError
from models import MatchEvent, RunSummary


class TestEventLabel:
    """Test event_label."""

    def test_action_labels(self) -> None:
        """Test labels for successful actions."""
        from display import event_label

        assert event_label(MatchEvent(Path("/a"), Action.DELETED)) == "Removed:"
        assert event_label(MatchEvent(Path("/a"), Action.WOULD_DELETE)) == "Would remove:"
        assert event_label(MatchEvent(Path("/a"), Action.VISITED)) == "Visited:"

    def test_failure_labels(self) -> None:
        """Test listing and deletion failures are told apart."""
        from display import event_label

        cause = PermissionError(13, "Permission denied", "/a")
        deletion = MatchEvent.failed(DeletionError(Path("/a"), cause))
        listing = MatchEvent.failed(ListingError(Path("/a"), cause))

        assert event_label(deletion) == "Failed to remove:"
        assert event_label(listing) == "Failed to read:"


class TestFormatEvent:
    """Test format_event."""

    def test_plain_deleted(self) -> None:
        """Test an uncolored removal line."""
        from display import format_event

        line = format_event(MatchEvent(Path("/w/app/target"), Action.DELETED), use_colors=False)

        assert line == "Removed: /w/app/target"

    def test_plain_would_delete(self) -> None:
        """Test an uncolored dry-run line."""
        from display import format_event

        line = format_event(MatchEvent(Path("/w/node_modules"), Action.WOULD_DELETE), use_colors=False)

        assert line == "Would remove: /w/node_modules"

    def test_plain_failed_includes_reason(self, sample_events: list[MatchEvent]) -> None:
        """Test failure lines carry the reason."""
        from display import format_event

        line = format_event(sample_events[3], use_colors=False)

        assert line == "Failed to remove: /work/locked (Permission denied)"

    def test_colored_lines(self, sample_events: list[MatchEvent]) -> None:
        """Test each action gets its color and a reset."""
        from display import format_event

        visited, deleted, would, failed, _ = sample_events

        assert format_event(deleted).startswith(Colors.GREEN)
        assert format_event(would).startswith(Colors.YELLOW)
        assert format_event(failed).startswith(Colors.RED)
        assert format_event(visited).startswith(Colors.DIM)
        for event in sample_events:
            assert Colors.RESET in format_event(event)

    def test_colored_line_keeps_text(self) -> None:
        """Test colored output still contains label and path."""
        from display import format_event

        line = format_event(MatchEvent(Path("/w/obj"), Action.DELETED))

        assert "Removed:" in line
        assert line.endswith(" /w/obj")

    @pytest.mark.parametrize("action", list(Action))
    def test_no_escape_codes_without_color(self, action: Action) -> None:
        """Test --no-color output has no ANSI sequences."""
        from display import format_event

        assert "\033[" not in format_event(MatchEvent(Path("/x"), action), use_colors=False)


class TestPrintEvent:
    """Test print_event."""

    def test_prints_line(self, capsys: CaptureFixture[str]) -> None:
        """Test one line is printed to stdout."""
        from display import print_event

        print_event(MatchEvent(Path("/w/bin"), Action.WOULD_DELETE), use_colors=False)

        assert capsys.readouterr().out == "Would remove: /w/bin\n"


class TestFormatSummary:
    """Test format_summary."""

    def test_nothing_found(self, empty_summary: RunSummary) -> None:
        """Test the no-match summary."""
        from display import format_summary

        assert format_summary(empty_summary, use_colors=False) == (
            "No JavaScript/TypeScript directories found to clean"
        )

    def test_removed_with_failures(self, sample_summary: RunSummary) -> None:
        """Test counts and failure suffix."""
        from display import format_summary

        assert format_summary(sample_summary, use_colors=False) == "Removed 2 Rust directories, 2 failed"

    def test_singular_dry_run(self) -> None:
        """Test singular wording in a dry run."""
        from display import format_summary

        summary = RunSummary(
            kind=EcosystemKind.GO,
            root=Path("/w"),
            dry_run=True,
            events=[MatchEvent(Path("/w/bin"), Action.WOULD_DELETE)]
        )

        assert format_summary(summary, use_colors=False) == "Would remove 1 Go directory"

    def test_colors(self, sample_summary: RunSummary, empty_summary: RunSummary) -> None:
        """Test red with failures, green otherwise."""
        from display import format_summary

        assert format_summary(sample_summary).startswith(Colors.RED)
        assert format_summary(empty_summary).startswith(Colors.GREEN)

    def test_print_summary(self, empty_summary: RunSummary, capsys: CaptureFixture[str]) -> None:
        """Test the summary is printed."""
        from display import print_summary

        print_summary(empty_summary, use_colors=False)

        assert "No JavaScript/TypeScript directories found" in capsys.readouterr().out
