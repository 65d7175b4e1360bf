"""
Pytest configuration and shared fixtures.

Provides fixtures that build small project trees on disk and canned
events and summaries for the display and export tests.
"""

import logging
from pathlib import Path
from typing import Callable, Generator, Iterable

import pytest
from _pytest.logging import LogCaptureFixture

from enums import Action, EcosystemKind
from exceptions import DeletionError, ListingError
from models import MatchEvent, RunSummary


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def disable_logging() -> Generator[None, None, None]:
    """Disable logging during tests to reduce noise."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def caplog_debug(caplog: LogCaptureFixture) -> LogCaptureFixture:
    """Capture DEBUG level logs in tests."""
    caplog.set_level(logging.DEBUG)
    return caplog


# ============================================================================
# Filesystem Tree Fixtures
# ============================================================================

TreeBuilder = Callable[[Iterable[str]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """
    Build a directory tree under tmp_path/root.

    Entries ending in "/" are created as directories, everything else
    as small files (parents created as needed).

    Returns:
        Function taking the entry list and returning the root path
    """
    root = tmp_path / "root"
    root.mkdir()

    def build(entries: Iterable[str]) -> Path:
        for entry in entries:
            path = root / entry.rstrip("/")
            if entry.endswith("/"):
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(f"contents of {entry}\n")
        return root

    return build


@pytest.fixture
def rust_tree(make_tree: TreeBuilder) -> Path:
    """Rust project with a build output directory."""
    return make_tree([
        "proj/Cargo.toml",
        "proj/src/main.rs",
        "proj/target/debug/app",
        "proj/target/release/",
    ])


@pytest.fixture
def mixed_tree(make_tree: TreeBuilder) -> Path:
    """Tree with artifacts of several ecosystems, some nested."""
    return make_tree([
        "web/package.json",
        "web/node_modules/react/index.js",
        "web/packages/ui/node_modules/x/index.js",
        "web/src/app.ts",
        "svc/pyproject.toml",
        "svc/.venv/bin/python",
        "svc/svc/__pycache__/mod.cpython-312.pyc",
        "svc/svc/mod.py",
        "cli/go.mod",
        "cli/bin/cli",
        "cli/pkg/mod/cache/",
        "api/Api.csproj",
        "api/obj/project.assets.json",
        "api/bin/Debug/api.dll",
        "docs/README.md",
    ])


def _snapshot(root: Path) -> dict[str, bytes | None]:
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root).as_posix()
        if path.is_symlink():
            result[relative] = b"-> " + str(path.readlink()).encode()
        elif path.is_dir():
            result[relative] = None
        else:
            result[relative] = path.read_bytes()
    return result


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes | None]]:
    """
    Capture every path under a root with file contents.

    Directories map to None and symlinks to their target, so two
    snapshots compare equal only if the tree is byte-identical.
    """
    return _snapshot


# ============================================================================
# Event Fixtures
# ============================================================================

@pytest.fixture
def sample_events() -> list[MatchEvent]:
    """One event of each kind, including both failure flavours."""
    return [
        MatchEvent(Path("/work"), Action.VISITED),
        MatchEvent(Path("/work/app/target"), Action.DELETED),
        MatchEvent(Path("/work/lib/target"), Action.WOULD_DELETE),
        MatchEvent.failed(
            DeletionError(Path("/work/locked"), PermissionError(13, "Permission denied", "/work/locked"))
        ),
        MatchEvent.failed(
            ListingError(Path("/work/secret"), PermissionError(13, "Permission denied", "/work/secret"))
        ),
    ]


@pytest.fixture
def sample_summary(sample_events: list[MatchEvent]) -> RunSummary:
    """RunSummary for a Rust run holding sample_events."""
    return RunSummary(
        kind=EcosystemKind.RUST,
        root=Path("/work"),
        dry_run=False,
        events=list(sample_events)
    )


@pytest.fixture
def empty_summary() -> RunSummary:
    """RunSummary for a dry run that matched nothing."""
    return RunSummary(kind=EcosystemKind.JAVASCRIPT, root=Path("/work"), dry_run=True)
