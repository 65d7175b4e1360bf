"""
Directory tree walker and pruner.

Walks the tree below WalkConfig.root depth-first with an explicit stack,
deletes (or in a dry run, reports) every directory whose name is in the
active RuleSet, and never descends into a matched directory.

Events are yielded as they happen so callers can render progress on
large trees. Per-directory failures become FAILED events; only an
invalid root raises.

Symlink policy:
    Symlinks are never descended into. A symlink to a directory whose own
    name matches is removed by unlinking the link; its target is untouched.
"""

import os
from pathlib import Path
from typing import Iterator, Optional

from exceptions import ConfigError, DeletionError, ListingError
from logging_config import get_logger
from models import MatchEvent, WalkConfig
from enums import Action
from utils.system import remove_path, sanitize_for_log

logger = get_logger(__name__)


def validate_root(root: Path) -> Path:
    """
    Check that the walk root is an existing directory.

    Args:
        root: Root path from WalkConfig

    Returns:
        Absolute root path

    Raises:
        ConfigError: If root does not exist or is not a directory
    """
    if not root.exists():
        raise ConfigError(f"Root path does not exist: {root}")
    if not root.is_dir():
        raise ConfigError(f"Root path is not a directory: {root}")
    return Path(os.path.abspath(root))


def list_directory(directory: Path) -> list[os.DirEntry]:
    """
    List a directory's entries sorted by name.

    Raises:
        OSError: If the directory cannot be read
    """
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def _directory_entry(entry: os.DirEntry) -> Optional[bool]:
    """
    Classify an entry for the walk.

    Returns:
        None if the entry is not a directory (files, dangling links),
        True if it is a symlink to a directory, False for a real directory
    """
    try:
        if entry.is_dir(follow_symlinks=False):
            return False
        if entry.is_symlink() and entry.is_dir():
            return True
    except OSError as e:
        logger.warning("Cannot stat %s: %s", sanitize_for_log(entry.path), e)
    return None


def _remove(path: Path, dry_run: bool) -> MatchEvent:
    """Act on a matched directory and describe the outcome."""
    if dry_run:
        logger.debug("Would remove %s", sanitize_for_log(path))
        return MatchEvent(path=path, action=Action.WOULD_DELETE)

    try:
        remove_path(path)
    except OSError as e:
        error = DeletionError(path, e)
        logger.error("Failed to remove %s: %s", sanitize_for_log(path), error.reason)
        return MatchEvent.failed(error)

    logger.debug("Removed %s", sanitize_for_log(path))
    return MatchEvent(path=path, action=Action.DELETED)


def _walk(config: WalkConfig, root: Path) -> Iterator[MatchEvent]:
    ruleset = config.ruleset
    stack = [root]

    while stack:
        directory = stack.pop()

        try:
            entries = list_directory(directory)
        except OSError as e:
            error = ListingError(directory, e)
            logger.warning("Cannot read %s: %s", sanitize_for_log(directory), error.reason)
            yield MatchEvent.failed(error)
            continue

        if config.verbose:
            yield MatchEvent(path=directory, action=Action.VISITED)

        sibling_names = [entry.name for entry in entries]
        descend: list[Path] = []

        for entry in entries:
            is_link = _directory_entry(entry)
            if is_link is None:
                continue

            path = Path(entry.path)
            matched = entry.name in ruleset and (
                not config.require_marker
                or ruleset.has_marker(entry.name, sibling_names)
            )

            if matched:
                yield _remove(path, config.dry_run)
            elif is_link:
                logger.debug("Not following symlink %s", sanitize_for_log(path))
            else:
                descend.append(path)

        # Reversed so children are popped in name order
        stack.extend(reversed(descend))


def walk(config: WalkConfig) -> Iterator[MatchEvent]:
    """
    Walk the tree and delete matching directories.

    The root is validated before the iterator is returned, so a bad
    root fails immediately. Everything else is reported lazily.

    Algorithm:
        1. Seed a stack with the root
        2. Pop a directory and list it (failure -> FAILED event, continue)
        3. Each subdirectory whose name is in the RuleSet is deleted
           (or reported in a dry run) and not descended into
        4. Every other real subdirectory is pushed onto the stack
        5. Stop when the stack is empty

    Args:
        config: Walk settings

    Returns:
        Iterator of MatchEvent in walk order

    Raises:
        ConfigError: If the root does not exist or is not a directory
    """
    root = validate_root(config.root)
    logger.debug(
        "Walking %s (dry_run=%s, require_marker=%s, targets=%s)",
        sanitize_for_log(root),
        config.dry_run,
        config.require_marker,
        ", ".join(config.ruleset)
    )
    return _walk(config, root)
