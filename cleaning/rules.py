"""
Rule table lookup.

Maps an EcosystemKind to the immutable RuleSet of directory names that
are safe to delete for that ecosystem. Pure: no I/O, cannot fail.
"""

import fnmatch
from dataclasses import dataclass, field
from functools import cache
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from config import TARGET_DIRECTORIES, PROJECT_MARKERS
from enums import EcosystemKind


@dataclass(frozen=True)
class RuleSet:
    """
    Immutable set of target directory names for one ecosystem selection.

    Attributes:
        kind: Ecosystem the set was built for
        names: Target directory names (exact, case-sensitive)
        markers: Target name -> marker file patterns of every ecosystem
                 that owns the name
    """

    kind: EcosystemKind
    names: frozenset[str]
    markers: Mapping[str, frozenset[str]] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # Read-only view over a private copy; rules_for results are shared
        object.__setattr__(self, "markers", MappingProxyType(dict(self.markers)))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)

    def has_marker(self, name: str, sibling_names: Iterable[str]) -> bool:
        """
        Check whether a directory's parent looks like a project root.

        Args:
            name: Matched directory name
            sibling_names: Names of all entries in the matched directory's parent

        Returns:
            True if any sibling matches a marker pattern for this name
        """
        patterns = self.markers.get(name, frozenset())
        return any(
            fnmatch.fnmatchcase(sibling, pattern)
            for sibling in sibling_names
            for pattern in patterns
        )


def _single_kinds() -> list[EcosystemKind]:
    return [kind for kind in EcosystemKind if kind is not EcosystemKind.ALL]


@cache
def rules_for(kind: EcosystemKind) -> RuleSet:
    """
    Build the RuleSet for an ecosystem.

    ALL is the union of every other ecosystem; names shared between
    ecosystems ("target", "build", "bin") appear once and carry the
    markers of every owner.

    Args:
        kind: Ecosystem selection

    Returns:
        Non-empty RuleSet

    Examples:
        >>> "target" in rules_for(EcosystemKind.RUST)
        True
        >>> "src" in rules_for(EcosystemKind.ALL)
        False
    """
    kinds = _single_kinds() if kind is EcosystemKind.ALL else [kind]

    markers: dict[str, frozenset[str]] = {}
    for member in kinds:
        member_markers = frozenset(PROJECT_MARKERS[member.value])
        for name in TARGET_DIRECTORIES[member.value]:
            markers[name] = markers.get(name, frozenset()) | member_markers

    return RuleSet(kind=kind, names=frozenset(markers), markers=markers)
