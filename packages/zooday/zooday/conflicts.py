"""ConflictTable - which tour categories may not run at the same time."""
from __future__ import annotations

from typing import Iterable, Mapping

from zooday.types import AnimalKind, CategoryKey, ConfigurationError


class ConflictTable:
    """Symmetric relation over category tags (kind values or species)."""

    def __init__(self) -> None:
        self._partners: dict[str, set[str]] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> ConflictTable:
        """Build a table from unordered pairs. Symmetric by construction."""
        table = cls()
        for a, b in pairs:
            table.add(a, b)
        return table

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Iterable[str]], strict: bool = True
    ) -> ConflictTable:
        """Build a table from an adjacency mapping.

        With ``strict`` an entry whose partner does not list it back raises
        ConfigurationError; otherwise the missing direction is added.
        """
        adjacency = {name: set(partners) for name, partners in mapping.items()}
        if strict:
            for name, partners in adjacency.items():
                for partner in partners:
                    if name not in adjacency.get(partner, ()):
                        raise ConfigurationError(
                            f"Conflict table is asymmetric: {name!r} conflicts with "
                            f"{partner!r} but not the other way round"
                        )
        table = cls()
        for name, partners in adjacency.items():
            for partner in partners:
                table.add(name, partner)
        return table

    def add(self, a: str, b: str) -> None:
        self._partners.setdefault(a, set()).add(b)
        self._partners.setdefault(b, set()).add(a)

    def conflicts_with(self, a: str, b: str) -> bool:
        return b in self._partners.get(a, ())

    def partners(self, category: str) -> frozenset[str]:
        return frozenset(self._partners.get(category, ()))

    def pairs(self) -> list[tuple[str, str]]:
        """Each conflicting pair once, sorted."""
        seen: set[tuple[str, str]] = set()
        for a, partners in self._partners.items():
            for b in partners:
                seen.add((a, b) if a <= b else (b, a))
        return sorted(seen)

    def __len__(self) -> int:
        return len(self.pairs())


def default_conflicts(key: CategoryKey) -> ConflictTable:
    """Land and aquatic tours clash; by species, lions and dolphins do."""
    if key is CategoryKey.SPECIES:
        return ConflictTable.from_pairs([("Lion", "Dolphin")])
    return ConflictTable.from_pairs(
        [(AnimalKind.LAND.value, AnimalKind.AQUATIC.value)]
    )
