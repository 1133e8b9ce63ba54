"""Tests for ConflictTable."""
from __future__ import annotations

import pytest
from zooday.conflicts import ConflictTable, default_conflicts
from zooday.types import CategoryKey, ConfigurationError


class TestFromPairs:
    def test_symmetric_by_construction(self) -> None:
        table = ConflictTable.from_pairs([("Land", "Aquatic")])
        assert table.conflicts_with("Land", "Aquatic")
        assert table.conflicts_with("Aquatic", "Land")

    def test_unrelated_categories(self) -> None:
        table = ConflictTable.from_pairs([("Land", "Aquatic")])
        assert not table.conflicts_with("Land", "Flying")
        assert not table.conflicts_with("Flying", "Aquatic")
        assert not table.conflicts_with("Land", "Land")

    def test_unknown_category(self) -> None:
        table = ConflictTable()
        assert not table.conflicts_with("Lion", "Dolphin")

    def test_self_conflict(self) -> None:
        table = ConflictTable.from_pairs([("Land", "Land")])
        assert table.conflicts_with("Land", "Land")

    def test_pairs_listed_once(self) -> None:
        table = ConflictTable.from_pairs(
            [("Land", "Aquatic"), ("Aquatic", "Land"), ("Flying", "Land")]
        )
        assert table.pairs() == [("Aquatic", "Land"), ("Flying", "Land")]
        assert len(table) == 2

    def test_partners(self) -> None:
        table = ConflictTable.from_pairs([("Land", "Aquatic"), ("Land", "Flying")])
        assert table.partners("Land") == frozenset({"Aquatic", "Flying"})
        assert table.partners("Nothing") == frozenset()


class TestFromMapping:
    def test_symmetric_mapping_accepted(self) -> None:
        table = ConflictTable.from_mapping(
            {"Lion": ["Dolphin"], "Dolphin": ["Lion"]}
        )
        assert table.conflicts_with("Lion", "Dolphin")

    def test_asymmetric_mapping_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            ConflictTable.from_mapping({"Lion": ["Dolphin"]})

    def test_asymmetric_mapping_symmetrized(self) -> None:
        table = ConflictTable.from_mapping({"Lion": ["Dolphin"]}, strict=False)
        assert table.conflicts_with("Dolphin", "Lion")


class TestDefaults:
    def test_kind_defaults(self) -> None:
        table = default_conflicts(CategoryKey.KIND)
        assert table.pairs() == [("Aquatic", "Land")]

    def test_species_defaults(self) -> None:
        table = default_conflicts(CategoryKey.SPECIES)
        assert table.pairs() == [("Dolphin", "Lion")]
