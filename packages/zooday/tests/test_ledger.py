"""Tests for TourLedger."""
from __future__ import annotations

from zooday.ledger import TourLedger
from zooday.types import Animal, AnimalKind, Role, Tour, Worker

MAYA = Worker("Dr. Maya", Role.DOCTOR, duration=5, start_time=12)
ALEX = Worker("Alex", Role.FEEDER, duration=10, start_time=30)
LION = Animal("Simba", "Lion", AnimalKind.LAND)
EAGLE = Animal("Skye", "Eagle", AnimalKind.FLYING)


def _ledger() -> TourLedger:
    ledger = TourLedger()
    ledger.record(Tour("Land", 12, 10, MAYA, LION, price=30, charged=("A", "B")))
    ledger.record(Tour("Flying", 30, 10, ALEX, EAGLE, price=20, charged=("A",)))
    return ledger


class TestTourLedger:
    def test_empty(self) -> None:
        ledger = TourLedger()
        assert len(ledger) == 0
        assert ledger.tours() == []
        assert ledger.active_at(0) == []
        assert ledger.revenue() == 0

    def test_record_preserves_order(self) -> None:
        ledger = _ledger()
        assert [t.category for t in ledger] == ["Land", "Flying"]
        assert len(ledger) == 2

    def test_active_at(self) -> None:
        ledger = _ledger()
        assert [t.category for t in ledger.active_at(11)] == []
        assert [t.category for t in ledger.active_at(12)] == ["Land"]
        assert [t.category for t in ledger.active_at(21)] == ["Land"]
        assert [t.category for t in ledger.active_at(22)] == []
        assert [t.category for t in ledger.active_at(35)] == ["Flying"]

    def test_tours_returns_copy(self) -> None:
        ledger = _ledger()
        ledger.tours().clear()
        assert len(ledger) == 2

    def test_by_worker(self) -> None:
        ledger = _ledger()
        assert [t.start_time for t in ledger.by_worker("Alex")] == [30]
        assert ledger.by_worker("Nobody") == []

    def test_revenue(self) -> None:
        assert _ledger().revenue() == 30 * 2 + 20 * 1
