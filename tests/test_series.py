"""Tests for engine/series.py — append-only series store."""

from __future__ import annotations

import pytest

from echem_simulator.engine.series import SeriesStore
from echem_simulator.models.results import DataPoint


class TestSeriesStore:
    def test_append_and_snapshot(self):
        store = SeriesStore()
        store.append(DataPoint(x=0.1, y=1.0, time=0.0))
        store.append(DataPoint(x=0.2, y=2.0, time=0.5))
        snapshot = store.snapshot()
        assert isinstance(snapshot, tuple)
        assert [p.y for p in snapshot] == [1.0, 2.0]
        assert len(store) == 2
        assert store.last.y == 2.0

    def test_snapshot_is_stable(self):
        store = SeriesStore()
        store.append(DataPoint(x=0.0, y=0.0, time=0.0))
        snapshot = store.snapshot()
        store.append(DataPoint(x=1.0, y=1.0, time=1.0))
        assert len(snapshot) == 1

    def test_out_of_order_rejected(self):
        store = SeriesStore()
        store.append(DataPoint(x=0.0, y=0.0, time=2.0))
        with pytest.raises(ValueError):
            store.append(DataPoint(x=0.0, y=0.0, time=1.0))
        assert len(store) == 1

    def test_equal_times_allowed(self):
        store = SeriesStore()
        store.append(DataPoint(x=0.0, y=0.0, time=1.0))
        store.append(DataPoint(x=0.1, y=0.0, time=1.0))
        assert len(store) == 2

    def test_version_and_clear(self):
        store = SeriesStore()
        assert store.version == 0
        store.append(DataPoint(x=0.0, y=0.0))
        store.clear()
        assert store.version == 2
        assert store.snapshot() == ()
        assert store.last is None

    def test_points_are_immutable(self):
        point = DataPoint(x=0.0, y=1.0)
        with pytest.raises(Exception):
            point.y = 2.0  # type: ignore[misc]
