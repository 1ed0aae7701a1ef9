"""Append-only series store.

The controller is the single writer; renderers and the analysis engine read
immutable snapshots.  Past points are never rewritten, so a snapshot taken
mid-run is always internally consistent.  A lock guards the list so a
multi-threaded host never observes a torn read.
"""

from __future__ import annotations

import threading
from typing import Iterator

from echem_simulator.models.results import DataPoint


class SeriesStore:
    """Ordered, append-only sequence of ``DataPoint``.

    Usage::

        store = SeriesStore()
        store.append(DataPoint(x=0.1, y=2.0, time=0.05))
        points = store.snapshot()   # tuple, safe to hand to readers

    ``version`` increments on every append or clear, so readers can cheaply
    tell whether a cached snapshot is stale.
    """

    def __init__(self) -> None:
        self._points: list[DataPoint] = []
        self._version = 0
        self._lock = threading.Lock()

    # ── Writes (controller only) ────────────────────────────────────────

    def append(self, point: DataPoint) -> None:
        """Append ``point``.  Points must arrive in non-decreasing time order."""
        with self._lock:
            if self._points and point.time is not None:
                last_time = self._points[-1].time
                if last_time is not None and point.time < last_time:
                    raise ValueError(
                        f"Out-of-order point: time {point.time} precedes {last_time}"
                    )
            self._points.append(point)
            self._version += 1

    def clear(self) -> None:
        with self._lock:
            self._points = []
            self._version += 1

    # ── Reads ───────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[DataPoint, ...]:
        with self._lock:
            return tuple(self._points)

    @property
    def version(self) -> int:
        return self._version

    @property
    def last(self) -> DataPoint | None:
        with self._lock:
            return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.snapshot())
