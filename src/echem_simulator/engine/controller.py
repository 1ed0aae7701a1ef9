"""Simulation controller — explicit tick loop over one technique run.

State machine::

    IDLE ──start()──▶ RUNNING ──progress ≥ 1──▶ COMPLETED
      ▲                  │
      └──stop()/pause()──┘

Each ``tick()``:
  increment = speed × update_interval_ms / (total_simulated_time × 1000)
  progress += increment
  → progress ≥ 1: clamp to exactly 1.0, append the final point, COMPLETED
  → otherwise:    append the point at the new progress

The controller does not own a timer.  An external scheduler (GUI timer,
event loop, test) calls ``tick()`` every ``tick_interval_s`` seconds, or
``run_to_completion()`` drives the loop synchronously.

A series only ever holds points generated under one technique and one
validated parameter set.  Reconfiguring to anything different discards the
series at once; the next ``start()`` then begins a new run (progress zeroed,
RNG re-seeded).  A new run also begins after the previous one completed.
Otherwise ``start()`` resumes a paused run.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, Mapping

import numpy as np

from echem_simulator.analysis.analyzer import analyze
from echem_simulator.config.analysis import AnalysisConfig
from echem_simulator.config.catalog import resolve_technique
from echem_simulator.config.experiment import ExperimentConfig
from echem_simulator.config.run import RunConfig
from echem_simulator.config.technique import TechniqueDescriptor
from echem_simulator.engine.derived import compute_simulation_config
from echem_simulator.engine.models import get_model
from echem_simulator.engine.noise import make_rng
from echem_simulator.engine.parameters import ParameterSet, validate_parameters
from echem_simulator.engine.series import SeriesStore
from echem_simulator.errors import ConfigurationError
from echem_simulator.models.results import AnalysisResult, DataPoint, SimulationConfig

logger = logging.getLogger(__name__)


class SimulationStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"


class SimulationController:
    """Drives one technique model tick by tick into a ``SeriesStore``.

    Usage::

        controller = SimulationController("cv", {"startPotential": -0.5,
                                                 "endPotential": 0.5},
                                          run=RunConfig(random_seed=7))
        controller.start()
        while controller.status is SimulationStatus.RUNNING:
            controller.tick()            # or: controller.run_to_completion()
        result = controller.analyze()

    Parameters
    ----------
    technique : TechniqueDescriptor | str
        Descriptor or registry id.  Unknown ids raise ``UnknownTechniqueError``.
    parameters : Mapping | None
        Raw parameter values, validated against the technique schema.
    run : RunConfig | None
        Tick cadence, speed, noise level, seed and validation policy.
    analysis : AnalysisConfig | None
        Settings used by :meth:`analyze`.
    rng : numpy.random.Generator | None
        Injected noise source.  When given, it is used as-is and never
        re-seeded; otherwise a generator is built from ``run.random_seed``
        at the start of every new run.
    """

    def __init__(
        self,
        technique: TechniqueDescriptor | str = "cv",
        parameters: Mapping[str, Any] | None = None,
        run: RunConfig | None = None,
        analysis: AnalysisConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._run = run or RunConfig()
        self._analysis = analysis or AnalysisConfig()
        self._speed = self._run.speed
        self._injected_rng = rng
        self._rng = rng if rng is not None else make_rng(self._run.random_seed)

        self._store = SeriesStore()
        self._status = SimulationStatus.IDLE
        self._progress = 0.0
        self._sim_config: SimulationConfig | None = None
        self._run_key: tuple | None = None
        self._in_tick = False

        self._technique: TechniqueDescriptor
        self._params: ParameterSet
        self.configure(technique, parameters)

    @classmethod
    def from_experiment(
        cls,
        experiment: ExperimentConfig,
        rng: np.random.Generator | None = None,
    ) -> "SimulationController":
        return cls(
            experiment.technique_id,
            experiment.parameters,
            run=experiment.run,
            analysis=experiment.analysis,
            rng=rng,
        )

    # ── Read-only state ─────────────────────────────────────────────────

    @property
    def status(self) -> SimulationStatus:
        return self._status

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def technique(self) -> TechniqueDescriptor:
        return self._technique

    @property
    def parameters(self) -> ParameterSet:
        return dict(self._params)

    @property
    def simulation_config(self) -> SimulationConfig | None:
        return self._sim_config

    @property
    def elapsed_time(self) -> float:
        if self._sim_config is None:
            return 0.0
        return self._progress * self._sim_config.total_simulated_time

    @property
    def series(self) -> tuple[DataPoint, ...]:
        """Immutable snapshot of the points generated so far."""
        return self._store.snapshot()

    @property
    def store(self) -> SeriesStore:
        return self._store

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def tick_interval_s(self) -> float:
        """Wall-clock period at which the scheduler should call :meth:`tick`."""
        return self._run.update_interval_ms / 1000.0

    # ── Configuration ───────────────────────────────────────────────────

    def configure(
        self,
        technique: TechniqueDescriptor | str,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        """Select technique and parameters.  Invalid input raises immediately.

        A running simulation is stopped first.  If the technique or any
        parameter differs from the current run, the series is discarded so
        that it is never analyzed under a configuration it was not generated
        with.
        """
        descriptor = resolve_technique(technique)
        get_model(descriptor)  # no model → UnknownTechniqueError before any state changes
        params = validate_parameters(descriptor, parameters, policy=self._run.parameter_policy)

        if self._status is SimulationStatus.RUNNING:
            logger.info("Configuration changed during a run; stopping %s", self._technique.id)
            self.stop()

        self._technique = descriptor
        self._params = params

        if self._run_key is not None and self._make_run_key() != self._run_key:
            self._discard_run()

    def set_speed(self, speed: float) -> None:
        if not math.isfinite(speed) or speed <= 0:
            raise ConfigurationError(f"speed must be a positive number, got {speed}")
        self._speed = speed

    # ── Transitions ─────────────────────────────────────────────────────

    def start(self) -> None:
        """IDLE/COMPLETED → RUNNING.  No-op when already running."""
        if self._status is SimulationStatus.RUNNING:
            return

        sim_config = compute_simulation_config(self._technique, self._params, self._run)

        key = self._make_run_key()
        if key != self._run_key or self._status is SimulationStatus.COMPLETED:
            self._begin_new_run(key)
        else:
            logger.info("Resuming %s at progress %.4f", self._technique.id, self._progress)

        self._sim_config = sim_config
        self._status = SimulationStatus.RUNNING

    def stop(self) -> None:
        """RUNNING → IDLE.  The series is kept."""
        if self._status is SimulationStatus.RUNNING:
            self._status = SimulationStatus.IDLE
            logger.info(
                "Stopped %s at progress %.4f (%d points)",
                self._technique.id, self._progress, len(self._store),
            )

    pause = stop

    def reset(self) -> None:
        """Clear the series and zero progress unconditionally."""
        self._store.clear()
        self._progress = 0.0
        self._status = SimulationStatus.IDLE
        self._run_key = None
        self._reseed()
        logger.info("Reset %s", self._technique.id)

    # ── Tick loop ───────────────────────────────────────────────────────

    def tick(self) -> DataPoint | None:
        """Advance one tick.

        Returns the appended point, or ``None`` when not running, when the
        call overlaps another tick, or when the model could not produce a
        finite point this tick.
        """
        if self._status is not SimulationStatus.RUNNING or self._sim_config is None:
            return None
        if self._in_tick:
            logger.warning("Overlapping tick ignored")
            return None

        self._in_tick = True
        try:
            cfg = self._sim_config
            increment = self._speed * cfg.update_interval_ms / (cfg.total_simulated_time * 1000)
            progress = self._progress + increment
            finished = progress >= 1.0
            if finished:
                progress = 1.0
            self._progress = progress

            point = self._generate(progress)
            if point is not None:
                self._store.append(point)

            if finished:
                self._status = SimulationStatus.COMPLETED
                logger.info(
                    "Completed %s: %d points over %.3f s simulated",
                    self._technique.id, len(self._store), cfg.total_simulated_time,
                )
            return point
        finally:
            self._in_tick = False

    def run_to_completion(
        self,
        max_ticks: int | None = None,
        on_point: Callable[[DataPoint], None] | None = None,
    ) -> tuple[DataPoint, ...]:
        """Start (if needed) and tick until the run completes or ``max_ticks`` elapse."""
        if self._status is not SimulationStatus.RUNNING:
            self.start()

        ticks = 0
        while self._status is SimulationStatus.RUNNING:
            if max_ticks is not None and ticks >= max_ticks:
                break
            point = self.tick()
            ticks += 1
            if point is not None and on_point is not None:
                on_point(point)
        return self._store.snapshot()

    # ── Analysis ────────────────────────────────────────────────────────

    def analyze(self) -> AnalysisResult:
        """Analyze the current snapshot.  Safe at any time, including mid-run."""
        return analyze(self._technique, self._store.snapshot(), self._params, self._analysis)

    # ── Internals ───────────────────────────────────────────────────────

    def _make_run_key(self) -> tuple:
        return (self._technique.id,) + tuple(sorted(self._params.items()))

    def _discard_run(self) -> None:
        self._store.clear()
        self._progress = 0.0
        self._status = SimulationStatus.IDLE
        self._sim_config = None
        self._run_key = None
        logger.info("Configuration changed; discarded the previous series")

    def _begin_new_run(self, key: tuple) -> None:
        self._store.clear()
        self._progress = 0.0
        self._run_key = key
        self._reseed()
        logger.info("Starting %s run with %s", self._technique.id, self._params)

    def _reseed(self) -> None:
        if self._injected_rng is None:
            self._rng = make_rng(self._run.random_seed)

    def _generate(self, progress: float) -> DataPoint | None:
        cfg = self._sim_config
        elapsed = progress * cfg.total_simulated_time
        model = get_model(self._technique)
        try:
            point = model(progress, elapsed, self._params, self._rng, cfg.noise_level)
        except (ArithmeticError, ValueError) as exc:
            logger.warning(
                "%s: no point at progress %.4f (%s)", self._technique.id, progress, exc,
            )
            return None

        values = (point.x, point.y, point.z, point.phase, point.time)
        if not all(v is None or math.isfinite(v) for v in values):
            logger.warning(
                "%s: dropped non-finite point at progress %.4f", self._technique.id, progress,
            )
            return None
        return point
