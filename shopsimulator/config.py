"""Simulation configuration.

``SimulationConfig`` holds everything needed to set up one run: shop layout,
queue capacity, arrival times and the parameters of the default duration
generators. Invalid values are rejected on construction so a bad setup never
reaches the event loop.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from shopsimulator.distributions import ExponentialValue, ProbabilisticRest, ValueSupplier


@dataclass(frozen=True)
class SimulationConfig:
    num_servers: int = 1
    num_self_checkouts: int = 0
    max_queue: int = 0
    arrival_times: Sequence[float] = field(default_factory=tuple)
    service_time_mean: float = 1.0
    rest_probability: float = 0.0
    rest_time_mean: float = 1.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.num_servers < 0:
            raise ValueError(f"num_servers must be >= 0, got {self.num_servers}")
        if self.num_self_checkouts < 0:
            raise ValueError(f"num_self_checkouts must be >= 0, got {self.num_self_checkouts}")
        if self.num_servers + self.num_self_checkouts == 0:
            raise ValueError("the shop needs at least one server or self-checkout counter")
        if self.max_queue < 0:
            raise ValueError(f"max_queue must be >= 0, got {self.max_queue}")
        if self.service_time_mean <= 0:
            raise ValueError(f"service_time_mean must be > 0, got {self.service_time_mean}")
        if self.rest_time_mean <= 0:
            raise ValueError(f"rest_time_mean must be > 0, got {self.rest_time_mean}")
        if not 0.0 <= self.rest_probability <= 1.0:
            raise ValueError(f"rest_probability must be in [0, 1], got {self.rest_probability}")

        arrivals = tuple(float(t) for t in self.arrival_times)
        for t in arrivals:
            if not math.isfinite(t) or t < 0:
                raise ValueError(f"arrival times must be finite and >= 0, got {t}")
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "arrival_times", arrivals)

    @property
    def num_customers(self) -> int:
        return len(self.arrival_times)

    def build_service_time(self) -> ValueSupplier:
        """Exponential service durations, seeded from ``seed`` when given."""
        return ExponentialValue(self.service_time_mean, rng=random.Random(self.seed))

    def build_rest_time(self) -> ValueSupplier:
        """Rest durations: a break of exponential length with ``rest_probability``.

        Uses its own RNG streams so enabling rest does not shift the service
        time sequence of a seeded run.
        """
        seed = None if self.seed is None else self.seed + 1
        rng = random.Random(seed)
        return ProbabilisticRest(
            self.rest_probability,
            ExponentialValue(self.rest_time_mean, rng=random.Random(rng.getrandbits(64))),
            rng=rng,
        )
