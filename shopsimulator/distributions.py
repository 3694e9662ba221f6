"""Deferred value generators for service and rest durations.

The engine never asks for a duration until it needs one: a Serve event pulls
the customer's service time, a Done event pulls the server's rest time. Any
zero-argument callable returning a float works; the classes here are the
ready-made ones used by the configuration layer and the CLI.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

Supplier = Callable[[], float]
"""Any zero-argument callable returning a duration in simulated time units."""


class ValueSupplier(ABC):
    """Base class for duration generators.

    Instances are callable, so they can be passed wherever a plain
    ``Supplier`` is expected.
    """

    @abstractmethod
    def sample(self) -> float:
        raise NotImplementedError

    def __call__(self) -> float:
        return self.sample()


class ConstantValue(ValueSupplier):
    def __init__(self, value: float):
        if value < 0:
            raise ValueError(f"value must be >= 0, got {value}")
        self._value = float(value)

    def sample(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantValue({self._value})"


class ExponentialValue(ValueSupplier):
    """Exponentially distributed durations with the given mean."""

    def __init__(self, mean: float, rng: random.Random | None = None):
        if mean <= 0:
            raise ValueError(f"mean must be > 0, got {mean}")
        self._mean = float(mean)
        self._lambda = 1.0 / self._mean
        self._rng = rng or random.Random()

    @property
    def mean(self) -> float:
        return self._mean

    def sample(self) -> float:
        return self._rng.expovariate(self._lambda)

    def __repr__(self) -> str:
        return f"ExponentialValue(mean={self._mean})"


class SequenceValues(ValueSupplier):
    """Replays a fixed list of durations in order.

    Useful for reproducing a recorded run: each call consumes the next value.

    Raises:
        RuntimeError: When more values are requested than were supplied.
    """

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        if any(v < 0 for v in self._values):
            raise ValueError("durations must be >= 0")
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def sample(self) -> float:
        if self._index >= len(self._values):
            raise RuntimeError(f"SequenceValues exhausted after {len(self._values)} values")
        value = self._values[self._index]
        self._index += 1
        return value


class ProbabilisticRest(ValueSupplier):
    """Rest durations for human servers.

    After each customer a server takes a break with the given probability;
    the break length comes from ``rest_time``. Otherwise the rest is 0.
    """

    def __init__(
        self,
        probability: float,
        rest_time: Supplier,
        rng: random.Random | None = None,
    ):
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        self._probability = probability
        self._rest_time = rest_time
        self._rng = rng or random.Random()

    def sample(self) -> float:
        if self._probability > 0.0 and self._rng.random() < self._probability:
            rest = self._rest_time()
            logger.debug("Server rests for %.3f", rest)
            return rest
        return 0.0


ZERO = ConstantValue(0.0)
"""Rest supplier for self-checkout counters, which never rest."""
