from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from shopsimulator.distributions import Supplier


@dataclass(frozen=True)
class Customer:
    """A shopper arriving at a fixed simulated time.

    The service duration is pulled from ``service_time_supplier`` the first
    time ``service_time`` is read and cached afterwards, so every customer
    gets exactly one service duration for the whole run.
    """

    id: int
    arrival_time: float
    service_time_supplier: Supplier = field(repr=False, compare=False)

    @cached_property
    def service_time(self) -> float:
        return float(self.service_time_supplier())

    @property
    def service_time_drawn(self) -> bool:
        return "service_time" in self.__dict__

    def __str__(self) -> str:
        return str(self.id)
