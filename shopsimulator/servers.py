"""Human servers and self-checkout counters.

Both kinds share one immutable record. Every state change returns a new
``Server``; the engine swaps it into a fresh roster.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from shopsimulator.distributions import ZERO, Supplier


@dataclass(frozen=True)
class Server:
    """One counter in the shop.

    Attributes:
        id: 1-based position in the roster.
        next_free_at: Earliest time the server may start a new customer.
        max_queue: Queue capacity.
        queue_length: Customers currently waiting for this server.
        available: False while the server is serving.
        rest_time_supplier: Pulled once per completed customer.
        is_self_checkout: True for self-checkout counters.
    """

    id: int
    next_free_at: float = 0.0
    max_queue: int = 0
    queue_length: int = 0
    available: bool = True
    rest_time_supplier: Supplier = field(default=ZERO, repr=False, compare=False)
    is_self_checkout: bool = False

    @classmethod
    def human(cls, id: int, max_queue: int, rest_time_supplier: Supplier = ZERO) -> Server:
        return cls(id=id, max_queue=max_queue, rest_time_supplier=rest_time_supplier)

    @classmethod
    def self_checkout(cls, id: int, max_queue: int) -> Server:
        return cls(id=id, max_queue=max_queue, rest_time_supplier=ZERO, is_self_checkout=True)

    def can_serve(self, time: float) -> bool:
        return self.available and time >= self.next_free_at

    def can_queue(self) -> bool:
        return self.queue_length < self.max_queue

    def update_state(self, time: float, available: bool) -> Server:
        return replace(self, next_free_at=time, available=available)

    def inc_queue(self) -> Server:
        if self.queue_length >= self.max_queue:
            raise RuntimeError(
                f"Server {self}: queue already full ({self.queue_length}/{self.max_queue})"
            )
        return replace(self, queue_length=self.queue_length + 1)

    def dec_queue(self) -> Server:
        if self.queue_length <= 0:
            raise RuntimeError(f"Server {self}: queue already empty")
        return replace(self, queue_length=self.queue_length - 1)

    def add_rest_time(self) -> Server:
        """Push ``next_free_at`` back by one draw of the rest supplier."""
        return self.update_state(self.next_free_at + self.rest_time_supplier(), self.available)

    def __str__(self) -> str:
        if self.is_self_checkout:
            return f"self-check {self.id}"
        return str(self.id)
