"""Customer events and their roster transitions.

Every customer produces a short causal chain of events:

    Arrive -> Serve -> Done
    Arrive -> Wait (-> silent Wait ...) -> Serve -> Done
    Arrive -> Leave

Each event is immutable. ``transition(roster)`` is a pure function returning
the follow-up event together with the updated roster. Done and Leave end the
chain by returning a terminal ``Transition``; the engine never reschedules
anything for them.

Events sort by timestamp, then by customer id, so simultaneous events are
always processed in customer order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, NamedTuple

from shopsimulator import queue_manager
from shopsimulator.customer import Customer
from shopsimulator.roster import Roster, get_server, replace_server
from shopsimulator.servers import Server


class Transition(NamedTuple):
    """Result of applying an event to a roster.

    ``event`` is None when the customer's chain has ended.
    """

    event: Event | None
    roster: Roster

    @classmethod
    def terminal(cls, roster: Roster) -> Transition:
        return cls(None, roster)

    @property
    def is_terminal(self) -> bool:
        return self.event is None


@dataclass(frozen=True, eq=False)
class Event:
    """Base class for the five customer events.

    Attributes:
        timestamp: Simulated time the event happens at.
        customer: The customer this event belongs to.
        server: Server the customer is bound to; None before one is assigned.
    """

    kind: ClassVar[str] = "event"

    timestamp: float
    customer: Customer
    server: Server | None = None

    def transition(self, roster: Roster) -> Transition:
        raise NotImplementedError

    def served_count(self) -> int:
        return 0

    def left_count(self) -> int:
        return 0

    def waiting_time(self) -> float:
        return 0.0

    def _prefix(self) -> str:
        return f"{self.timestamp:.3f} {self.customer}"

    def __lt__(self, other: Event) -> bool:
        """
        1. Timestamp (Primary)
        2. Customer id (Secondary - simultaneous events resolve in customer order)
        """
        if self.timestamp != other.timestamp:
            return self.timestamp < other.timestamp
        return self.customer.id < other.customer.id

    def __repr__(self) -> str:
        server = "-" if self.server is None else str(self.server)
        return (
            f"{type(self).__name__}(t={self.timestamp:.3f}, "
            f"customer={self.customer.id}, server={server})"
        )


@dataclass(frozen=True, eq=False, repr=False)
class Arrive(Event):
    kind: ClassVar[str] = "arrive"

    def transition(self, roster: Roster) -> Transition:
        time = self.customer.arrival_time

        serving_id = queue_manager.find_servable(roster, time)
        if serving_id:
            server = get_server(roster, serving_id).update_state(time, False)
            return Transition(
                Serve(time, self.customer, server), replace_server(roster, server)
            )

        queue_id = queue_manager.find_queueable(roster)
        if not queue_id:
            return Transition(Leave(time, self.customer), roster)

        server = get_server(roster, queue_id)
        if server.is_self_checkout:
            roster = queue_manager.bump_self_checkout_queues(roster, +1)
            server = get_server(roster, queue_manager.first_self_checkout(roster))
        else:
            server = server.inc_queue()
            roster = replace_server(roster, server)
        return Transition(Wait(time, self.customer, server), roster)

    def __str__(self) -> str:
        return f"{self._prefix()} arrives"


@dataclass(frozen=True, eq=False, repr=False)
class Serve(Event):
    kind: ClassVar[str] = "serve"

    def transition(self, roster: Roster) -> Transition:
        end_time = self.timestamp + self.customer.service_time
        # Available again from end_time onwards.
        server = get_server(roster, self.server.id).update_state(end_time, True)
        return Transition(
            Done(end_time, self.customer, server), replace_server(roster, server)
        )

    def waiting_time(self) -> float:
        return self.timestamp - self.customer.arrival_time

    def __str__(self) -> str:
        return f"{self._prefix()} serves by {self.server}"


@dataclass(frozen=True, eq=False, repr=False)
class Wait(Event):
    """A customer waiting in a queue.

    The first instance is reported; repeat instances are silent polls that
    move the customer forward to the moment the server may be free.
    """

    kind: ClassVar[str] = "wait"

    first: bool = True

    def transition(self, roster: Roster) -> Transition:
        server = get_server(roster, self.server.id)
        if server.is_self_checkout:
            return self._transition_self_checkout(roster)

        if server.can_serve(self.timestamp):
            server = server.update_state(self.timestamp, False).dec_queue()
            return Transition(
                Serve(self.timestamp, self.customer, server), replace_server(roster, server)
            )
        return Transition(self._poll_again(server), roster)

    def _transition_self_checkout(self, roster: Roster) -> Transition:
        counter_id = queue_manager.first_servable_self_checkout(roster, self.timestamp)
        if counter_id:
            counter = get_server(roster, counter_id).update_state(self.timestamp, False)
            roster = replace_server(roster, counter)
            roster = queue_manager.bump_self_checkout_queues(roster, -1)
            return Transition(
                Serve(self.timestamp, self.customer, get_server(roster, counter_id)), roster
            )

        earliest = get_server(roster, queue_manager.earliest_free_self_checkout(roster))
        return Transition(self._poll_again(earliest), roster)

    def _poll_again(self, server: Server) -> Wait:
        return Wait(server.next_free_at, self.customer, server, first=False)

    def __str__(self) -> str:
        if not self.first:
            return ""
        return f"{self._prefix()} waits at {self.server}"


@dataclass(frozen=True, eq=False, repr=False)
class Done(Event):
    kind: ClassVar[str] = "done"

    def transition(self, roster: Roster) -> Transition:
        server = get_server(roster, self.server.id).add_rest_time()
        return Transition.terminal(replace_server(roster, server))

    def served_count(self) -> int:
        return 1

    def __str__(self) -> str:
        return f"{self._prefix()} done serving by {self.server}"


@dataclass(frozen=True, eq=False, repr=False)
class Leave(Event):
    kind: ClassVar[str] = "leave"

    def transition(self, roster: Roster) -> Transition:
        return Transition.terminal(roster)

    def left_count(self) -> int:
        return 1

    def __str__(self) -> str:
        return f"{self._prefix()} leaves"
