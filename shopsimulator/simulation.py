"""The simulation engine.

``Simulation`` owns the event heap and the current roster. Each step pops the
earliest event, applies its transition, schedules the follow-up event (unless
the customer's chain has ended) and folds the event's statistics into the
summary. The loop ends when no events remain, which always happens because
every chain ends in a Done or Leave event.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from shopsimulator.config import SimulationConfig
from shopsimulator.customer import Customer
from shopsimulator.distributions import Supplier
from shopsimulator.event_heap import EventHeap
from shopsimulator.events import Arrive, Event
from shopsimulator.roster import Roster, build_roster, queue_lengths
from shopsimulator.summary import SimulationResult, SimulationSummary, TraceRecord

logger = logging.getLogger(__name__)


def create_arrivals(arrival_times: Iterable[float], service_time: Supplier) -> list[Event]:
    """One Arrive event per arrival time; customer ids follow list order from 1."""
    return [
        Arrive(arrival, Customer(customer_id, arrival, service_time))
        for customer_id, arrival in enumerate(arrival_times, start=1)
    ]


class Simulation:
    def __init__(
        self,
        config: SimulationConfig,
        service_time: Supplier | None = None,
        rest_time: Supplier | None = None,
    ):
        """Set up a run.

        Args:
            config: Shop layout and arrival times.
            service_time: Service duration generator shared by all customers.
                Defaults to ``config.build_service_time()``.
            rest_time: Rest duration generator for human servers. Defaults to
                ``config.build_rest_time()``.
        """
        self._config = config
        self._service_time = service_time if service_time is not None else config.build_service_time()
        self._rest_time = rest_time if rest_time is not None else config.build_rest_time()

        self._roster: Roster = build_roster(
            config.num_servers,
            config.num_self_checkouts,
            config.max_queue,
            self._rest_time,
        )
        self._event_heap = EventHeap(create_arrivals(config.arrival_times, self._service_time))
        self._finished = False

    @property
    def roster(self) -> Roster:
        return self._roster

    def run(self) -> SimulationResult:
        if self._finished:
            raise RuntimeError("Simulation has already run; create a new Simulation to run again")

        summary = SimulationSummary(customers=self._config.num_customers)
        lines: list[str] = []
        trace: list[TraceRecord] = []

        logger.info(
            "Simulation started: %d server(s), %d self-checkout(s), max_queue=%d, %d customer(s)",
            self._config.num_servers,
            self._config.num_self_checkouts,
            self._config.max_queue,
            summary.customers,
        )
        wall_start = time.perf_counter()

        while self._event_heap.has_events():
            # 1. Pop the earliest event
            event = self._event_heap.pop()

            # 2. Apply it to the current roster
            transition = event.transition(self._roster)

            # 3. Schedule the follow-up unless the customer's chain has ended
            if not transition.is_terminal:
                self._event_heap.push(transition.event)

            # 4. Statistics and output
            summary.total_wait += event.waiting_time()
            summary.served += event.served_count()
            summary.left += event.left_count()
            summary.events_processed += 1

            line = str(event)
            if line:
                lines.append(line)
                logger.debug(line)
            else:
                logger.debug("%r polls again", event)

            self._roster = transition.roster
            trace.append(
                TraceRecord(
                    time=event.timestamp,
                    kind=event.kind,
                    customer_id=event.customer.id,
                    server=None if event.server is None else str(event.server),
                    queue_lengths=queue_lengths(self._roster),
                )
            )

        self._finished = True
        logger.info(
            "Simulation finished: %d event(s) in %.3fs wall clock, summary %s",
            summary.events_processed,
            time.perf_counter() - wall_start,
            summary,
        )
        return SimulationResult(lines=lines, summary=summary, trace=trace, roster=self._roster)


def run_simulation(
    config: SimulationConfig,
    service_time: Supplier | None = None,
    rest_time: Supplier | None = None,
) -> SimulationResult:
    return Simulation(config, service_time=service_time, rest_time=rest_time).run()
