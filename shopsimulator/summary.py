"""Results of a simulation run.

``Simulation.run()`` returns a ``SimulationResult`` holding the rendered event
log, the summary statistics and a per-event trace of the queue lengths. The
trace can be exported to a pandas DataFrame for analysis or plotting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from shopsimulator.roster import Roster


@dataclass
class SimulationSummary:
    """Aggregate statistics of one run.

    ``average_wait`` is 0 whenever ``total_wait`` is 0, even if customers
    were served.
    """

    served: int = 0
    left: int = 0
    total_wait: float = 0.0
    events_processed: int = 0
    customers: int = 0

    @property
    def average_wait(self) -> float:
        if self.total_wait > 0:
            return self.total_wait / self.served
        return 0.0

    def __str__(self) -> str:
        return f"[{self.average_wait:.3f} {self.served} {self.left}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_wait": self.average_wait,
            "served": self.served,
            "left": self.left,
            "total_wait": self.total_wait,
            "events_processed": self.events_processed,
            "customers": self.customers,
        }


@dataclass(frozen=True)
class TraceRecord:
    """One processed event and the queue lengths right after it."""

    time: float
    kind: str
    customer_id: int
    server: str | None
    queue_lengths: tuple[int, ...]


@dataclass
class SimulationResult:
    lines: list[str]
    summary: SimulationSummary
    trace: list[TraceRecord] = field(default_factory=list)
    roster: Roster = ()

    def output(self) -> str:
        """Event log followed by the summary line, one entry per line."""
        return "\n".join([*self.lines, str(self.summary)])

    def to_dataframe(self) -> pd.DataFrame:
        """The trace as a DataFrame with one ``queue_<id>`` column per server."""
        queue_columns = [f"queue_{server.id}" for server in self.roster]
        rows = [
            {
                "time": record.time,
                "kind": record.kind,
                "customer_id": record.customer_id,
                "server": record.server,
                **dict(zip(queue_columns, record.queue_lengths)),
            }
            for record in self.trace
        ]
        return pd.DataFrame(rows, columns=["time", "kind", "customer_id", "server", *queue_columns])
