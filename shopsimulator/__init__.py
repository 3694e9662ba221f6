"""Discrete event simulation of a shop with human servers and self-checkout counters.

Customers arrive at given times, are served by the first free server or
counter, otherwise join a bounded queue, or leave when every queue is full.

Example:
    from shopsimulator import ConstantValue, SimulationConfig, run_simulation

    config = SimulationConfig(num_servers=1, max_queue=1, arrival_times=[0.0, 0.0])
    result = run_simulation(config, service_time=ConstantValue(2.0), rest_time=ConstantValue(0.0))
    print(result.output())
"""

import logging

from shopsimulator.config import SimulationConfig
from shopsimulator.customer import Customer
from shopsimulator.distributions import (
    ConstantValue,
    ExponentialValue,
    ProbabilisticRest,
    SequenceValues,
    ValueSupplier,
)
from shopsimulator.event_heap import EventHeap
from shopsimulator.events import Arrive, Done, Event, Leave, Serve, Transition, Wait
from shopsimulator.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
)
from shopsimulator.roster import Roster, build_roster
from shopsimulator.servers import Server
from shopsimulator.simulation import Simulation, run_simulation
from shopsimulator.summary import SimulationResult, SimulationSummary, TraceRecord

# Silent unless the application opts in.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Arrive",
    "ConstantValue",
    "Customer",
    "Done",
    "Event",
    "EventHeap",
    "ExponentialValue",
    "Leave",
    "ProbabilisticRest",
    "Roster",
    "SequenceValues",
    "Serve",
    "Server",
    "Simulation",
    "SimulationConfig",
    "SimulationResult",
    "SimulationSummary",
    "TraceRecord",
    "Transition",
    "ValueSupplier",
    "Wait",
    "build_roster",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "run_simulation",
    "set_level",
]
