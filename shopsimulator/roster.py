"""The roster: every server in the shop at one instant.

A roster is a plain tuple, index ``i`` holding server id ``i + 1``. Human
servers come first, self-checkout counters after them. Updating a server
builds a new tuple.
"""

from __future__ import annotations

from shopsimulator.distributions import ZERO, Supplier
from shopsimulator.servers import Server

Roster = tuple[Server, ...]


def build_roster(
    num_servers: int,
    num_self_checkouts: int,
    max_queue: int,
    rest_time_supplier: Supplier = ZERO,
) -> Roster:
    """Create the initial roster: human servers ``1..N`` then counters ``N+1..N+K``.

    Raises:
        ValueError: On negative counts, no counters at all, or a negative
            queue capacity.
    """
    if num_servers < 0:
        raise ValueError(f"num_servers must be >= 0, got {num_servers}")
    if num_self_checkouts < 0:
        raise ValueError(f"num_self_checkouts must be >= 0, got {num_self_checkouts}")
    if num_servers + num_self_checkouts == 0:
        raise ValueError("the shop needs at least one server or self-checkout counter")
    if max_queue < 0:
        raise ValueError(f"max_queue must be >= 0, got {max_queue}")

    humans = [Server.human(i, max_queue, rest_time_supplier) for i in range(1, num_servers + 1)]
    counters = [
        Server.self_checkout(num_servers + j, max_queue)
        for j in range(1, num_self_checkouts + 1)
    ]
    return tuple(humans + counters)


def get_server(roster: Roster, server_id: int) -> Server:
    return roster[server_id - 1]


def replace_server(roster: Roster, server: Server) -> Roster:
    index = server.id - 1
    return roster[:index] + (server,) + roster[index + 1:]


def self_checkouts(roster: Roster) -> Roster:
    return tuple(s for s in roster if s.is_self_checkout)


def queue_lengths(roster: Roster) -> tuple[int, ...]:
    return tuple(s.queue_length for s in roster)
