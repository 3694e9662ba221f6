"""Queue coordination over a roster.

Stateless helpers used by the event transitions. All lookups scan the roster
in order (human servers first, then self-checkout counters, ascending id) and
return a server id, with 0 meaning "none".

Self-checkout counters share a single physical queue, so a change to the
queue count of one counter is applied to every counter at once.
"""

from __future__ import annotations

from shopsimulator.roster import Roster


def find_servable(roster: Roster, time: float) -> int:
    for server in roster:
        if server.can_serve(time):
            return server.id
    return 0


def find_queueable(roster: Roster) -> int:
    for server in roster:
        if server.can_queue():
            return server.id
    return 0


def first_self_checkout(roster: Roster) -> int:
    for server in roster:
        if server.is_self_checkout:
            return server.id
    return 0


def first_servable_self_checkout(roster: Roster, time: float) -> int:
    for server in roster:
        if server.is_self_checkout and server.can_serve(time):
            return server.id
    return 0


def earliest_free_self_checkout(roster: Roster) -> int:
    """Return the counter with the smallest ``next_free_at``.

    Ties go to the lowest id.
    """
    earliest = None
    for server in roster:
        if not server.is_self_checkout:
            continue
        if earliest is None or server.next_free_at < earliest.next_free_at:
            earliest = server
    return earliest.id if earliest is not None else 0


def bump_self_checkout_queues(roster: Roster, delta: int) -> Roster:
    """Grow (``+1``) or shrink (``-1``) the shared self-checkout queue.

    Human servers are returned untouched.
    """
    if delta == 1:
        return tuple(s.inc_queue() if s.is_self_checkout else s for s in roster)
    if delta == -1:
        return tuple(s.dec_queue() if s.is_self_checkout else s for s in roster)
    raise ValueError(f"delta must be +1 or -1, got {delta}")
