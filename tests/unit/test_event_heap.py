"""Unit tests for EventHeap ordering."""

from __future__ import annotations

import itertools
import random

import pytest

from shopsimulator.customer import Customer
from shopsimulator.event_heap import EventHeap
from shopsimulator.events import Arrive, Leave


def arrive(cid, t):
    return Arrive(t, Customer(cid, t, lambda: 1.0))


class TestOrdering:

    def test_pops_in_time_order(self):
        heap = EventHeap([arrive(1, 3.0), arrive(2, 1.0), arrive(3, 2.0)])

        assert [heap.pop().timestamp for _ in range(3)] == [1.0, 2.0, 3.0]

    def test_ties_resolve_by_customer_id(self):
        events = [arrive(cid, 5.0) for cid in (4, 1, 3, 2)]

        for permutation in itertools.permutations(events):
            heap = EventHeap()
            heap.push(list(permutation))
            assert [heap.pop().customer.id for _ in range(4)] == [1, 2, 3, 4]

    def test_mixed_kinds_at_same_time_follow_customer_id(self):
        leave = Leave(1.0, Customer(1, 1.0, lambda: 1.0))
        later = arrive(2, 1.0)
        heap = EventHeap([later, leave])

        assert heap.pop() is leave

    def test_random_insertion_order_is_stable(self):
        rng = random.Random(7)
        events = [arrive(cid, float(rng.randint(0, 3))) for cid in range(1, 40)]
        expected = sorted(events, key=lambda e: (e.timestamp, e.customer.id))

        shuffled = events[:]
        rng.shuffle(shuffled)
        heap = EventHeap()
        for event in shuffled:
            heap.push(event)

        assert [heap.pop() for _ in range(len(events))] == expected


class TestHeap:

    def test_empty(self):
        heap = EventHeap()

        assert not heap.has_events()
        assert heap.size() == 0
        assert len(heap) == 0

    def test_peek_does_not_remove(self):
        first = arrive(1, 0.0)
        heap = EventHeap([arrive(2, 1.0), first])

        assert heap.peek() is first
        assert heap.size() == 2

    def test_tracks_current_time(self):
        heap = EventHeap([arrive(1, 2.0)])
        heap.pop()

        assert heap.now == 2.0

    def test_rejects_events_in_the_past(self):
        heap = EventHeap([arrive(1, 2.0)])
        heap.pop()

        with pytest.raises(RuntimeError):
            heap.push(arrive(2, 1.0))

    def test_pending_snapshot(self):
        heap = EventHeap([arrive(2, 1.0), arrive(1, 1.0)])

        assert [e.customer.id for e in heap.pending()] == [1, 2]
        assert heap.size() == 2
