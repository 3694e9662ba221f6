import heapq
from collections.abc import Iterable

from shopsimulator.events import Event


class EventHeap:
    def __init__(self, events: Iterable[Event] | None = None):
        """Time-ordered queue of pending events.

        Events are stored directly on the heap; their own ``__lt__`` orders
        them by (timestamp, customer id). The heap also tracks the timestamp
        of the last popped event, and refuses events scheduled before it, so
        simulated time can only move forward.
        """
        self._heap = list(events) if events else []
        heapq.heapify(self._heap)
        self._now = float("-inf")

    @property
    def now(self) -> float:
        """Timestamp of the most recently popped event."""
        return self._now

    def push(self, events: Event | list[Event]):
        """Push an Event or a list of Events onto the heap."""
        if isinstance(events, list):
            for event in events:
                self._push_one(event)
        else:
            self._push_one(events)

    def _push_one(self, event: Event) -> None:
        if event.timestamp < self._now:
            raise RuntimeError(
                f"{event!r} scheduled at {event.timestamp:.3f}, before current time {self._now:.3f}"
            )
        heapq.heappush(self._heap, event)

    def pop(self) -> Event:
        event = heapq.heappop(self._heap)
        self._now = event.timestamp
        return event

    def peek(self) -> Event:
        return self._heap[0]

    def has_events(self) -> bool:
        return bool(self._heap)

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def pending(self) -> list[Event]:
        """Snapshot of the queued events in processing order."""
        return sorted(self._heap)
