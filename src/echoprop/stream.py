"""Push-based replay stream — the broadcast channel behind every EchoProp.

A single producer emits values; any number of subscribers receive them in
subscription order. The last N emitted values are kept in a ring buffer and
replayed to each new subscriber before live delivery begins.
complete() ends the stream: subscribers get their completion callback once,
later emits are dropped.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Disposer = Callable[[], None]


def _noop() -> None:
    pass


class _Subscriber(Generic[T]):
    __slots__ = ("on_next", "on_complete", "active")

    def __init__(
        self,
        on_next: Callable[[T], None],
        on_complete: Callable[[], None] | None,
    ) -> None:
        self.on_next = on_next
        self.on_complete = on_complete
        self.active = True


class ReplayStream(Generic[T]):
    """Broadcast stream that replays its last ``replay_count`` values."""

    def __init__(self, replay_count: int = 1) -> None:
        self._buffer: deque[T] = deque(maxlen=replay_count)
        self._subscribers: list[_Subscriber[T]] = []
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def replay_count(self) -> int:
        return self._buffer.maxlen

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def history(self) -> list[T]:
        """Snapshot of the replay buffer, oldest first."""
        return list(self._buffer)

    def emit(self, value: T) -> None:
        """Record value in the buffer and push it to all subscribers."""
        if self._completed:
            return
        self._buffer.append(value)
        # Snapshot: callbacks may subscribe, unsubscribe or emit again.
        for sub in list(self._subscribers):
            if sub.active:
                sub.on_next(value)

    def subscribe(
        self,
        on_next: Callable[[T], None],
        on_complete: Callable[[], None] | None = None,
    ) -> Disposer:
        """Register callbacks and replay the buffer. Returns an unsubscriber."""
        sub = _Subscriber(on_next, on_complete)
        replay = list(self._buffer)

        if self._completed:
            for value in replay:
                on_next(value)
            if on_complete is not None:
                on_complete()
            return _noop

        self._subscribers.append(sub)
        for value in replay:
            if not sub.active:
                break
            on_next(value)

        def _unsubscribe() -> None:
            sub.active = False
            try:
                self._subscribers.remove(sub)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def complete(self) -> None:
        """End the stream. Subscribers are notified once and dropped."""
        if self._completed:
            return
        self._completed = True
        subscribers, self._subscribers = self._subscribers, []
        for sub in subscribers:
            sub.active = False
            if sub.on_complete is not None:
                sub.on_complete()

    def as_view(self) -> StreamView[T]:
        return StreamView(self)

    def __repr__(self) -> str:
        state = "completed" if self._completed else f"{len(self._subscribers)} subscribers"
        return f"ReplayStream(replay={self.replay_count}, {state})"


class StreamView(Generic[T]):
    """Read-only face of a ReplayStream: subscribe, never emit."""

    __slots__ = ("_stream",)

    def __init__(self, stream: ReplayStream[T]) -> None:
        self._stream = stream

    @property
    def completed(self) -> bool:
        return self._stream.completed

    def subscribe(
        self,
        on_next: Callable[[T], None],
        on_complete: Callable[[], None] | None = None,
    ) -> Disposer:
        return self._stream.subscribe(on_next, on_complete)

    def __repr__(self) -> str:
        return f"StreamView({self._stream!r})"
