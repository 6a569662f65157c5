# MIT License (see LICENSE)
"""
External input buffering.

Pointer movement, button commands and viewport changes arrive whenever the
host UI delivers them. None of them touches the simulation directly:

- PointerInput is a latest-value cell. Any number of moves between two
  ticks collapse into one snapshot (last writer wins).
- EventQueue collects discrete events in arrival order. The scene drains it
  at the start of each tick, so every tick sees a consistent input state.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Union

from .types import PointerState


class PointerInput:
    """
    Mutable pointer state written by the host, snapshotted by the scene.

    Moving the pointer activates it; release deactivates it until the next
    move or press.
    """

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.active = False

    def move(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.active = True

    def press(self) -> None:
        self.active = True

    def release(self) -> None:
        self.active = False

    def snapshot(self) -> PointerState:
        """Immutable copy of the current state."""
        return PointerState(self.x, self.y, self.active)


# =============================================================================
# Events
# =============================================================================

@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class PointerPressed:
    pass


@dataclass(frozen=True)
class PointerReleased:
    pass


@dataclass(frozen=True)
class OpenCommand:
    pass


@dataclass(frozen=True)
class CloseCommand:
    pass


@dataclass(frozen=True)
class ViewportResized:
    width: float
    height: float


Event = Union[PointerMoved, PointerPressed, PointerReleased, OpenCommand, CloseCommand, ViewportResized]

EVENT_TYPES = (PointerMoved, PointerPressed, PointerReleased, OpenCommand, CloseCommand, ViewportResized)


class EventQueue:
    """
    FIFO buffer of input events.

    Example:
        queue = EventQueue()
        queue.post(PointerMoved(120, 40))
        queue.post(OpenCommand())
        for event in queue.drain():
            ...
    """

    def __init__(self) -> None:
        self._events: deque[Event] = deque()

    def post(self, event: Event) -> None:
        """
        Append an event.

        Raises:
            TypeError: If `event` is not one of the known event types.
        """
        if not isinstance(event, EVENT_TYPES):
            raise TypeError(f"Unknown event type: {type(event).__name__}")
        self._events.append(event)

    def drain(self) -> Iterator[Event]:
        """Yield and remove events in arrival order."""
        while self._events:
            yield self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)
