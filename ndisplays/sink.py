"""Sink interface: a display target that can be streamed to."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Callable


class Signal:
    """A list of handlers that are called, in connection order, on emit.

    With ``first_wins`` set, emission stops after the first handler and its
    return value becomes the result of :meth:`emit`.
    """

    def __init__(self, first_wins: bool = False) -> None:
        self.first_wins = first_wins
        self._handlers: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def connect(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``handler`` and return it."""
        self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove ``handler``; raise ValueError if it was never connected."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError(f"handler {handler!r} is not connected") from None

    def emit(self, *args: Any) -> Any:
        """Call the handlers with ``args``.

        Returns the first handler's result in first-wins mode, else None.
        """
        for handler in list(self._handlers):
            result = handler(*args)
            if self.first_wins:
                return result
        return None


class SinkState(enum.IntEnum):
    """Connection state of a sink."""

    DISCONNECTED = 0x0
    WAIT_P2P = 0x100
    WAIT_SOCKET = 0x110
    WAIT_STREAMING = 0x120
    STREAMING = 0x1000
    ERROR = 0x10000


class Sink(ABC):
    """Base class for every sink.

    Properties are read-only and may be overridden by subclasses. When a
    property changes, :meth:`notify` emits :attr:`changed` with its name.
    ``create_source`` and ``create_audio_source`` ask the application for a
    media source; the first connected handler supplies it.
    """

    PROPERTIES: tuple[str, ...] = (
        "display_name",
        "matches",
        "priority",
        "state",
        "missing_video_codec",
        "missing_audio_codec",
    )

    def __init__(self) -> None:
        self.changed = Signal()
        self.create_source = Signal(first_wins=True)
        self.create_audio_source = Signal(first_wins=True)

    @property
    def display_name(self) -> str | None:
        """Name of the sink shown to the user."""
        return None

    @property
    def matches(self) -> list[str]:
        """Strings uniquely identifying the sink, used for de-duplication."""
        return []

    @property
    def priority(self) -> int:
        """De-duplication priority; higher is preferred."""
        return 0

    @property
    def state(self) -> SinkState:
        """Current connection state."""
        return SinkState.DISCONNECTED

    @property
    def missing_video_codec(self) -> list[str] | None:
        """Video encoders of which one is required but none is present."""
        return None

    @property
    def missing_audio_codec(self) -> list[str] | None:
        """Audio encoders of which one is required but none is present."""
        return None

    def notify(self, name: str) -> None:
        """Announce that the property ``name`` has changed."""
        self.changed.emit(self, name)

    @abstractmethod
    def start_stream(self) -> Sink | None:
        """Start streaming; return the sink that actually streams."""

    @abstractmethod
    def stop_stream(self) -> None:
        """Stop any active stream or connection attempt."""