"""A sink that groups several sinks for the same display."""

from __future__ import annotations

import logging

from ndisplays.sink import Sink, SinkState

_log = logging.getLogger(__name__)

_PASS_THROUGH = (
    "display_name",
    "priority",
    "state",
    "missing_video_codec",
    "missing_audio_codec",
)


class MetaSink(Sink):
    """Groups sinks that reach the same display and forwards to the best one.

    The sink with the highest priority is selected as the current sink;
    its properties are passed through and its change notifications are
    forwarded for properties this object also has.
    """

    PROPERTIES = Sink.PROPERTIES + ("sink", "sinks")

    def __init__(self, sink: Sink | None = None) -> None:
        super().__init__()
        self._sinks: list[Sink] = []
        self._current: Sink | None = None
        if sink is not None:
            self.add_sink(sink)

    @property
    def sink(self) -> Sink | None:
        """The currently selected sink."""
        return self._current

    @sink.setter
    def sink(self, sink: Sink) -> None:
        # Writing adds the sink; it is not necessarily selected.
        self.add_sink(sink)

    @property
    def sinks(self) -> list[Sink]:
        """All sinks grouped into this meta sink."""
        return list(self._sinks)

    @property
    def display_name(self) -> str | None:
        return self._current.display_name if self._current else None

    @property
    def matches(self) -> list[str]:
        result: list[str] = []
        for sink in self._sinks:
            for match in sink.matches:
                if match not in result:
                    result.append(match)
        return result

    @property
    def priority(self) -> int:
        return self._current.priority if self._current else 0

    @property
    def state(self) -> SinkState:
        return self._current.state if self._current else SinkState.DISCONNECTED

    @property
    def missing_video_codec(self) -> list[str] | None:
        return self._current.missing_video_codec if self._current else None

    @property
    def missing_audio_codec(self) -> list[str] | None:
        return self._current.missing_audio_codec if self._current else None

    def _on_child_changed(self, sink: Sink, name: str) -> None:
        if name in self.PROPERTIES:
            self.notify(name)

    def _update(self) -> None:
        best: Sink | None = None
        for sink in self._sinks:
            if best is None or sink.priority > best.priority:
                best = sink
            elif sink.priority == best.priority:
                _log.debug(
                    "MetaSink: Found two sinks with identical priority! "
                    "Preferred order is undefined."
                )

        if best is self._current:
            return

        if self._current is not None:
            self._current.changed.disconnect(self._on_child_changed)
            self._current = None

        if best is not None:
            self._current = best
            best.changed.connect(self._on_child_changed)
        else:
            _log.debug("MetaSink: No usable sink is left, object has become invalid.")

        for name in _PASS_THROUGH:
            self.notify(name)

    def add_sink(self, sink: Sink) -> None:
        """Add ``sink`` to the group; raise ValueError if already present."""
        if any(existing is sink for existing in self._sinks):
            raise ValueError("sink is already part of this meta sink")
        self._sinks.append(sink)
        self._update()
        self.notify("sinks")
        self.notify("matches")

    def remove_sink(self, sink: Sink) -> bool:
        """Remove ``sink``; return True if no sinks are left afterwards."""
        for index, existing in enumerate(self._sinks):
            if existing is sink:
                del self._sinks[index]
                break
        else:
            raise ValueError("sink is not part of this meta sink")
        self._update()
        self.notify("sinks")
        self.notify("matches")
        return not self._sinks

    def start_stream(self) -> Sink | None:
        """Start streaming on the selected sink and return the streaming sink."""
        if self._current is None:
            raise RuntimeError("meta sink has no sink to stream to")
        return self._current.start_stream()

    def stop_stream(self) -> None:
        """Not supported: streams are stopped on the sink that streams."""
        raise RuntimeError("stop_stream must be called on the streaming sink")