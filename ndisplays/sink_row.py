"""A list row showing one sink."""

from __future__ import annotations

from ndisplays.sink import Sink


class SinkRow:
    """Represents a sink in a list and keeps its label up to date."""

    def __init__(self, sink: Sink) -> None:
        if sink is None:
            raise ValueError("a sink row needs a sink")
        self._sink = sink
        self.label = ""
        self._connected = True
        sink.changed.connect(self._on_changed)
        self.sync()

    @property
    def sink(self) -> Sink:
        """The sink this row represents."""
        return self._sink

    def _on_changed(self, sink: Sink, name: str) -> None:
        self.sync()

    def sync(self) -> None:
        """Refresh the label from the sink's display name."""
        self.label = self._sink.display_name or ""

    def close(self) -> None:
        """Stop following changes of the sink."""
        if self._connected:
            self._sink.changed.disconnect(self._on_changed)
            self._connected = False