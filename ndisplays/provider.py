"""Provider interface: a source of discovered sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ndisplays.sink import Signal, Sink


class Provider(ABC):
    """Base class for objects that discover sinks.

    ``sink_added`` and ``sink_removed`` are emitted with ``(provider, sink)``.
    ``discover`` tells whether discovery is turned on; it defaults to True.
    """

    def __init__(self) -> None:
        self.sink_added = Signal()
        self.sink_removed = Signal()
        self.discover = True

    @abstractmethod
    def get_sinks(self) -> list[Sink]:
        """Return a new list of all sinks known to the provider."""