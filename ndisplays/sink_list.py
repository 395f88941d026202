"""A list of rows, one for each sink a provider reports."""

from __future__ import annotations

import logging

from ndisplays.provider import Provider
from ndisplays.sink import Sink
from ndisplays.sink_row import SinkRow

_log = logging.getLogger(__name__)


class SinkList:
    """Keeps one :class:`SinkRow` per sink announced by a provider."""

    def __init__(self, provider: Provider | None = None) -> None:
        self._provider: Provider | None = None
        self._rows: list[SinkRow] = []
        self.set_provider(provider)

    @property
    def provider(self) -> Provider | None:
        """The provider that populates the list."""
        return self._provider

    @property
    def rows(self) -> list[SinkRow]:
        """The rows currently in the list, in insertion order."""
        return list(self._rows)

    def _on_sink_added(self, provider: Provider, sink: Sink) -> None:
        _log.debug("SinkList: Adding a sink")
        self._rows.append(SinkRow(sink))

    def _on_sink_removed(self, provider: Provider, sink: Sink) -> None:
        _log.debug("SinkList: Removing a sink")
        kept: list[SinkRow] = []
        for row in self._rows:
            if row.sink is sink:
                row.close()
            else:
                kept.append(row)
        self._rows = kept

    def set_provider(self, provider: Provider | None) -> None:
        """Follow ``provider`` from now on; None stops following any."""
        if self._provider is not None:
            self._provider.sink_added.disconnect(self._on_sink_added)
            self._provider.sink_removed.disconnect(self._on_sink_removed)
            self._provider = None

        if provider is not None:
            self._provider = provider
            provider.sink_added.connect(self._on_sink_added)
            provider.sink_removed.connect(self._on_sink_removed)