"""A provider that merges the sinks of several providers."""

from __future__ import annotations

import logging

from ndisplays.meta_sink import MetaSink
from ndisplays.provider import Provider
from ndisplays.sink import Signal, Sink

_log = logging.getLogger(__name__)


class MetaProvider(Provider):
    """Collects sinks from registered providers and de-duplicates them.

    Sinks of different providers that share a match string are grouped into
    one :class:`MetaSink`. Only meta sinks are announced through
    ``sink_added`` and ``sink_removed``. Changes of ``has_providers`` are
    announced through :attr:`changed` with ``(meta_provider, name)``.
    """

    def __init__(self) -> None:
        self._providers: list[Provider] = []
        self._sinks: list[MetaSink] = []
        self._deduplicate: dict[str, MetaSink] = {}
        self._discover = True
        self.changed = Signal()
        super().__init__()

    @property
    def discover(self) -> bool:
        """Whether discovery is on; setting it updates every provider."""
        return self._discover

    @discover.setter
    def discover(self, value: bool) -> None:
        self._discover = bool(value)
        for provider in self._providers:
            provider.discover = self._discover

    @property
    def has_providers(self) -> bool:
        """True if at least one provider is registered."""
        return bool(self._providers)

    def notify(self, name: str) -> None:
        """Announce that the property ``name`` has changed."""
        self.changed.emit(self, name)

    def _register_matches(self, meta_sink: MetaSink) -> None:
        for match in meta_sink.matches:
            self._deduplicate[match] = meta_sink

    def _on_sink_added(self, provider: Provider, sink: Sink) -> None:
        found: list[MetaSink] = []
        for match in sink.matches:
            meta_sink = self._deduplicate.get(match)
            if meta_sink is not None and all(m is not meta_sink for m in found):
                found.append(meta_sink)

        if len(found) > 1:
            _log.warning(
                "MetaProvider: Found two meta sinks that belong to the same "
                "sink. This should not happen!"
            )

        if found:
            target, *others = found
            for merge_meta in others:
                self._sinks = [m for m in self._sinks if m is not merge_meta]
                self.sink_removed.emit(self, merge_meta)
                while (merge_sink := merge_meta.sink) is not None:
                    merge_meta.remove_sink(merge_sink)
                    target.add_sink(merge_sink)
            target.add_sink(sink)
        else:
            target = MetaSink(sink)
            self._sinks.append(target)
            self.sink_added.emit(self, target)

        self._register_matches(target)

    def _on_sink_removed(self, provider: Provider, sink: Sink) -> None:
        meta_sink: MetaSink | None = None
        for match in sink.matches:
            if meta_sink is None:
                meta_sink = self._deduplicate.get(match)
            self._deduplicate.pop(match, None)

        if meta_sink is None:
            raise LookupError("no meta sink holds the removed sink")

        if meta_sink.remove_sink(sink):
            self._sinks = [m for m in self._sinks if m is not meta_sink]
            self.sink_removed.emit(self, meta_sink)
            return

        # Too many matches were dropped above; restore those still in use.
        self._register_matches(meta_sink)

    def get_sinks(self) -> list[Sink]:
        """Return the meta sinks, most recently added first."""
        return list(reversed(self._sinks))

    def get_providers(self) -> list[Provider]:
        """Return the registered providers, most recently added first."""
        return list(reversed(self._providers))

    def add_provider(self, provider: Provider) -> None:
        """Register ``provider`` and take over the sinks it already has."""
        if provider is None:
            raise ValueError("provider must not be None")
        if any(existing is provider for existing in self._providers):
            raise ValueError("provider is already registered")

        self._providers.append(provider)
        provider.sink_added.connect(self._on_sink_added)
        provider.sink_removed.connect(self._on_sink_removed)

        provider.discover = self._discover

        for sink in provider.get_sinks():
            self._on_sink_added(provider, sink)

        self.notify("has_providers")

    def remove_provider(self, provider: Provider) -> None:
        """Unregister ``provider`` and drop the sinks it contributed."""
        if provider is None:
            raise ValueError("provider must not be None")
        if all(existing is not provider for existing in self._providers):
            raise ValueError("provider is not registered")

        provider.sink_added.disconnect(self._on_sink_added)
        provider.sink_removed.disconnect(self._on_sink_removed)

        for sink in provider.get_sinks():
            self._on_sink_removed(provider, sink)

        self._providers = [p for p in self._providers if p is not provider]
        self.notify("has_providers")