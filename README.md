# ndisplays

`ndisplays` models the moving parts of a network display (screencast)
application in plain Python: the displays you can stream to (sinks), the
objects that discover them (providers), the merging of sinks that describe
the same display, the rows that show them to a user, and hints about
missing encoder elements. It has no dependencies outside the standard
library.

## Modules

- `ndisplays.sink`
  - `Signal` — a list of handlers. `connect(handler)` registers and returns
    the handler, `disconnect(handler)` removes it (raising `ValueError` if it
    was never connected), `emit(*args)` calls the handlers in connection
    order. A `Signal(first_wins=True)` stops after the first handler and
    returns its result.
  - `SinkState` — an `IntEnum`: `DISCONNECTED`, `WAIT_P2P`, `WAIT_SOCKET`,
    `WAIT_STREAMING`, `STREAMING`, `ERROR`.
  - `Sink` — abstract base class. Read-only properties `display_name`,
    `matches`, `priority`, `state`, `missing_video_codec` and
    `missing_audio_codec` (defaults: `None`, `[]`, `0`, `DISCONNECTED`,
    `None`, `None`), meant to be overridden. `notify(name)` emits the
    `changed` signal with `(sink, name)`. `create_source` and
    `create_audio_source` are first-wins signals. Subclasses implement
    `start_stream()` and `stop_stream()`.
- `ndisplays.provider`
  - `Provider` — abstract base class with `sink_added` and `sink_removed`
    signals (emitted with `(provider, sink)`), a `discover` attribute that
    starts as `True`, and an abstract `get_sinks()`.
- `ndisplays.meta_sink`
  - `MetaSink(sink=None)` — a `Sink` grouping several sinks. The one with
    the highest priority becomes `sink` (the current sink); `display_name`,
    `priority`, `state` and the missing-codec properties are read from it,
    and its change notifications are forwarded. `matches` is the union of
    all grouped sinks' matches, in order, without repeats; `sinks` lists all
    grouped sinks. `add_sink(sink)` raises `ValueError` for a sink already
    present; `remove_sink(sink)` raises `ValueError` for an unknown sink and
    returns `True` when the group is left empty. `start_stream()` delegates
    to the current sink (`RuntimeError` if there is none); `stop_stream()`
    always raises `RuntimeError`, as streams are stopped on the sink that
    streams.
- `ndisplays.meta_provider`
  - `MetaProvider` — a `Provider` combining any number of providers.
    Sinks that share a match string are merged into one `MetaSink`; only
    meta sinks are announced on `sink_added` / `sink_removed`.
    `add_provider(provider)` takes over the sinks the provider already has
    and copies `discover` to it; `remove_provider(provider)` drops them
    again. Both raise `ValueError` for `None`, and for a provider already
    registered or not registered. Setting `discover` updates every
    registered provider. `has_providers` tells whether any are registered;
    its changes are announced on `changed` with `(meta_provider, name)`.
    `get_sinks()` and `get_providers()` return the most recently added
    first.
- `ndisplays.sink_row`
  - `SinkRow(sink)` — holds a `label` kept equal to the sink's
    `display_name` (or `""`) whenever the sink notifies a change. `sync()`
    refreshes it by hand; `close()` stops following the sink.
- `ndisplays.sink_list`
  - `SinkList(provider=None)` — keeps one `SinkRow` per sink announced by
    its provider, in `rows`. `set_provider(provider)` switches to another
    provider, or stops following any with `None`.
- `ndisplays.codec_install`
  - `describe_codec(codec)` — a readable description of an encoder
    element, e.g. `"GStreamer x264 video encoder (x264enc)"`; unknown names
    give `"GStreamer Element “name”"`.
  - `CodecEntry(codec, description)` — frozen dataclass;
    `CodecEntry.for_codec(codec)` fills in the description, and `resource`
    gives the installer resource string
    `"<description>|gstreamer1(element-<codec>)()(<N>bit)"`.
  - `CodecInstall(codecs=None, title=DEFAULT_TITLE)` — setting `codecs`
    rebuilds `entries` and sets `revealed` to whether there are any.
    `activate(entry_or_codec)` emits `install_requested` with
    `(codec_install, entry, APPLICATION_ID)` and returns the entry, or
    raises `KeyError` for a codec that is not listed.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Example

```python
from ndisplays.meta_provider import MetaProvider
from ndisplays.provider import Provider
from ndisplays.sink import Sink
from ndisplays.sink_list import SinkList


class StaticSink(Sink):
    def __init__(self, name, matches, priority=0):
        super().__init__()
        self._name = name
        self._matches = list(matches)
        self._priority = priority

    @property
    def display_name(self):
        return self._name

    @property
    def matches(self):
        return list(self._matches)

    @property
    def priority(self):
        return self._priority

    def start_stream(self):
        return self

    def stop_stream(self):
        pass


class StaticProvider(Provider):
    def __init__(self, sinks):
        super().__init__()
        self._sinks = list(sinks)

    def get_sinks(self):
        return list(self._sinks)


meta = MetaProvider()
sink_list = SinkList(meta)

meta.add_provider(StaticProvider([StaticSink("Living room", ["tv-1"])]))
meta.add_provider(StaticProvider([StaticSink("Living room (P2P)", ["tv-1", "p2p-1"], 10)]))

(merged,) = meta.get_sinks()
print(merged.display_name)          # Living room (P2P)
print(merged.matches)               # ['tv-1', 'p2p-1']
print(sink_list.rows[0].label)      # Living room (P2P)
```

## What this package does not do

It contains no concrete sinks or providers: nothing here discovers
displays on a network or streams video or audio to them. `Sink` and
`Provider` are the bases such code would build on. `SinkRow`, `SinkList`
and `CodecInstall` hold state only and draw nothing on screen, and
`CodecInstall` installs nothing itself — it only emits `install_requested`
for whoever connects to it. There is no command-line program.