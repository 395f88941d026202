import pytest

from ndisplays.sink import Signal, Sink, SinkState


class PlainSink(Sink):
    def __init__(self):
        super().__init__()
        self.started = 0
        self.stopped = 0

    def start_stream(self):
        self.started += 1
        return self

    def stop_stream(self):
        self.stopped += 1


def test_signal_calls_handlers_in_order():
    signal = Signal()
    calls = []
    signal.connect(lambda x: calls.append(("a", x)))
    signal.connect(lambda x: calls.append(("b", x)))
    signal.emit(5)
    assert calls == [("a", 5), ("b", 5)]


def test_signal_connect_returns_handler_and_disconnect_removes():
    signal = Signal()
    calls = []

    def handler(value):
        calls.append(value)

    assert signal.connect(handler) is handler
    assert handler in signal
    signal.disconnect(handler)
    signal.emit(1)
    assert calls == []
    assert len(signal) == 0


def test_signal_disconnect_unknown_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_signal_emit_without_handlers_returns_none():
    assert Signal().emit() is None
    assert Signal(first_wins=True).emit() is None


def test_signal_first_wins_stops_after_first():
    signal = Signal(first_wins=True)
    calls = []
    signal.connect(lambda: calls.append(1) or "first")
    signal.connect(lambda: calls.append(2) or "second")
    assert signal.emit() == "first"
    assert calls == [1]


def test_sink_state_values():
    assert SinkState(0x0) is SinkState.DISCONNECTED
    assert SinkState(0x1000) is SinkState.STREAMING
    assert SinkState(0x10000) is SinkState.ERROR
    assert SinkState(0x100) < SinkState(0x110) < SinkState(0x120)
    with pytest.raises(ValueError):
        SinkState(0x5)


def test_sink_is_abstract():
    with pytest.raises(TypeError):
        Sink()


def test_sink_default_properties():
    sink = PlainSink()
    assert sink.display_name is None
    assert sink.matches == []
    assert sink.priority == 0
    assert SinkState(sink.state) is SinkState.DISCONNECTED
    assert sink.missing_video_codec is None
    assert sink.missing_audio_codec is None


def test_sink_notify_emits_changed():
    sink = PlainSink()
    seen = []
    Signal.connect(sink.changed, lambda s, name: seen.append((s, name)))
    Sink.notify(sink, "state")
    assert seen == [(sink, "state")]


def test_sink_create_source_first_handler_wins():
    sink = PlainSink()
    Signal.connect(sink.create_source, lambda: "video-src")
    Signal.connect(sink.create_source, lambda: "other")
    Signal.connect(sink.create_audio_source, lambda: "audio-src")
    assert Signal.emit(sink.create_source) == "video-src"
    assert Signal.emit(sink.create_audio_source) == "audio-src"


def test_sink_stream_methods_dispatch_to_subclass():
    sink = PlainSink()
    assert sink.start_stream() is sink
    sink.stop_stream()
    assert (sink.started, sink.stopped) == (1, 1)
    assert SinkState(0) is sink.state


def test_sink_property_names_cover_interface():
    sink = PlainSink()
    seen = []
    Signal.connect(sink.changed, lambda s, name: seen.append(name))
    for name in Sink.PROPERTIES:
        assert hasattr(sink, name)
        Sink.notify(sink, name)
    assert seen == list(Sink.PROPERTIES)
    assert "display_name" in Sink.PROPERTIES