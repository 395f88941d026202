from ndisplays.provider import Provider
from ndisplays.sink import Sink
from ndisplays.sink_list import SinkList


class FakeSink(Sink):
    def __init__(self, name):
        super().__init__()
        self._name = name

    @property
    def display_name(self):
        return self._name

    def rename(self, name):
        self._name = name
        self.notify("display_name")

    def start_stream(self):
        return self

    def stop_stream(self):
        pass


class FakeProvider(Provider):
    def __init__(self):
        super().__init__()
        self.sinks = []

    def get_sinks(self):
        return list(self.sinks)

    def add(self, sink):
        self.sinks.append(sink)
        self.sink_added.emit(self, sink)

    def remove(self, sink):
        self.sinks.remove(sink)
        self.sink_removed.emit(self, sink)


def test_rows_follow_added_sinks():
    provider = FakeProvider()
    sink_list = SinkList(provider)
    first, second = FakeSink("Living room"), FakeSink("Office")
    provider.add(first)
    provider.add(second)
    assert [row.sink for row in sink_list.rows] == [first, second]
    assert [row.label for row in sink_list.rows] == ["Living room", "Office"]


def test_row_label_tracks_sink_changes():
    provider = FakeProvider()
    sink_list = SinkList(provider)
    sink = FakeSink("old")
    provider.add(sink)
    sink.rename("new")
    assert sink_list.rows[0].label == "new"


def test_removed_sink_drops_its_row():
    provider = FakeProvider()
    sink_list = SinkList(provider)
    keep, drop = FakeSink("keep"), FakeSink("drop")
    provider.add(keep)
    provider.add(drop)
    provider.remove(drop)
    assert [row.sink for row in sink_list.rows] == [keep]
    assert len(drop.changed) == 0


def test_provider_property_and_unset():
    provider = FakeProvider()
    sink_list = SinkList(provider)
    assert sink_list.provider is provider
    sink_list.set_provider(None)
    assert sink_list.provider is None
    provider.add(FakeSink("ignored"))
    assert sink_list.rows == []
    assert len(provider.sink_added) == 0


def test_switching_provider():
    old, new = FakeProvider(), FakeProvider()
    sink_list = SinkList(old)
    sink_list.set_provider(new)
    old.add(FakeSink("old"))
    sink = FakeSink("new")
    new.add(sink)
    assert [row.sink for row in sink_list.rows] == [sink]


def test_existing_sinks_are_not_listed():
    provider = FakeProvider()
    provider.sinks.append(FakeSink("before"))
    sink_list = SinkList(provider)
    assert sink_list.rows == []