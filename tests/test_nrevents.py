import pytest

from pcfnozzle.attributes import Attribute, Attributes
from pcfnozzle.nrevents import Nrevent, NreventMap


def _event(**values):
    return Nrevent(Attributes(*(Attribute(k, v) for k, v in values.items())))


def test_signature_is_attribute_signature():
    event = _event(a="1", b="2")
    assert event.signature() == event.attributes.signature()


def test_marshal_returns_attributes():
    event = _event(message="hello", index=3)
    assert event.marshal() == {"message": "hello", "index": 3}


def test_harvest_matches_marshal_inside_map():
    store = NreventMap()
    event = _event(message="hello")
    store.put(event)
    assert event.harvest() == event.marshal()


def test_send_without_sender_raises():
    with pytest.raises(RuntimeError):
        _event(a="1").send()


def test_send_calls_sender():
    received = []
    event = _event(a="1")
    event.set_sender(received.append)
    event.send()
    assert received == [event]


def test_map_put_get_len():
    store = NreventMap()
    event = _event(a="x")
    store.put(event)
    assert store.get(event.signature()) is event
    assert store.get("missing") is None
    assert len(store) == 1


def test_map_same_signature_replaces():
    store = NreventMap()
    first = _event(a="x")
    second = _event(a="x")
    store.put(first)
    store.put(second)
    assert len(store) == 1
    assert store.get(first.signature()) is second


def test_map_drain_and_for_each():
    store = NreventMap()
    for value in ("x", "y"):
        store.put(_event(a=value))
    seen = []
    assert store.for_each(lambda e: seen.append(e.marshal()["a"])) == 2
    assert sorted(seen) == ["x", "y"]
    assert len(store.drain()) == 2
    assert len(store) == 0