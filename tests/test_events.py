import pytest

from wyvern.errors import BadRequest
from wyvern.events import (
    ChatMessageEvent,
    ChunkLoadEvent,
    EventBus,
    PlayerRespawnEvent,
    ServerTickEvent,
    StopBreakBlockEvent,
)


def test_handler_receives_event():
    bus = EventBus()
    seen = []
    bus.add_handler(ChatMessageEvent, seen.append)
    event = ChatMessageEvent(player="alice", message="hello")
    bus.dispatch(event)
    assert seen == [event]
    assert seen[0].message == "hello"


def test_handlers_run_in_order():
    bus = EventBus()
    calls = []
    bus.add_handler(ServerTickEvent, lambda e: calls.append("first"))
    bus.add_handler(ServerTickEvent, lambda e: calls.append("second"))
    bus.dispatch(ServerTickEvent(server=None))
    assert calls == ["first", "second"]


def test_only_matching_type_is_called():
    bus = EventBus()
    calls = []
    bus.add_handler(ChunkLoadEvent, calls.append)
    bus.dispatch(PlayerRespawnEvent(player="bob"))
    assert calls == []


def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    calls = []

    def failing(event):
        raise BadRequest("bad")

    bus.add_handler(ServerTickEvent, failing)
    bus.add_handler(ServerTickEvent, calls.append)
    event = ServerTickEvent(server=None)
    bus.dispatch(event)
    assert calls == [event]


def test_unknown_event_type_rejected():
    bus = EventBus()
    with pytest.raises(TypeError):
        bus.add_handler(StopBreakBlockEvent, print)
    with pytest.raises(TypeError):
        bus.dispatch(StopBreakBlockEvent(player=None, position=(0, 0, 0)))


def test_non_callable_handler_rejected():
    with pytest.raises(TypeError):
        EventBus().add_handler(ServerTickEvent, "nope")


def test_events_are_immutable():
    event = ChunkLoadEvent(dimension=None, pos=(1, 2))
    with pytest.raises(AttributeError):
        event.pos = (3, 4)
    assert event.pos == (1, 2)


def test_repr_hides_handlers():
    assert repr(EventBus()) == "EventBus(...)"