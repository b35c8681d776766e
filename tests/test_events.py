import logging

from skyflap.core.events import Event, EventBus, EventType, score_event, tick_event
from skyflap.core.presentation import Presentation, connect


def test_emit_reaches_subscribers_of_that_type_only():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.SCORE_CHANGED, received.append)

    event = score_event(EventType.SCORE_CHANGED, 3)
    bus.emit(event)
    bus.emit(tick_event(0))

    assert received == [event]
    assert event.data == {"score": 3}


def test_handlers_run_in_subscription_order():
    bus = EventBus()
    order = []
    bus.subscribe(EventType.TICK, lambda e: order.append("first"))
    bus.subscribe(EventType.TICK, lambda e: order.append("second"))
    bus.emit(tick_event(0))
    assert order == ["first", "second"]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.TICK, received.append)
    unsubscribe()
    unsubscribe()
    bus.emit(tick_event(1))
    assert received == []


def test_handler_may_unsubscribe_while_being_called():
    bus = EventBus()
    received = []

    def once(event):
        received.append(event)
        unsubscribe()

    unsubscribe = bus.subscribe(EventType.TICK, once)
    bus.subscribe(EventType.TICK, received.append)
    bus.emit(tick_event(0))
    bus.emit(tick_event(1))
    assert len(received) == 3


def test_failing_handler_is_logged_and_others_still_run(caplog):
    bus = EventBus()
    received = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.TICK, broken)
    bus.subscribe(EventType.TICK, received.append)

    with caplog.at_level(logging.ERROR):
        bus.emit(tick_event(5))

    assert len(received) == 1
    assert "bad handler" in caplog.text


def test_connect_routes_signals(presentation):
    bus = EventBus()
    disconnect = connect(bus, presentation)

    bus.emit(Event(EventType.READY_ENTERED))
    bus.emit(Event(EventType.PLAYING_ENTERED))
    bus.emit(score_event(EventType.SCORE_CHANGED, 1))
    bus.emit(score_event(EventType.GAME_OVER, 1))

    assert presentation.calls == [("ready",), ("playing",), ("score", 1), ("over", 1)]

    disconnect()
    bus.emit(Event(EventType.READY_ENTERED))
    assert len(presentation.calls) == 4


def test_base_presentation_hooks_are_noops():
    bus = EventBus()
    connect(bus, Presentation())
    bus.emit(score_event(EventType.GAME_OVER, 2))
