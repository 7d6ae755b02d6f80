import logging

from core.event_bus import EventBus


def test_publish_calls_subscribers_with_event_type() -> None:
    bus = EventBus()
    seen = []
    bus.subscribe("ROUND_FINISHED", seen.append)
    bus.subscribe("ROUND_FINISHED", seen.append)  # 중복 등록 무시

    payload = {'correct': True}
    bus.publish("ROUND_FINISHED", payload)

    assert seen == [{'correct': True, 'event_type': "ROUND_FINISHED"}]
    assert payload == {'correct': True}


def test_unsubscribe_stops_delivery() -> None:
    bus = EventBus()
    seen = []
    bus.subscribe("FALSE_START", seen.append)
    bus.unsubscribe("FALSE_START", seen.append)
    bus.unsubscribe("UNKNOWN", seen.append)
    bus.publish("FALSE_START")
    assert seen == []


def test_failing_listener_does_not_block_others(caplog) -> None:
    bus = EventBus()
    seen = []

    def broken(data):
        raise ValueError("boom")

    bus.subscribe("STATE_CHANGED", broken)
    bus.subscribe("STATE_CHANGED", seen.append)

    with caplog.at_level(logging.ERROR, logger="reflex"):
        bus.publish("STATE_CHANGED")

    assert len(seen) == 1
    assert "[EVENT] Error in listener for STATE_CHANGED: boom" in caplog.text
