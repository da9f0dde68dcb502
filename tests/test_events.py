import logging

from webmcp.events import ANY, TOOL_CALL, Event, ToolCallEvent


def test_delivery_is_synchronous_and_ordered(channel):
    seen = []
    channel.subscribe("ping", lambda event: seen.append(("first", event.detail["n"])))
    channel.subscribe("ping", lambda event: seen.append(("second", event.detail["n"])))

    channel.emit("ping", n=1)

    assert seen == [("first", 1), ("second", 1)]


def test_wildcard_and_typed_listeners_share_subscription_order(channel):
    seen = []
    channel.subscribe("ping", lambda event: seen.append("typed-1"))
    channel.subscribe(ANY, lambda event: seen.append("any"))
    channel.subscribe("ping", lambda event: seen.append("typed-2"))

    channel.emit("ping")
    channel.emit("other")

    assert seen == ["typed-1", "any", "typed-2", "any"]
    assert channel.listener_count("ping") == 2
    assert channel.listener_count() == 3


def test_unsubscribe(channel):
    seen = []
    unsubscribe = channel.subscribe("ping", seen.append)

    assert unsubscribe() is True
    assert unsubscribe() is False
    channel.emit("ping")

    assert seen == []
    assert channel.listener_count("ping") == 0


def test_raising_listener_is_reported_not_propagated(channel, caplog):
    seen = []

    def broken(event):
        raise RuntimeError("listener blew up")

    channel.subscribe("ping", broken)
    channel.subscribe("ping", seen.append)

    with caplog.at_level(logging.ERROR, logger="webmcp.events"):
        event = channel.emit("ping")

    assert seen == [event]
    assert "listener blew up" in caplog.text


def test_prevent_default_ignored_on_plain_event():
    event = Event(type="ping")
    event.prevent_default()
    assert event.default_prevented is False


def test_tool_call_event_first_response_wins():
    event = ToolCallEvent(detail={"name": "echo", "parameters": {}, "agentId": "a"})
    assert event.type == TOOL_CALL
    assert event.cancelable is True
    assert event.response is None
    assert event.has_response is False

    event.prevent_default()
    assert event.respond_with("first") is True
    assert event.respond_with("second") is False

    assert event.default_prevented is True
    assert event.response == "first"
    assert (event.name, event.agent_id) == ("echo", "a")


def test_tool_call_event_ignores_response_before_claim():
    event = ToolCallEvent(detail={"name": "echo", "parameters": {}, "agentId": "a"})

    assert event.respond_with("draft") is False
    assert event.has_response is False

    event.prevent_default()
    assert event.respond_with("final") is True
    assert event.response == "final"
