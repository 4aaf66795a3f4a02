from __future__ import annotations

import logging

import pytest

from sqlbridge import Port


class TestPort:
    def test_send_delivers_to_subscriber(self) -> None:
        port: Port[str] = Port("p")
        got: list[str] = []
        port.subscribe(got.append)
        port.send("a")
        assert got == ["a"]

    def test_delivery_in_subscription_order(self) -> None:
        port: Port[int] = Port("p")
        calls: list[str] = []
        port.subscribe(lambda v: calls.append(f"first:{v}"))
        port.subscribe(lambda v: calls.append(f"second:{v}"))
        port.send(1)
        assert calls == ["first:1", "second:1"]

    def test_delivery_is_synchronous(self) -> None:
        port: Port[str] = Port("p")
        got: list[str] = []
        port.subscribe(got.append)
        for value in "abc":
            port.send(value)
            assert got[-1] == value
        assert got == ["a", "b", "c"]

    def test_duplicate_subscribe_ignored(self) -> None:
        port: Port[str] = Port("p")
        got: list[str] = []
        port.subscribe(got.append)
        port.subscribe(got.append)
        assert port.subscriber_count == 1
        port.send("x")
        assert got == ["x"]

    def test_unsubscribe(self) -> None:
        port: Port[str] = Port("p")
        got: list[str] = []
        port.subscribe(got.append)
        port.unsubscribe(got.append)
        port.send("x")
        assert got == []

    def test_unsubscribe_unknown_is_noop(self) -> None:
        port: Port[str] = Port("p")
        port.unsubscribe(print)
        assert port.subscriber_count == 0

    def test_unsubscribe_during_delivery(self) -> None:
        port: Port[str] = Port("p")
        got: list[str] = []

        def once(value: str) -> None:
            got.append(f"once:{value}")
            port.unsubscribe(once)

        port.subscribe(once)
        port.subscribe(got.append)
        port.send("a")
        port.send("b")
        assert got == ["once:a", "a", "b"]

    def test_send_without_subscribers_is_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="sqlbridge.ports")
        Port("lonely").send("x")
        assert "no subscribers" in caplog.text

    def test_repr(self) -> None:
        port: Port[str] = Port("format_sql")
        port.subscribe(print)
        assert repr(port) == "Port('format_sql', subscribers=1)"
