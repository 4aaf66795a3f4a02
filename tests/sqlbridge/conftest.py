from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sqlbridge import Bridge, FormatError, FormatRequest, FormatResult, Port

if TYPE_CHECKING:
    from collections.abc import Callable

# -- Fake formatting capability -------------------------------------------------

CANNED: dict[str, str] = {
    "select * from t": "SELECT\n  *\nFROM\n  t",
    "select 1": "SELECT\n  1",
    "select 2": "SELECT\n  2",
    "": "",
}


class FakeFormatter:
    """Formatter returning canned output and raising ``FormatError`` for anything else."""

    def __init__(self, canned: dict[str, str] | None = None) -> None:
        self.canned = CANNED if canned is None else canned
        self.calls: list[str] = []

    def __call__(self, source: str) -> str:
        self.calls.append(source)
        if source not in self.canned:
            raise FormatError(f"cannot format {source!r}", cursorpos=len(source))
        return self.canned[source]


# -- Port / bridge fixtures -----------------------------------------------------


@pytest.fixture
def requests() -> Port[FormatRequest]:
    return Port("format_sql")


@pytest.fixture
def responses() -> Port[FormatResult]:
    return Port("receive_formatted_sql")


@pytest.fixture
def received(responses: Port[FormatResult]) -> list[str]:
    """Formatted strings delivered on the outbound port, in delivery order."""
    out: list[str] = []
    responses.subscribe(lambda result: out.append(result.formatted))
    return out


@pytest.fixture
def fake_formatter() -> FakeFormatter:
    return FakeFormatter()


@pytest.fixture
def make_bridge(
    requests: Port[FormatRequest], responses: Port[FormatResult]
) -> Callable[..., Bridge]:
    def _make(formatter: Callable[[str], str]) -> Bridge:
        bridge = Bridge(requests, responses, formatter=formatter)
        bridge.attach()
        return bridge

    return _make


@pytest.fixture
def bridge(make_bridge: Callable[..., Bridge], fake_formatter: FakeFormatter) -> Bridge:
    return make_bridge(fake_formatter)
