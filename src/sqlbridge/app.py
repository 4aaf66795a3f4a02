"""Process-level wiring of the UI ports and the bridge."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from sqlbridge.bridge import Bridge
from sqlbridge.formatter import format_sql
from sqlbridge.messages import FormatRequest, FormatResult
from sqlbridge.ports import Port

if TYPE_CHECKING:
    from sqlbridge.formatter import Formatter


class App(NamedTuple):
    """The UI-facing ports and the bridge attached to them.

    Attributes:
        format_sql: Inbound port; the UI sends a ``FormatRequest`` here for each format action.
        receive_formatted_sql: Outbound port; formatted text arrives here as ``FormatResult``.
        bridge: The single bridge attached to the two ports.
    """

    format_sql: Port[FormatRequest]
    receive_formatted_sql: Port[FormatResult]
    bridge: Bridge


def create_app(formatter: Formatter = format_sql) -> App:
    """Create the port pair and attach one bridge to it.

    Call once at process start and keep the returned ``App`` for the life of the process.

    Args:
        formatter: Formatting callable handed to the bridge.

    Returns:
        The wired ``App``.
    """
    requests: Port[FormatRequest] = Port("format_sql")
    responses: Port[FormatResult] = Port("receive_formatted_sql")
    bridge = Bridge(requests, responses, formatter=formatter)
    bridge.attach()
    return App(format_sql=requests, receive_formatted_sql=responses, bridge=bridge)
