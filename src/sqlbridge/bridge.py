"""The bridge between UI format requests and the SQL formatter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlbridge.formatter import format_sql, try_format
from sqlbridge.messages import FormatRequest, FormatResult
from sqlbridge.result import Failed, Formatted

if TYPE_CHECKING:
    from sqlbridge.formatter import Formatter
    from sqlbridge.ports import Port

logger = logging.getLogger(__name__)


class Bridge:
    """Formats SQL sent by the UI and sends the result back.

    The bridge listens on *requests*, runs the formatter on each request's source text, and sends a
    :class:`~sqlbridge.messages.FormatResult` on *responses* when formatting succeeds. When the formatter signals a
    :class:`~sqlbridge.errors.FormatError` the failure is logged as a single warning and nothing is sent, so the UI
    keeps showing its previous text. No state is kept between requests and failed requests are not retried.

    Args:
        requests: Inbound port the UI sends format requests on.
        responses: Outbound port formatted text is delivered on.
        formatter: Formatting callable. Defaults to :func:`~sqlbridge.formatter.format_sql`.
        diagnostics: Diagnostic sink for failed requests. Defaults to this module's logger.
    """

    def __init__(
        self,
        requests: Port[FormatRequest],
        responses: Port[FormatResult],
        *,
        formatter: Formatter = format_sql,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._requests = requests
        self._responses = responses
        self._formatter = formatter
        self._diagnostics = diagnostics if diagnostics is not None else logger
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """Start handling requests from the inbound port.

        Raises:
            RuntimeError: If the bridge is already attached.
        """
        if self._attached:
            raise RuntimeError("Bridge is already attached to its ports")
        self._requests.subscribe(self._handle_request)
        self._attached = True

    def detach(self) -> None:
        """Stop handling requests. Does nothing if the bridge is not attached."""
        if not self._attached:
            return
        self._requests.unsubscribe(self._handle_request)
        self._attached = False

    def on_format_requested(self, source: str) -> None:
        """Format *source* and deliver the result, or log why it could not be formatted."""
        match try_format(source, self._formatter):
            case Formatted(formatted):
                self._responses.send(FormatResult(formatted))
            case Failed(error):
                self._diagnostics.warning("Could not format SQL: %s", error.describe(), exc_info=error)

    def _handle_request(self, request: FormatRequest) -> None:
        self.on_format_requested(request.source)
