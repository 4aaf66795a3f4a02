"""Bridge between an editor's format requests and a SQL pretty-printer."""

import logging

from sqlbridge.app import App, create_app
from sqlbridge.bridge import Bridge
from sqlbridge.errors import FormatError
from sqlbridge.formatter import format_sql, try_format
from sqlbridge.messages import FormatRequest, FormatResult
from sqlbridge.ports import Port
from sqlbridge.result import Failed, FormatOutcome, Formatted

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "App",
    "Bridge",
    "create_app",
    "Failed",
    "format_sql",
    "FormatError",
    "FormatOutcome",
    "Formatted",
    "FormatRequest",
    "FormatResult",
    "Port",
    "try_format",
]
