"""Message types carried across the UI channels."""

from __future__ import annotations

from typing import NamedTuple


class FormatRequest(NamedTuple):
    """A request from the UI to format SQL text.

    Attributes:
        source: The raw SQL text as authored by the user. May be empty or invalid.
    """

    source: str


class FormatResult(NamedTuple):
    """Formatted SQL text delivered back to the UI.

    Attributes:
        formatted: The reformatted SQL, exactly as the formatting capability returned it.
    """

    formatted: str
