"""Explicit success-or-error outcome of a formatting call."""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

from sqlbridge.errors import FormatError


class Formatted(NamedTuple):
    """The formatting capability returned *formatted*."""

    formatted: str


class Failed(NamedTuple):
    """The formatting capability signalled *error*."""

    error: FormatError


FormatOutcome: TypeAlias = Formatted | Failed
