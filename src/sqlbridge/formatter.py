"""The formatting capability consumed by the bridge.

SQL is pretty-printed by :func:`postgast.format_sql`. This module narrows every way that call can fail down to
:class:`~sqlbridge.errors.FormatError` and offers :func:`try_format`, which returns the outcome as a value instead of
raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import postgast

from sqlbridge.errors import FormatError, from_pg_query_error
from sqlbridge.result import Failed, Formatted

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlbridge.result import FormatOutcome

    Formatter = Callable[[str], str]


def format_sql(source: str) -> str:
    """Pretty-print SQL text.

    Args:
        source: Any string. Empty or whitespace-only input contains no statements and formats to ``""``.

    Returns:
        The formatted SQL with uppercase keywords, clause-per-line layout. Each statement ends with a semicolon.

    Raises:
        FormatError: If *source* cannot be parsed, or the engine fails while formatting it.

    Example:
        >>> print(format_sql("select * from t"))
        SELECT *
        FROM t;
    """
    try:
        return postgast.format_sql(source)
    except postgast.PgQueryError as e:
        raise from_pg_query_error(e) from e
    except Exception as e:
        raise FormatError(f"internal formatter error: {e}") from e


def try_format(source: str, formatter: Formatter = format_sql) -> FormatOutcome:
    """Run *formatter* on *source* and return the outcome as a value.

    Only :class:`FormatError` is turned into :class:`~sqlbridge.result.Failed`; anything else a custom formatter raises
    propagates unchanged.

    Args:
        source: SQL text to format.
        formatter: The formatting callable. Defaults to :func:`format_sql`.

    Returns:
        ``Formatted(text)`` with the formatter's return value trusted verbatim, or ``Failed(error)``.
    """
    try:
        formatted = formatter(source)
    except FormatError as e:
        return Failed(e)
    return Formatted(formatted)
