"""Error handling for sqlbridge.

Provides :class:`FormatError`, the single error kind a formatting capability may signal, and a helper that converts
the engine's structured ``PgQueryError`` into it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postgast import PgQueryError


class FormatError(Exception):
    """Raised when SQL text cannot be formatted.

    Covers every failure of the formatting capability, whether the source is not valid SQL or the engine itself
    faulted. When the failure came from the parser, the structured fields reported by libpg_query are carried over so
    that diagnostics can point at the offending token.

    ``cursorpos`` is a **1-based byte offset** into the source text. When it is ``0`` the position is unknown.

    Attributes:
        message: Human-readable error description.
        cursorpos: 1-based byte offset where the error was detected (``0`` when unavailable).
        context: Additional parser context, or ``None``.
        funcname: Internal C function name where the error originated, or ``None``.
        filename: Internal C source file where the error originated, or ``None``.
        lineno: Line number in the internal C source file (``0`` when unavailable).

    Examples:
        >>> from sqlbridge import FormatError, format_sql
        >>> try:
        ...     format_sql("SELECT * FORM users")
        ... except FormatError as e:
        ...     print(e.cursorpos)
        10
    """

    def __init__(
        self,
        message: str,
        *,
        cursorpos: int = 0,
        context: str | None = None,
        funcname: str | None = None,
        filename: str | None = None,
        lineno: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cursorpos = cursorpos
        self.context = context
        self.funcname = funcname
        self.filename = filename
        self.lineno = lineno

    def describe(self) -> str:
        """Return a one-line description suitable for a log record."""
        if self.cursorpos:
            return f"{self.message} (at position {self.cursorpos})"
        return self.message


def from_pg_query_error(err: PgQueryError) -> FormatError:
    """Build a :class:`FormatError` carrying the same structured fields as *err*."""
    return FormatError(
        err.message,
        cursorpos=err.cursorpos,
        context=err.context,
        funcname=err.funcname,
        filename=err.filename,
        lineno=err.lineno,
    )
