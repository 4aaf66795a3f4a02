"""Synchronous one-way message channels between the UI and the bridge."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class Port(Generic[_T]):
    """A named channel that pushes each sent value to its subscribers.

    Delivery is synchronous: :meth:`send` calls every subscriber, in subscription order, before it returns. Values are
    not buffered, so a value sent while nobody is subscribed is dropped.

    Example:
        >>> received = []
        >>> port = Port("greetings")
        >>> port.subscribe(received.append)
        >>> port.send("hello")
        >>> received
        ['hello']
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: list[Callable[[_T], object]] = []

    def __repr__(self) -> str:
        return f"Port({self.name!r}, subscribers={len(self._subscribers)})"

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Callable[[_T], object]) -> None:
        """Register *callback*. Subscribing the same callback twice has no effect."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[_T], object]) -> None:
        """Remove *callback* if it is subscribed."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def send(self, value: _T) -> None:
        """Deliver *value* to every current subscriber."""
        if not self._subscribers:
            logger.debug("Port %r has no subscribers; dropping message", self.name)
            return
        # Copy so a subscriber may unsubscribe itself during delivery.
        for callback in list(self._subscribers):
            callback(value)
