"""Explicit change notification between dashboard sections.

Saving or deleting a transaction invalidates every view that shows
aggregated data.  Sections subscribe to a :class:`RefreshChannel` and
are told when to reload, instead of watching a shared counter.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .logging_setup import get_logger

logger = get_logger(__name__)

RefreshCallback = Callable[[int], None]


class RefreshChannel:
    """Publish/subscribe channel carrying a monotonically increasing version."""

    def __init__(self) -> None:
        self._version = 0
        self._subscribers: List[RefreshCallback] = []

    @property
    def version(self) -> int:
        return self._version

    def subscribe(self, callback: RefreshCallback) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify(self, reason: Optional[str] = None) -> int:
        """Bump the version and call every subscriber with it.

        All subscribers run even if one fails; the first failure is
        re-raised afterwards.
        """
        self._version += 1
        logger.info("Data refreshed (version=%d, reason=%s)", self._version, reason or "unspecified")
        first_error: Optional[Exception] = None
        for callback in list(self._subscribers):
            try:
                callback(self._version)
            except Exception as exc:
                logger.exception("Refresh subscriber %r failed", callback)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
        return self._version
