"""
Observable values for the UI layer.

`LiveData` holds the last emitted value and pushes every new value to its
subscribers. `LiveQuery` is a LiveData backed by a loader callable: the
repository calls `refresh()` after each completed write, and callers that
prefer polling use `snapshot()`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Hashable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class Subscription:
    """Handle returned by `LiveData.subscribe`."""

    def __init__(self, source: "LiveData[Any]", callback: Callable[[Any], None]):
        self._source = source
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._source._remove(self._callback)


class LiveData(Generic[T]):
    def __init__(self, value: Any = _UNSET):
        self._value = value
        self._callbacks: List[Callable[[T], None]] = []

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Optional[T]:
        """Last emitted value, or None if nothing was emitted yet."""
        return None if self._value is _UNSET else self._value

    @property
    def has_subscribers(self) -> bool:
        return bool(self._callbacks)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Register ``callback``; it is called at once if a value is present."""
        self._callbacks.append(callback)
        if self.has_value:
            self._dispatch(callback, self._value)
        return Subscription(self, callback)

    def clear_subscribers(self) -> None:
        self._callbacks.clear()

    def _remove(self, callback: Callable[[T], None]) -> None:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            pass

    def _emit(self, value: T) -> None:
        self._value = value
        for callback in list(self._callbacks):
            self._dispatch(callback, value)

    def _dispatch(self, callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception:
            # One failing subscriber must not starve the others.
            logger.exception("LiveData subscriber %r failed", callback)


class MutableLiveData(LiveData[T]):
    def set_value(self, value: T) -> None:
        self._emit(value)


class LiveQuery(LiveData[T]):
    """LiveData whose value is produced by re-running a query.

    ``key`` identifies the record a single-record query is bound to; list
    queries leave it as None.
    """

    def __init__(self, loader: Callable[[], T], key: Optional[Hashable] = None):
        super().__init__()
        self._loader = loader
        self.key = key

    @property
    def value(self) -> Optional[T]:
        if not self.has_value:
            self._value = self._loader()
        return self._value

    def snapshot(self) -> T:
        """Run the query now without notifying subscribers."""
        return self._loader()

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        if not self.has_value:
            self._value = self._loader()
        return super().subscribe(callback)

    def refresh(self) -> T:
        """Re-run the query and emit the result to every subscriber."""
        value = self._loader()
        self._emit(value)
        return value

    def invalidate(self) -> None:
        """Drop the cached value; the next read re-runs the query."""
        self._value = _UNSET
