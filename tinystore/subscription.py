"""
tinystore Subscription - Unsubscribe Handles
============================================

`Store.subscribe` returns a `Subscription`. Calling it removes exactly the
registration it was created for, even when the same callback is registered
more than once. Repeat calls do nothing.

The handle keeps only a weak reference to its store, so holding on to a
handle never keeps a discarded store alive.
"""

import itertools
import weakref
from types import TracebackType
from typing import TYPE_CHECKING, Any, Optional, Type

if TYPE_CHECKING:
    from .store import Store

_tokens = itertools.count(1)


def next_token() -> int:
    """Return a registration token unique within this process."""
    return next(_tokens)


class Subscription:
    """
    Idempotent, zero-argument unsubscribe handle.

    Usable as a plain callable, via `unsubscribe()`, or as a context manager:

    ```python
    with store.subscribe(render):
        store.set("loading")
    # render is no longer subscribed here
    ```
    """

    __slots__ = ("_store_ref", "_token", "_active")

    def __init__(self, store: "Store[Any]", token: int) -> None:
        self._store_ref = weakref.ref(store)
        self._token = token
        self._active = True

    @property
    def token(self) -> int:
        return self._token

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False

        store: Optional["Store[Any]"] = self._store_ref()
        if store is not None:
            store._remove_registration(self._token)

    def __call__(self) -> None:
        self.unsubscribe()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.unsubscribe()

    def __repr__(self) -> str:
        state = "active" if self._active else "closed"
        return f"Subscription(token={self._token}, {state})"
