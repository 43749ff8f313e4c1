"""
tinystore Store - Observable Single-Value Container
===================================================

A `Store` holds one value and notifies subscribers synchronously whenever that
value changes.

```python
from tinystore import Store

counter = Store(0, key="counter")
unsubscribe = counter.subscribe(lambda v: print(f"count={v}"))  # count=0

counter.set(1)                       # count=1
counter.set(1)                       # unchanged, nothing printed
counter.update(lambda v: v + 1)      # count=2
counter.reset()                      # count=0

unsubscribe()
counter.set(5)                       # no longer printed
```

Change detection is shallow: immutable scalars (numbers, strings, bytes, None)
compare with `==`, every other value by identity. A new list equal to the
current one is still a change; mutating the held value in place is invisible to
the store, so publish a new object instead.

Subscribers run in registration order and always receive the current value.
Each notification pass iterates over a snapshot of the registrations, so
callbacks may subscribe or unsubscribe freely while being notified. An
exception raised by a subscriber aborts the pass and propagates to whoever
called `set`, `update`, `reset` or `subscribe`.
"""

import logging
import threading
from typing import Callable, Dict, Generic, Optional, Tuple

from .subscription import Subscription, next_token
from .types import SubscribeFunction, T, UpdateFunction

logger = logging.getLogger(__name__)


# Immutable scalars compare by value; everything else by identity
_SCALAR_TYPES = (int, float, complex, str, bytes, bool, type(None))


def _values_equal(current: object, candidate: object) -> bool:
    if current is candidate:
        return True
    if isinstance(current, _SCALAR_TYPES) and isinstance(candidate, _SCALAR_TYPES):
        return current == candidate
    return False


class Store(Generic[T]):
    """
    An observable value container.

    Args:
        initial_value: Value held until the first accepted `set`; restored by `reset`.
        key: Display name used in `repr` and debug logging.
    """

    def __init__(self, initial_value: T, key: Optional[str] = None) -> None:
        self._key = key or "<unnamed>"
        self._initial_value = initial_value
        self._value = initial_value
        # token -> callback, kept in registration order
        self._subscribers: Dict[int, SubscribeFunction[T]] = {}
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> T:
        """The current value. Read-only; use `set` or `update` to change it."""
        return self._value

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def subscribe(self, func: SubscribeFunction[T]) -> Subscription:
        """
        Register `func` and call it immediately with the current value.

        Returns a `Subscription` that removes this registration, and only this
        one, when called. Subscribing the same callback twice yields two
        independent registrations.

        Raises:
            TypeError: If `func` is not callable.
        """
        if not callable(func):
            raise TypeError(f"Cannot subscribe non-callable {type(func).__name__}")

        token = next_token()
        with self._lock:
            self._subscribers[token] = func
        logger.debug(f"Subscribed #{token} to store '{self._key}'")

        func(self._value)
        return Subscription(self, token)

    def set(self, new_value: T) -> None:
        """Replace the value and notify subscribers, unless it is unchanged."""
        if _values_equal(self._value, new_value):
            logger.debug(f"Store '{self._key}' unchanged, skipping notification")
            return

        self._value = new_value
        self._notify_subscribers()

    def update(self, update_function: UpdateFunction[T]) -> None:
        """
        Set the value to `update_function(current_value)`.

        The function is called exactly once. If it raises, the exception
        propagates and the value is left as it was.

        Raises:
            TypeError: If `update_function` is not callable.
        """
        if not callable(update_function):
            raise TypeError(
                f"Cannot update with non-callable {type(update_function).__name__}"
            )
        self.set(update_function(self._value))

    def reset(self) -> None:
        """Set the value back to the one the store was created with."""
        self.set(self._initial_value)

    def _remove_registration(self, token: int) -> None:
        with self._lock:
            removed = self._subscribers.pop(token, None)
        if removed is not None:
            logger.debug(f"Unsubscribed #{token} from store '{self._key}'")

    def _notify_subscribers(self) -> None:
        # Snapshot so callbacks can (un)subscribe during the pass
        with self._lock:
            snapshot: Tuple[Tuple[int, Callable], ...] = tuple(
                self._subscribers.items()
            )
        logger.debug(
            f"Notifying {len(snapshot)} subscriber(s) of store '{self._key}'"
        )

        for token, subscriber in snapshot:
            # Removed earlier in this pass
            if token not in self._subscribers:
                continue
            subscriber(self._value)

    def __repr__(self) -> str:
        return f"Store({self._key!r}, {self._value!r})"
