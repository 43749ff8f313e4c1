"""Unit tests for Store internals: change detection, repr, logging."""

import logging
import math

import pytest

from tinystore import Store
from tinystore.store import _values_equal


class LoudEquality:
    """A value whose __eq__ must never be consulted by the store."""

    def __eq__(self, other):
        raise AssertionError("__eq__ should not be called")

    __hash__ = object.__hash__


@pytest.mark.unit
@pytest.mark.store
def test_values_equal_identity():
    obj = object()
    assert _values_equal(obj, obj)


@pytest.mark.unit
@pytest.mark.store
def test_values_equal_compares_scalars_by_value():
    assert _values_equal(1, 1.0)
    assert _values_equal("a", "".join(["a"]))
    assert _values_equal(b"x", bytes([120]))
    assert _values_equal(None, None)
    assert not _values_equal("a", "b")
    assert not _values_equal(0, None)


@pytest.mark.unit
@pytest.mark.store
def test_values_equal_compares_containers_by_identity():
    """Equal-but-distinct containers count as different values"""
    items = [1, 2]

    assert _values_equal(items, items)
    assert not _values_equal([1, 2], [1, 2])
    assert not _values_equal({"a": 1}, {"a": 1})
    assert not _values_equal((1,), (1,))


@pytest.mark.unit
@pytest.mark.store
def test_values_equal_never_calls_custom_eq():
    value = LoudEquality()

    assert _values_equal(value, value)
    assert not _values_equal(value, LoudEquality())


@pytest.mark.unit
@pytest.mark.store
def test_custom_eq_is_not_consulted_by_set():
    """Objects with their own __eq__ are compared by identity"""
    first = LoudEquality()
    store = Store(first)
    received = []
    store.subscribe(received.append)

    store.set(first)
    store.set(LoudEquality())

    assert len(received) == 2


@pytest.mark.unit
@pytest.mark.store
def test_custom_eq_errors_are_not_swallowed_for_scalar_subclasses():
    """A scalar subclass with a failing __eq__ surfaces the error from set()"""

    class BrokenInt(int):
        def __eq__(self, other):
            raise RuntimeError("broken eq")

        __hash__ = int.__hash__

    store = Store(BrokenInt(1))

    with pytest.raises(RuntimeError, match="broken eq"):
        store.set(2)


@pytest.mark.unit
@pytest.mark.store
def test_nan_identity_and_equality():
    """The same NaN object is unchanged; a different NaN object is a change"""
    nan = float("nan")
    store = Store(nan)
    received = []
    store.subscribe(received.append)

    store.set(nan)
    assert len(received) == 1

    store.set(float("nan"))
    assert len(received) == 2
    assert math.isnan(store.get())


@pytest.mark.unit
@pytest.mark.store
def test_update_rejects_non_callable(store):
    with pytest.raises(TypeError):
        store.update(5)

    assert store.get() == 0


@pytest.mark.unit
@pytest.mark.store
def test_key_defaults_to_unnamed():
    assert Store(1).key == "<unnamed>"
    assert Store(1, key="theme").key == "theme"


@pytest.mark.unit
@pytest.mark.store
def test_repr_shows_key_and_value():
    store = Store("dark", key="theme")

    assert repr(store) == "Store('theme', 'dark')"


@pytest.mark.unit
@pytest.mark.store
def test_subscriber_count_tracks_registrations(store):
    first = store.subscribe(lambda v: None)
    store.subscribe(lambda v: None)
    assert store.subscriber_count == 2

    first()
    assert store.subscriber_count == 1


@pytest.mark.unit
@pytest.mark.store
def test_debug_logging_of_subscription_lifecycle(caplog):
    caplog.set_level(logging.DEBUG, logger="tinystore.store")
    store = Store(0, key="counter")

    unsubscribe = store.subscribe(lambda v: None)
    store.set(1)
    store.set(1)
    unsubscribe()

    messages = [record.getMessage() for record in caplog.records]
    assert any("Subscribed" in m and "'counter'" in m for m in messages)
    assert any("Notifying 1 subscriber(s)" in m for m in messages)
    assert any("unchanged" in m for m in messages)
    assert any("Unsubscribed" in m for m in messages)
    assert all(record.levelno == logging.DEBUG for record in caplog.records)


@pytest.mark.unit
@pytest.mark.store
def test_exceptions_are_not_logged(caplog):
    """Subscriber failures propagate without being logged"""
    caplog.set_level(logging.DEBUG, logger="tinystore.store")
    store = Store(0)

    def failing(value):
        if value:
            raise RuntimeError("boom")

    store.subscribe(failing)
    with pytest.raises(RuntimeError):
        store.set(1)

    assert not any(record.levelno >= logging.WARNING for record in caplog.records)
