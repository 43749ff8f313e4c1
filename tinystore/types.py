"""
tinystore Common Types - Shared Type Definitions
================================================

Type variables and callable aliases shared by the store and its subscription
handles. Kept in one module so `store.py` and `subscription.py` can both import
them without importing each other.
"""

from typing import Callable, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")

# ============================================================================
# CALLBACK TYPES
# ============================================================================

# Receives the store value, once on subscribe and again on every change
SubscribeFunction = Callable[[T], None]

# Maps the current value to the next one; must not mutate its argument
UpdateFunction = Callable[[T], T]

# Zero-argument handle returned by Store.subscribe
UnsubscribeFunction = Callable[[], None]
