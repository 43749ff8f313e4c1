"""
tinystore - A Minimal Observable Value Store

A single-value container that notifies subscribers synchronously whenever its
value changes.
"""

__version__ = "0.1.0"

from .store import Store
from .subscription import Subscription
from .types import SubscribeFunction, UnsubscribeFunction, UpdateFunction

__all__ = [
    "Store",
    "Subscription",
    # Callback types
    "SubscribeFunction",
    "UpdateFunction",
    "UnsubscribeFunction",
]
