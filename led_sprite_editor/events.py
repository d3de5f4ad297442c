#!/usr/bin/env python3
"""
Event bus for keeping views in sync

The application root creates one EventBus and hands it to every
component that publishes or listens. Subscribers are called
synchronously on the publishing thread, in subscription order.
"""

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import ValidationError
from .logging_config import get_logger
from .models.frame import Frame
from .models.sequence import Sequence

logger = get_logger("events")


@dataclass(frozen=True)
class ActiveFrameChangedEvent:
    """The frame selected for editing changed"""

    sender: Any
    sequence: Sequence
    frame: Frame

    def __post_init__(self):
        if self.sender is None:
            raise ValidationError("sender must not be None")


class Subscription:
    """Handle returned by EventBus.subscribe; call unsubscribe() on teardown"""

    def __init__(self, bus: "EventBus", token: int, callback: Callable[[Any], None],
                 event_type: Optional[type]):
        self._bus = bus
        self.token = token
        self.callback = callback
        self.event_type = event_type

    @property
    def active(self) -> bool:
        return self._bus.is_subscribed(self)

    def accepts(self, event: Any) -> bool:
        return self.event_type is None or isinstance(event, self.event_type)

    def unsubscribe(self) -> None:
        self._bus.unsubscribe(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.unsubscribe()
        return False

    def __repr__(self):
        return f"Subscription #{self.token}"


class EventBus:
    """Publish/subscribe hub with per-subscriber failure isolation"""

    def __init__(self):
        self._subscriptions: dict[int, Subscription] = {}
        self._tokens = itertools.count(1)

    def subscribe(self, callback: Callable[[Any], None],
                  event_type: Optional[type] = None) -> Subscription:
        """
        Register a callback

        Args:
            callback: Called with each published event
            event_type: Only deliver events that are instances of this type

        Returns:
            Subscription handle
        """
        if callback is None or not callable(callback):
            raise ValidationError("callback must be callable")
        subscription = Subscription(self, next(self._tokens), callback, event_type)
        self._subscriptions[subscription.token] = subscription
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription; removing twice is a no-op"""
        self._subscriptions.pop(subscription.token, None)

    def is_subscribed(self, subscription: Subscription) -> bool:
        return self._subscriptions.get(subscription.token) is subscription

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(self, event: Any) -> int:
        """
        Deliver an event to every matching subscriber

        A failing subscriber is logged and skipped so the others still
        receive the event.

        Returns:
            Number of subscribers that handled the event without error
        """
        if event is None:
            raise ValidationError("event must not be None")

        delivered = 0
        # Snapshot so callbacks may subscribe or unsubscribe
        for subscription in list(self._subscriptions.values()):
            if not subscription.accepts(event) or not self.is_subscribed(subscription):
                continue
            try:
                subscription.callback(event)
            except Exception:
                logger.exception(f"{subscription} failed to handle {type(event).__name__}")
                continue
            delivered += 1
        return delivered
