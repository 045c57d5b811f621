"""Validated subscriber types."""

from .new_subscriber import NewSubscriber
from .subscriber_email import SubscriberEmail
from .subscriber_name import SubscriberName

__all__ = ["NewSubscriber", "SubscriberEmail", "SubscriberName"]
