from __future__ import annotations

from dataclasses import dataclass

from .subscriber_email import SubscriberEmail
from .subscriber_name import SubscriberName


@dataclass(frozen=True)
class NewSubscriber:
    email: SubscriberEmail
    name: SubscriberName

    @classmethod
    def parse(cls, *, name: str, email: str) -> NewSubscriber:
        """Validate raw form values; raises ``ValueError`` on the first invalid field."""
        return cls(email=SubscriberEmail.parse(email), name=SubscriberName.parse(name))
