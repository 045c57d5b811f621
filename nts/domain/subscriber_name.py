from __future__ import annotations

from dataclasses import dataclass

MAX_NAME_LENGTH = 256
FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')


@dataclass(frozen=True)
class SubscriberName:
    """A subscriber's display name.

    Rejects blank names, names longer than ``MAX_NAME_LENGTH`` characters and
    names containing any of ``FORBIDDEN_CHARACTERS``.
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> SubscriberName:
        if not raw.strip():
            raise ValueError("Subscriber name must not be empty.")
        if len(raw) > MAX_NAME_LENGTH:
            raise ValueError(f"Subscriber name must be at most {MAX_NAME_LENGTH} characters.")
        if any(char in FORBIDDEN_CHARACTERS for char in raw):
            raise ValueError(f"{raw!r} contains a forbidden character.")
        return cls(raw)

    def __str__(self) -> str:
        return self.value
