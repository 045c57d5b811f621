from __future__ import annotations

from dataclasses import dataclass

from pydantic import EmailStr, TypeAdapter, ValidationError

_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(EmailStr)


@dataclass(frozen=True)
class SubscriberEmail:
    """An email address that passed validation."""

    value: str

    @classmethod
    def parse(cls, raw: str) -> SubscriberEmail:
        try:
            validated = _EMAIL_ADAPTER.validate_python(raw)
        except ValidationError as exc:
            raise ValueError(f"{raw!r} is not a valid subscriber email.") from exc
        return cls(validated)

    def __str__(self) -> str:
        return self.value
