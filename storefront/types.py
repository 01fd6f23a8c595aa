"""Storefront data contract types."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, TypedDict


class Mode(str, Enum):
    """Which account path the signup form exercises."""

    SIGN_UP = "signup"
    LOG_IN = "login"

    def toggled(self) -> Mode:
        """Return the opposite mode."""
        return Mode.LOG_IN if self is Mode.SIGN_UP else Mode.SIGN_UP


@dataclass(frozen=True)
class FormFields:
    """Snapshot of every input on the signup form."""

    username: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    full_name: str = ""
    phone: str = ""

    def with_value(self, name: str, value: str) -> FormFields:
        """Return a copy with one field replaced."""
        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown form field: {name!r}.")
        return replace(self, **{name: value})


FIELD_NAMES: tuple[str, ...] = tuple(field.name for field in fields(FormFields))


@dataclass(frozen=True)
class Idle:
    """No submission in progress."""


@dataclass(frozen=True)
class Submitting:
    """Awaiting validation or the remote account call."""


@dataclass(frozen=True)
class Failed:
    """Last submission failed; the form stays interactive."""

    reason: str

    def __post_init__(self) -> None:
        if not self.reason:
            raise ValueError("Failed submission requires a non-empty reason.")


SubmissionState = Idle | Submitting | Failed

IDLE = Idle()
SUBMITTING = Submitting()


class BeatPayload(TypedDict):
    """Catalog beat as returned by the BeatCrest API."""

    id: int
    title: str
    producer: str
    producerUsername: str
    producerId: int
    price: float
    genre: str
    bpm: int
    key: str
    cover: str
    plays: int
    likes: int
    downloads: int
    date: str
    verified: bool
    description: str
    tags: list[str]


class AccountPayload(TypedDict, total=False):
    """Account record returned by the register and login endpoints."""

    id: str
    username: str
    email: str
    full_name: str
    phone: str
    account_type: str
    is_verified: bool


@dataclass(frozen=True)
class PurchaseContext:
    """Pending catalog item that motivated opening the signup form."""

    beat_id: int
    title: str
    price: float
    producer_name: str

    @classmethod
    def from_beat(cls, beat: Mapping[str, Any]) -> PurchaseContext:
        """Build a purchase context from a catalog beat payload."""
        return cls(
            beat_id=int(beat["id"]),
            title=str(beat["title"]),
            price=float(beat["price"]),
            producer_name=str(beat["producer"]),
        )


@dataclass(frozen=True)
class UserIdentity:
    """Minimal identity handed to the payment continuation."""

    id: str
    username: str
    email: str
    full_name: str
    phone: str

    def as_dict(self) -> dict[str, str]:
        """Return the identity as a plain dictionary."""
        return asdict(self)


Authenticator = Callable[[Mode, FormFields], Awaitable[Any]]
PaymentContinuation = Callable[[UserIdentity], None]
