"""Ports the domain services expect adapters to provide."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from coursehub.domain.model import Subscription


class RecordNotFoundError(LookupError):
    """Raised by a store when a write targets a key that does not exist."""


@runtime_checkable
class SubscriptionStore(Protocol):
    """Keyed access to subscription records, one round trip per call.

    ``fetch_subscription`` returns None for an absent record and for any read
    failure. Writes raise on failure; writes against a missing key raise
    ``RecordNotFoundError``.
    """

    async def fetch_subscription(self, email: str) -> Subscription | None: ...

    async def create_subscription(self, email: str, topics: str | None) -> None: ...

    async def update_subscription(self, email: str, topics: str | None) -> None: ...

    async def delete_subscription(self, email: str) -> None: ...


__all__ = ["RecordNotFoundError", "SubscriptionStore"]
