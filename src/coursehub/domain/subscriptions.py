"""Subscription bookkeeping: upsert a topic interest keyed by e-mail address.

``add_subscription`` is a read followed by a write with no locking. Two concurrent
calls for the same address can both read the same prior value and the later write
wins, dropping the other topic. Subscriptions are low-contention and best-effort,
so this is accepted rather than guarded against.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from coursehub.domain.model import SUBSCRIPTION_TOPIC_SEPARATOR
from coursehub.domain.ports import RecordNotFoundError

if TYPE_CHECKING:
    from coursehub.domain.ports import SubscriptionStore

log = getLogger(__name__)


def merge_topics(existing: str | None, topic: str | None) -> str | None:
    """Append ``topic`` to a delimited topic field.

    Duplicates are kept: subscribing twice to the same topic records it twice.
    """

    if existing is None:
        return topic
    if topic is None:
        return existing
    return f"{existing}{SUBSCRIPTION_TOPIC_SEPARATOR}{topic}"


async def add_subscription(store: SubscriptionStore, email: str, topic: str | None) -> None:
    current = await store.fetch_subscription(email)
    if current is None:
        log.info("Creating subscription for %s (topic=%s)", email, topic)
        await store.create_subscription(email, topic)
        return

    merged = merge_topics(current.topics, topic)
    log.info("Updating subscription for %s (topic=%s)", email, topic)
    await store.update_subscription(email, merged)


async def delete_subscription(store: SubscriptionStore, email: str) -> None:
    """Delete the subscription for ``email``; a missing record is not an error."""

    try:
        await store.delete_subscription(email)
    except RecordNotFoundError:
        log.info("No subscription to delete for %s", email)
