"""CMS gateway: the Content API operations the application uses.

Reads of a single record by key return None on any failure. The topic catalog read
propagates failures, because an empty catalog must not be mistaken for a loaded
one. Writes propagate failures and are never retried.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .client import ContentAPIError
from .translator import map_group, map_subscription, map_topic, map_user

if TYPE_CHECKING:
    from collections.abc import Mapping

    from coursehub.domain.model import Group, Subscription, Topic, User
    from coursehub.domain.ports import SubscriptionStore

    from .client import ContentApiClient

log = getLogger(__name__)

GROUPS_COLLECTION = "Groups"
TOPICS_COLLECTION = "Topics"
SUBSCRIPTIONS_COLLECTION = "Subscriptions"
MEMBERSHIPS_COLLECTION = "Groups_directus_users"

USER_FIELDS = (
    "id",
    "email",
    "first_name",
    "external_identifier",
    "avatar",
    "groups.*",
    "groups.Groups_id.*",
    "groups.Groups_id.accessRules.*",
)
GROUP_FIELDS = ("id", "name", "invite", "accessRules.*")
TOPIC_FIELDS = (
    "id",
    "title",
    "lead",
    "order",
    "courses.id",
    "courses.organization",
    "courses.draft",
    "courses.contentFolder",
    "courses.repoUrl",
    "courses.repoFolder",
    "courses.topic.id",
)
TOPIC_SORT = ("order",)
SUBSCRIPTION_FIELDS = ("email", "topics")


class CmsGateway:
    """Typed facade over ``ContentApiClient``; owns no state besides the client."""

    def __init__(self, client: ContentApiClient, *, assets_base_url: str | None = None) -> None:
        self._client = client
        self._assets_base_url = assets_base_url

    async def fetch_user(self, user_id: str) -> User | None:
        try:
            record = await self._client.read_user(user_id, fields=USER_FIELDS)
        except ContentAPIError as exc:
            log.warning("fetch_user %s failed: %s", user_id, exc)
            return None
        return map_user(record, assets_base_url=self._assets_base_url)

    async def fetch_group(self, group_id: str) -> Group | None:
        try:
            record = await self._client.read_item(
                GROUPS_COLLECTION, group_id, fields=GROUP_FIELDS
            )
        except ContentAPIError as exc:
            log.warning("fetch_group %s failed: %s", group_id, exc)
            return None
        return map_group(record)

    async def fetch_topic(self, topic_id: str) -> Topic | None:
        try:
            record = await self._client.read_item(
                TOPICS_COLLECTION, topic_id, fields=TOPIC_FIELDS
            )
        except ContentAPIError as exc:
            log.warning("fetch_topic %s failed: %s", topic_id, exc)
            return None
        return map_topic(record)

    async def fetch_topics(
        self,
        *,
        filter: Mapping[str, object] | None = None,  # noqa: A002
    ) -> list[Topic]:
        records = await self._client.read_items(
            TOPICS_COLLECTION,
            fields=TOPIC_FIELDS,
            sort=TOPIC_SORT,
            filter=filter,
        )
        topics = [map_topic(record) for record in records]
        log.debug("Loaded %d topic(s)", len(topics))
        return topics

    async def fetch_subscription(self, email: str) -> Subscription | None:
        try:
            record = await self._client.read_item(
                SUBSCRIPTIONS_COLLECTION, email, fields=SUBSCRIPTION_FIELDS
            )
        except ContentAPIError as exc:
            log.info("fetch_subscription %s: %s", email, exc)
            return None
        return map_subscription(record)

    async def create_subscription(self, email: str, topics: str | None) -> None:
        await self._client.create_item(
            SUBSCRIPTIONS_COLLECTION, {"email": email, "topics": topics}
        )

    async def update_subscription(self, email: str, topics: str | None) -> None:
        await self._client.update_item(SUBSCRIPTIONS_COLLECTION, email, {"topics": topics})

    async def delete_subscription(self, email: str) -> None:
        await self._client.delete_item(SUBSCRIPTIONS_COLLECTION, email)

    async def add_to_group(self, user_id: str, group_id: str) -> None:
        await self._client.create_item(
            MEMBERSHIPS_COLLECTION,
            {"Groups_id": group_id, "directus_users_id": user_id},
        )


if TYPE_CHECKING:

    def _store_check(gateway: CmsGateway) -> SubscriptionStore:
        return gateway
