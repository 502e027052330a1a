"""Process bootstrap and application entry points.

The Content API client is built once by ``startup()`` and shared by every request
for the lifetime of the process. Entry points accept an explicit gateway so callers
and tests can pass their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from coursehub.adapters.content_api import CmsGateway, ContentApiClient
from coursehub.config import configure_logging, get_content_api_config
from coursehub.domain import subscriptions

if TYPE_CHECKING:
    import httpx

    from coursehub.config import ContentApiConfig
    from coursehub.domain.model import Group, Topic, User

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the gateway is used before ``startup()`` or started twice."""


@dataclass(slots=True)
class _AppState:
    client: ContentApiClient | None = None
    gateway: CmsGateway | None = None


_STATE = _AppState()


def startup(
    *,
    config: ContentApiConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    load_env_file: bool = True,
    setup_logging: bool = True,
    force: bool = False,
) -> CmsGateway:
    """Build the shared Content API client and gateway."""

    if _STATE.gateway is not None and not force:
        raise StartupError("Content API gateway already initialised. Pass force=True to rebuild.")

    if load_env_file:
        load_dotenv()
    if setup_logging:
        configure_logging()

    resolved = config or get_content_api_config()
    client = ContentApiClient.from_config(resolved, transport=transport)
    _STATE.client = client
    _STATE.gateway = CmsGateway(client, assets_base_url=resolved.assets_base_url)
    log.info("Content API gateway ready for %s", resolved.base_url)
    return _STATE.gateway


async def shutdown() -> None:
    """Close the shared client and reset state (primarily for tests)."""

    if _STATE.client is not None:
        await _STATE.client.aclose()
    _STATE.client = None
    _STATE.gateway = None


def is_started() -> bool:
    return _STATE.gateway is not None


def get_gateway() -> CmsGateway:
    if _STATE.gateway is None:
        raise StartupError(
            "Content API gateway not initialised. Call coursehub.app.startup() first."
        )
    return _STATE.gateway


async def load_user(user_id: str, *, gateway: CmsGateway | None = None) -> User | None:
    return await (gateway or get_gateway()).fetch_user(user_id)


async def load_group(group_id: str, *, gateway: CmsGateway | None = None) -> Group | None:
    return await (gateway or get_gateway()).fetch_group(group_id)


async def load_catalog(*, gateway: CmsGateway | None = None) -> list[Topic]:
    """Load every topic with its courses, in catalog order.

    Failures propagate; a caller should render an unavailable state rather than an
    empty catalog.
    """

    return await (gateway or get_gateway()).fetch_topics()


async def load_topic(
    topic_name: str | None = None,
    *,
    gateway: CmsGateway | None = None,
) -> Topic | None:
    """Return the named topic from the catalog, or the first topic when no name is given."""

    topics = await load_catalog(gateway=gateway)
    if topic_name is None:
        return topics[0] if topics else None
    return next((topic for topic in topics if topic.name == topic_name), None)


async def join_group(user_id: str, group_id: str, *, gateway: CmsGateway | None = None) -> None:
    await (gateway or get_gateway()).add_to_group(user_id, group_id)


async def subscribe(
    email: str,
    topic: str | None,
    *,
    gateway: CmsGateway | None = None,
) -> None:
    await subscriptions.add_subscription(gateway or get_gateway(), email, topic)


async def unsubscribe(email: str, *, gateway: CmsGateway | None = None) -> None:
    await subscriptions.delete_subscription(gateway or get_gateway(), email)
