"""Public interface for the Content API adapter."""

from __future__ import annotations

from .access_rules import aggregate_rules, group_rules
from .client import ContentAPIError, ContentApiClient, ContentNotFoundError
from .gateway import CmsGateway
from .schema import RawCourse, RawGroup, RawMembership, RawSubscription, RawTopic, RawUser
from .translator import (
    ANONYMOUS_NAME,
    CONTENT_ROOT,
    map_course,
    map_group,
    map_subscription,
    map_topic,
    map_user,
)

__all__ = [
    "ANONYMOUS_NAME",
    "CONTENT_ROOT",
    "CmsGateway",
    "ContentAPIError",
    "ContentApiClient",
    "ContentNotFoundError",
    "RawCourse",
    "RawGroup",
    "RawMembership",
    "RawSubscription",
    "RawTopic",
    "RawUser",
    "aggregate_rules",
    "group_rules",
    "map_course",
    "map_group",
    "map_subscription",
    "map_topic",
    "map_user",
]
