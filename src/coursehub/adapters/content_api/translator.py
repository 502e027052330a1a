"""Translate raw Content API records into domain value objects.

Every function here is pure. Field-presence coercion for each entity kind happens
in exactly one place, so no raw record shape leaks past this module.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from coursehub.domain.model import (
    Course,
    CourseRepo,
    Group,
    GroupInvite,
    GroupMembership,
    Subscription,
    Topic,
    User,
)

from .access_rules import aggregate_rules, group_rules
from .schema import RawCourse, RawGroup, RawSubscription, RawTopic, RawUser

if TYPE_CHECKING:
    from .schema import (
        RawCourseInput,
        RawGroupInput,
        RawSubscriptionInput,
        RawTopicInput,
        RawUserInput,
    )

log = getLogger(__name__)

CONTENT_ROOT = "/content"
ANONYMOUS_NAME = "Anonymous"


def _ensure_user(raw: RawUserInput) -> RawUser:
    return raw if isinstance(raw, RawUser) else RawUser.model_validate(raw)


def _ensure_group(raw: RawGroupInput) -> RawGroup:
    return raw if isinstance(raw, RawGroup) else RawGroup.model_validate(raw)


def _ensure_topic(raw: RawTopicInput) -> RawTopic:
    return raw if isinstance(raw, RawTopic) else RawTopic.model_validate(raw)


def _ensure_course(raw: RawCourseInput) -> RawCourse:
    return raw if isinstance(raw, RawCourse) else RawCourse.model_validate(raw)


def _present(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def content_path(folder: str | None) -> str:
    """Root a content folder under ``CONTENT_ROOT``."""

    if not folder:
        return CONTENT_ROOT
    if folder.startswith("/"):
        return f"{CONTENT_ROOT}{folder}"
    return f"{CONTENT_ROOT}/{folder}"


def display_name(payload: RawUser) -> str:
    return (
        _present(payload.first_name)
        or _present(payload.external_identifier)
        or _present(payload.email)
        or ANONYMOUS_NAME
    )


def avatar_url(avatar: str | None, *, assets_base_url: str | None = None) -> str | None:
    if avatar is None:
        return None
    base = (assets_base_url or "").rstrip("/")
    return f"{base}/assets/{avatar}"


def map_user(raw: RawUserInput, *, assets_base_url: str | None = None) -> User:
    payload = _ensure_user(raw)
    memberships = tuple(
        GroupMembership(id=row.group.id or "", name=row.group.name)
        for row in payload.groups
        if row.group is not None
    )
    if len(memberships) < len(payload.groups):
        log.debug(
            "User %s: dropped %d membership(s) without a linked group",
            payload.id,
            len(payload.groups) - len(memberships),
        )
    return User(
        id=payload.id or "",
        email=payload.email,
        name=display_name(payload),
        access_rules=tuple(aggregate_rules(payload.groups)),
        groups=memberships,
        avatar_url=avatar_url(payload.avatar, assets_base_url=assets_base_url),
    )


def _invite(value: str | None) -> GroupInvite:
    if value is None:
        return GroupInvite.NONE
    try:
        return GroupInvite(value)
    except ValueError:
        log.debug("Unknown group invite policy %r, treating as none", value)
        return GroupInvite.NONE


def map_group(raw: RawGroupInput) -> Group:
    payload = _ensure_group(raw)
    return Group(
        id=payload.id or "",
        name=payload.name,
        invite=_invite(payload.invite),
        access_rules=tuple(group_rules(payload.access_rules)),
    )


def map_course(raw: RawCourseInput) -> Course:
    payload = _ensure_course(raw)
    folder = content_path(payload.content_folder)
    repo: CourseRepo | None = None
    repo_url = _present(payload.repo_url)
    if repo_url is not None:
        repo_folder = _present(payload.repo_folder)
        repo = CourseRepo(
            url=repo_url,
            folder=folder if repo_folder is None else content_path(repo_folder),
        )
    return Course(
        name=payload.id or "",
        folder=folder,
        topic=payload.topic,
        organization=payload.organization,
        draft=payload.draft,
        repo=repo,
    )


def map_topic(raw: RawTopicInput) -> Topic:
    payload = _ensure_topic(raw)
    return Topic(
        name=payload.id or "",
        title=payload.title,
        lead=payload.lead,
        courses=tuple(map_course(course) for course in payload.courses),
    )


def map_subscription(raw: RawSubscriptionInput) -> Subscription:
    payload = raw if isinstance(raw, RawSubscription) else RawSubscription.model_validate(raw)
    return Subscription(email=payload.email or "", topics=payload.topics)
