"""Domain value objects produced from Content API records.

These are the only shapes that circulate past the adapter boundary. They carry no
identity beyond their key and are rebuilt on every fetch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

SUBSCRIPTION_TOPIC_SEPARATOR = " | "


class GroupInvite(StrEnum):
    OPEN = "open"
    CLOSED = "closed"
    NONE = "none"


@dataclass(frozen=True, slots=True, kw_only=True)
class GroupMembership:
    id: str
    name: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class User:
    id: str
    email: str | None
    name: str
    access_rules: tuple[str, ...] = ()
    groups: tuple[GroupMembership, ...] = ()
    avatar_url: str | None = None

    def has_access(self, rule: str) -> bool:
        return rule in self.access_rules


@dataclass(frozen=True, slots=True, kw_only=True)
class Group:
    id: str
    name: str | None
    invite: GroupInvite = GroupInvite.NONE
    access_rules: tuple[str, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.invite is GroupInvite.OPEN


@dataclass(frozen=True, slots=True, kw_only=True)
class CourseRepo:
    """External repository holding a course's sources."""

    url: str
    folder: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Course:
    """A course definition as consumed by the course content library.

    ``folder`` is an absolute path under the content root; the library indexes
    courses by ``name``.
    """

    name: str
    folder: str
    topic: str | None
    organization: str | None = None
    draft: bool | None = None
    repo: CourseRepo | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Topic:
    """A topic source: a titled, ordered group of courses."""

    name: str
    title: str | None
    lead: str | None = None
    courses: tuple[Course, ...] = field(default_factory=tuple)

    def find_course(self, name: str) -> Course | None:
        return next((course for course in self.courses if course.name == name), None)


@dataclass(frozen=True, slots=True, kw_only=True)
class Subscription:
    """Topic interests of one e-mail address.

    ``topics`` is a single text field holding topic names joined by
    ``SUBSCRIPTION_TOPIC_SEPARATOR``. Entries are not deduplicated.
    """

    email: str
    topics: str | None = None

    @property
    def topic_names(self) -> tuple[str, ...]:
        if not self.topics:
            return ()
        return tuple(
            name.strip()
            for name in self.topics.split(SUBSCRIPTION_TOPIC_SEPARATOR)
            if name.strip()
        )


__all__ = [
    "SUBSCRIPTION_TOPIC_SEPARATOR",
    "Course",
    "CourseRepo",
    "Group",
    "GroupInvite",
    "GroupMembership",
    "Subscription",
    "Topic",
    "User",
]
