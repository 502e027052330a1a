"""Pydantic models describing raw Content API records.

The models are lenient towards schema drift: every field is optional, null or
malformed lists become empty, a relation that was not expanded (a bare id instead of
an object) becomes an object carrying only that id, and scalars of the wrong kind
become None. Validating a mapping against these models does not raise.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import ClassVar, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


def _text_or_none(value: object) -> object:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _id_or_none(value: object) -> object:
    if isinstance(value, Mapping):
        value = cast(Mapping[str, object], value).get("id")
    return _text_or_none(value)


def _bool_or_none(value: object) -> object:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str) and value.lower() in {"true", "false"}:
        return value.lower() == "true"
    return None


def _number_or_none(value: object) -> object:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _relation_or_none(value: object) -> object:
    if isinstance(value, Mapping):
        return value
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return {"id": value}
    return None


def _relation_rows(value: object) -> object:
    if not isinstance(value, list):
        return []
    rows: list[object] = []
    for item in cast(list[object], value):
        relation = _relation_or_none(item)
        if relation is not None:
            rows.append(relation)
    return rows


class ContentBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "Content API %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class RawAccessRule(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    rule: str | None = None

    _normalize_text = field_validator("id", "rule", mode="before")(_text_or_none)


class RawGroup(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    name: str | None = None
    invite: str | None = None
    access_rules: list[RawAccessRule] = Field(default_factory=list, alias="accessRules")

    _normalize_text = field_validator("id", "name", "invite", mode="before")(_text_or_none)
    _normalize_rules = field_validator("access_rules", mode="before")(_relation_rows)


class RawMembership(ContentBaseModel):
    """A row of the user/group junction collection."""

    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    group: RawGroup | None = Field(default=None, alias="Groups_id")
    user_id: str | None = Field(default=None, alias="directus_users_id")

    _normalize_id = field_validator("id", mode="before")(_text_or_none)
    _normalize_group = field_validator("group", mode="before")(_relation_or_none)
    _normalize_user = field_validator("user_id", mode="before")(_id_or_none)


class RawUser(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    external_identifier: str | None = None
    avatar: str | None = None
    groups: list[RawMembership] = Field(default_factory=list)

    _normalize_text = field_validator(
        "id", "email", "first_name", "external_identifier", mode="before"
    )(_text_or_none)
    _normalize_avatar = field_validator("avatar", mode="before")(_id_or_none)
    _normalize_groups = field_validator("groups", mode="before")(_relation_rows)


class RawCourse(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    organization: str | None = None
    draft: bool | None = None
    content_folder: str | None = Field(default=None, alias="contentFolder")
    repo_url: str | None = Field(default=None, alias="repoUrl")
    repo_folder: str | None = Field(default=None, alias="repoFolder")
    topic: str | None = None

    _normalize_text = field_validator(
        "id", "content_folder", "repo_url", "repo_folder", mode="before"
    )(_text_or_none)
    _normalize_relations = field_validator("organization", "topic", mode="before")(_id_or_none)
    _normalize_draft = field_validator("draft", mode="before")(_bool_or_none)


class RawTopic(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    id: str | None = None
    title: str | None = None
    lead: str | None = None
    order: float | None = None
    courses: list[RawCourse] = Field(default_factory=list)

    _normalize_text = field_validator("id", "title", "lead", mode="before")(_text_or_none)
    _normalize_order = field_validator("order", mode="before")(_number_or_none)
    _normalize_courses = field_validator("courses", mode="before")(_relation_rows)


class RawSubscription(ContentBaseModel):
    _logged_extra_keys: ClassVar[set[str]] = set()

    email: str | None = None
    topics: str | None = None

    _normalize_text = field_validator("email", "topics", mode="before")(_text_or_none)


class ErrorDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = "Unknown error"
    extensions: dict[str, object] = Field(default_factory=dict)

    @property
    def code(self) -> str | None:
        code = self.extensions.get("code")
        return code if isinstance(code, str) else None


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    errors: list[ErrorDetail] = Field(default_factory=list)


type RawUserInput = RawUser | Mapping[str, object]
type RawGroupInput = RawGroup | Mapping[str, object]
type RawTopicInput = RawTopic | Mapping[str, object]
type RawCourseInput = RawCourse | Mapping[str, object]
type RawSubscriptionInput = RawSubscription | Mapping[str, object]
