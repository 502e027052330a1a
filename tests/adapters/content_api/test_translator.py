"""Translator tests for Content API records."""

from __future__ import annotations

import pytest

from coursehub.adapters.content_api import (
    ANONYMOUS_NAME,
    CONTENT_ROOT,
    RawTopic,
    map_course,
    map_group,
    map_subscription,
    map_topic,
    map_user,
)
from coursehub.domain.model import CourseRepo, GroupInvite, GroupMembership


def test_map_user_builds_domain_user(user_record: dict[str, object]) -> None:
    user = map_user(user_record, assets_base_url="https://cms.example.test/")

    assert user.id == "6f1c2d9e-4b1a-4c55-9d0e-2a7c1b3e8f10"
    assert user.email == "jana.novakova@example.com"
    assert user.name == "Jana"
    assert user.avatar_url == (
        "https://cms.example.test/assets/b3c0a9d2-7e61-4f0a-8c2b-5d9e1f4a6b77"
    )
    assert user.groups == (
        GroupMembership(id="czechitas-2024", name="Czechitas 2024"),
        GroupMembership(id="mentors", name="Mentors"),
    )


def test_map_user_concatenates_rules_in_membership_order(user_record: dict[str, object]) -> None:
    user = map_user(user_record)

    assert user.access_rules == (
        "course:daweb/zaklady",
        "course:daweb/pokrocile",
        "course:daweb/zaklady",
        "solutions:*",
        "mentor",
    )
    assert user.has_access("mentor")


@pytest.mark.parametrize(
    ("first_name", "external_identifier", "email", "expected"),
    [
        ("Jana", "jnovakova", "jana@example.com", "Jana"),
        (None, "jnovakova", "jana@example.com", "jnovakova"),
        ("", "jnovakova", "jana@example.com", "jnovakova"),
        ("   ", None, "jana@example.com", "jana@example.com"),
        (None, "", "jana@example.com", "jana@example.com"),
        (None, None, None, ANONYMOUS_NAME),
        ("", "", "", ANONYMOUS_NAME),
    ],
)
def test_map_user_name_fallback_chain(
    first_name: str | None,
    external_identifier: str | None,
    email: str | None,
    expected: str,
) -> None:
    user = map_user(
        {
            "id": "u1",
            "email": email,
            "first_name": first_name,
            "external_identifier": external_identifier,
            "avatar": None,
            "groups": [],
        }
    )

    assert user.name == expected


def test_map_user_without_avatar_or_groups() -> None:
    user = map_user({"id": "u1", "email": "a@x.com", "avatar": None, "groups": None})

    assert user.avatar_url is None
    assert user.access_rules == ()
    assert user.groups == ()


def test_map_user_without_assets_base_url_uses_relative_asset_path() -> None:
    user = map_user({"id": "u1", "avatar": "file-1"})

    assert user.avatar_url == "/assets/file-1"


def test_map_user_tolerates_missing_fields() -> None:
    user = map_user({})

    assert user.id == ""
    assert user.email is None
    assert user.name == ANONYMOUS_NAME
    assert user.groups == ()


def test_map_user_accepts_unexpanded_group_reference() -> None:
    user = map_user({"id": "u1", "groups": [{"id": 1, "Groups_id": "mentors"}]})

    assert user.groups == (GroupMembership(id="mentors", name=None),)
    assert user.access_rules == ()


def test_map_group_copies_fields(group_record: dict[str, object]) -> None:
    group = map_group(group_record)

    assert group.id == "mentors"
    assert group.name == "Mentors"
    assert group.invite is GroupInvite.OPEN
    assert group.is_open
    assert group.access_rules == ("solutions:*", "mentor")


@pytest.mark.parametrize("rules", [None, [], "not-a-list"])
def test_map_group_defaults_rules_to_empty(rules: object) -> None:
    group = map_group({"id": "g1", "name": "G", "invite": "closed", "accessRules": rules})

    assert group.access_rules == ()
    assert group.invite is GroupInvite.CLOSED


@pytest.mark.parametrize("invite", [None, "invite-only", 3])
def test_map_group_unknown_invite_is_none(invite: object) -> None:
    group = map_group({"id": "g1", "name": "G", "invite": invite})

    assert group.invite is GroupInvite.NONE


def test_map_course_without_repo() -> None:
    course = map_course(
        {
            "id": "daweb-zaklady",
            "organization": "czechitas",
            "draft": False,
            "contentFolder": "/daweb/zaklady",
            "repoUrl": None,
            "repoFolder": "/ignored",
            "topic": {"id": "web"},
        }
    )

    assert course.name == "daweb-zaklady"
    assert course.folder == f"{CONTENT_ROOT}/daweb/zaklady"
    assert course.topic == "web"
    assert course.organization == "czechitas"
    assert course.draft is False
    assert course.repo is None


def test_map_course_repo_folder_defaults_to_content_folder() -> None:
    course = map_course(
        {
            "id": "daweb-pokrocile",
            "contentFolder": "/daweb/pokrocile",
            "repoUrl": "https://github.com/example/daweb-pokrocile",
            "repoFolder": None,
        }
    )

    assert course.repo == CourseRepo(
        url="https://github.com/example/daweb-pokrocile",
        folder=course.folder,
    )
    assert course.draft is None


def test_map_course_repo_folder_override_is_prefixed() -> None:
    course = map_course(
        {
            "id": "python-uvod",
            "contentFolder": "/python/uvod",
            "repoUrl": "https://github.com/example/python-kurzy",
            "repoFolder": "/kurzy/uvod",
        }
    )

    assert course.repo is not None
    assert course.repo.folder == "/content/kurzy/uvod"


def test_map_course_blank_repo_url_means_no_repo() -> None:
    course = map_course({"id": "c1", "contentFolder": "/c1", "repoUrl": "  "})

    assert course.repo is None


def test_map_course_accepts_unexpanded_topic_and_relative_folder() -> None:
    course = map_course({"id": "c1", "contentFolder": "c1", "topic": "web"})

    assert course.folder == "/content/c1"
    assert course.topic == "web"


def test_map_topic_keeps_course_order(topic_records: list[dict[str, object]]) -> None:
    topic = map_topic(topic_records[0])

    assert topic.name == "web"
    assert topic.title == "Webové stránky"
    assert topic.lead == "Naučte se stavět weby od základů."
    assert [course.name for course in topic.courses] == ["daweb-zaklady", "daweb-pokrocile"]
    assert topic.find_course("daweb-pokrocile") is topic.courses[1]
    assert topic.find_course("missing") is None


def test_map_topic_is_deterministic(topic_records: list[dict[str, object]]) -> None:
    for record in topic_records:
        assert map_topic(record) == map_topic(record)
        assert map_topic(RawTopic.model_validate(record)) == map_topic(record)


def test_map_topic_without_courses() -> None:
    topic = map_topic({"id": "empty", "title": "Empty", "courses": None})

    assert topic.courses == ()
    assert topic.lead is None


def test_map_subscription_splits_topics() -> None:
    subscription = map_subscription({"email": "a@x.com", "topics": "web | python | web"})

    assert subscription.email == "a@x.com"
    assert subscription.topic_names == ("web", "python", "web")


def test_map_subscription_with_null_topics() -> None:
    subscription = map_subscription({"email": "a@x.com", "topics": None})

    assert subscription.topics is None
    assert subscription.topic_names == ()
