"""Flatten access rules across group memberships."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import RawAccessRule, RawMembership


def group_rules(rule_objects: Iterable[RawAccessRule]) -> list[str]:
    """Return the rule identifiers of one group, skipping rows without a rule."""

    return [rule_object.rule for rule_object in rule_objects if rule_object.rule is not None]


def aggregate_rules(memberships: Iterable[RawMembership]) -> list[str]:
    """Concatenate the rules of every linked group in membership order.

    The result is a multiset: a rule granted by two groups appears twice, and
    nothing is sorted.
    """

    rules: list[str] = []
    for membership in memberships:
        if membership.group is None:
            continue
        rules.extend(group_rules(membership.group.access_rules))
    return rules
