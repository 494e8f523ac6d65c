"""Policy matchers: match/negate/explain hooks for assertion layers."""

from __future__ import annotations

from policy_matchers.matchers._actions import (
    ActionsMatcher,
    AllActionsMatcher,
    OnlyActionsMatcher,
    forbid_action,
    forbid_actions,
    forbid_all_actions,
    forbid_edit_and_update_actions,
    forbid_new_and_create_actions,
    forbid_only_actions,
    permit_action,
    permit_actions,
    permit_all_actions,
    permit_edit_and_update_actions,
    permit_new_and_create_actions,
    permit_only_actions,
)
from policy_matchers.matchers._attributes import (
    AttributesMatcher,
    forbid_attribute,
    forbid_attributes,
    permit_attribute,
    permit_attributes,
)
from policy_matchers.matchers._base import Matcher
from policy_matchers.matchers._compound import AllOfMatcher

__all__ = [
    "ActionsMatcher",
    "AllActionsMatcher",
    "AllOfMatcher",
    "AttributesMatcher",
    "Matcher",
    "OnlyActionsMatcher",
    "forbid_action",
    "forbid_actions",
    "forbid_all_actions",
    "forbid_attribute",
    "forbid_attributes",
    "forbid_edit_and_update_actions",
    "forbid_new_and_create_actions",
    "forbid_only_actions",
    "permit_action",
    "permit_actions",
    "permit_all_actions",
    "permit_attribute",
    "permit_attributes",
    "permit_edit_and_update_actions",
    "permit_new_and_create_actions",
    "permit_only_actions",
]
