"""Tests for policy_matchers.testing._policies: make_policy."""

from __future__ import annotations

from policy_matchers.config._config import MatchersConfig
from policy_matchers.evaluation._actions import policy_actions
from policy_matchers.evaluation._attributes import permitted_attributes
from policy_matchers.matchers._actions import permit_actions
from policy_matchers.testing._policies import make_policy


class TestMakePolicy:
    def test_predicates(self) -> None:
        policy = make_policy(show=True, create=False)
        assert policy.can_show() is True
        assert policy.can_create() is False

    def test_mapping_and_keywords_merge(self) -> None:
        policy = make_policy({"show": False, "index": True}, show=True)
        assert policy.can_show() is True
        assert policy.can_index() is True

    def test_class_name_and_user(self) -> None:
        policy = make_policy(name="CommentPolicy", user="carol")
        assert type(policy).__name__ == "CommentPolicy"
        assert policy.user == "carol"

    def test_records_calls(self) -> None:
        policy = make_policy(show=True, create=False)
        permit_actions("create", "show").matches(policy)
        assert policy.calls == ["create", "show"]

    def test_actions_are_discoverable(self) -> None:
        assert policy_actions(make_policy(show=True, create=False)) == ("create", "show")

    def test_no_attribute_accessor_by_default(self) -> None:
        policy = make_policy(show=True)
        assert not hasattr(policy, "permitted_attributes")
        assert permitted_attributes(policy) == ()

    def test_attribute_accessors(self) -> None:
        policy = make_policy(attributes=["title"], attributes_for={"create": ["slug"]})
        assert permitted_attributes(policy) == ("title",)
        assert permitted_attributes(policy, "create") == ("slug",)

    def test_custom_config(self) -> None:
        config = MatchersConfig(predicate_prefix="may_", user_alias="account")
        policy = make_policy(show=True, user="acme", config=config)
        assert policy.may_show() is True
        assert policy.account == "acme"
        assert permit_actions("show", config=config).matches(policy)

    def test_instances_are_independent(self) -> None:
        first = make_policy(show=True)
        second = make_policy(show=False)
        assert first.can_show() is True
        assert second.can_show() is False

    def test_actions_named_like_options_go_through_the_mapping(self) -> None:
        policy = make_policy({"name": True, "user": False}, name="ProfilePolicy")
        assert type(policy).__name__ == "ProfilePolicy"
        assert policy.can_name() is True
        assert policy.can_user() is False
        assert policy_actions(policy) == ("name", "user")

    def test_user_stored_under_per_policy_alias(self) -> None:
        config = MatchersConfig(user_aliases={"BillingPolicy": "account"})
        billing = make_policy(show=True, name="BillingPolicy", user="acme", config=config)
        other = make_policy(show=True, user="alice", config=config)
        assert billing.account == "acme"
        assert not hasattr(billing, "user")
        assert other.user == "alice"
