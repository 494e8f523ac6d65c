"""Tests for policy_matchers.testing._assertions: assertion helpers."""

from __future__ import annotations

import pytest

from policy_matchers.exceptions import UnknownActionError
from policy_matchers.matchers._actions import forbid_only_actions, permit_actions
from policy_matchers.matchers._attributes import permit_attributes
from policy_matchers.testing._assertions import (
    assert_does_not_match,
    assert_forbids,
    assert_matches,
    assert_permits,
)
from tests.conftest import PostPolicy


class TestAssertMatches:
    """assert_matches raises AssertionError with the failure message."""

    def test_passes(self, author_policy: PostPolicy) -> None:
        assert_matches(author_policy, forbid_only_actions("destroy"))

    def test_fails_with_message(self, author_policy: PostPolicy) -> None:
        with pytest.raises(AssertionError) as exc_info:
            assert_matches(author_policy, permit_actions("destroy"))
        assert str(exc_info.value) == (
            "expected 'PostPolicy' to permit ['destroy'], but forbade ['destroy'] for 'alice'"
        )

    def test_attribute_matcher(self, author_policy: PostPolicy) -> None:
        assert_matches(author_policy, permit_attributes("slug").for_action("create"))

    def test_unknown_action_is_not_an_assertion_error(self, author_policy: PostPolicy) -> None:
        with pytest.raises(UnknownActionError):
            assert_matches(author_policy, permit_actions("publish"))


class TestAssertDoesNotMatch:
    """assert_does_not_match raises with the negated failure message."""

    def test_passes(self, viewer_policy: PostPolicy) -> None:
        assert_does_not_match(viewer_policy, permit_actions("update", "destroy"))

    def test_fails_with_negated_message(self, author_policy: PostPolicy) -> None:
        with pytest.raises(AssertionError, match=r"to forbid \['show'\], but permitted \['show'\]"):
            assert_does_not_match(author_policy, permit_actions("show"))


class TestShortcuts:
    def test_assert_permits(self, author_policy: PostPolicy) -> None:
        assert_permits(author_policy, "show", "update")

    def test_assert_permits_fails(self, viewer_policy: PostPolicy) -> None:
        with pytest.raises(AssertionError, match="but forbade \\['show'\\] for 'bob'"):
            assert_permits(viewer_policy, "index", "show")

    def test_assert_forbids(self, viewer_policy: PostPolicy) -> None:
        assert_forbids(viewer_policy, ["update", "destroy"])

    def test_assert_forbids_fails(self, author_policy: PostPolicy) -> None:
        with pytest.raises(AssertionError, match="but permitted \\['update'\\]"):
            assert_forbids(author_policy, "update", "destroy")
