"""Action matchers: permit/forbid a set of actions, only those, or all of them."""

from __future__ import annotations

from policy_matchers._types import ActionSpec, Polarity
from policy_matchers.config._config import MatchersConfig
from policy_matchers.evaluation._actions import evaluate_actions, normalize_actions
from policy_matchers.evaluation._models import ActionResult
from policy_matchers.exceptions import InvalidArityError, MissingActionsError
from policy_matchers.formatting._formatter import opposite
from policy_matchers.matchers._base import Matcher

__all__ = [
    "ActionsMatcher",
    "AllActionsMatcher",
    "OnlyActionsMatcher",
    "forbid_action",
    "forbid_actions",
    "forbid_all_actions",
    "forbid_edit_and_update_actions",
    "forbid_new_and_create_actions",
    "forbid_only_actions",
    "permit_action",
    "permit_actions",
    "permit_all_actions",
    "permit_edit_and_update_actions",
    "permit_new_and_create_actions",
    "permit_only_actions",
]


def _holds(result: ActionResult, kind: Polarity) -> bool:
    return result.all_permitted if kind == "permit" else result.all_forbidden


def _mismatches(result: ActionResult, kind: Polarity) -> tuple[str, ...]:
    """Declared actions that contradict an expectation of *kind*."""
    return result.forbidden if kind == "permit" else result.permitted


class ActionsMatcher(Matcher):
    """Check that every declared action is permitted (or forbidden).

    Actions outside the declaration are not looked at.

    Example::

        matcher = ActionsMatcher("show", "index", expected="permit")
        matcher.matches(policy)
        matcher.failure_message()
        # "expected 'PostPolicy' to permit ['show', 'index'], but forbade ['index'] for 'alice'"
    """

    def __init__(
        self,
        *actions: ActionSpec,
        expected: Polarity = "permit",
        config: MatchersConfig | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(config=config)
        self.expected: Polarity = expected
        self.actions = normalize_actions(actions)
        if not self.actions:
            raise MissingActionsError(matcher=name or f"{expected}_actions")

    def _evaluate(self, policy: object) -> ActionResult:
        self._policy = policy
        self.last_result = evaluate_actions(
            policy, self.actions, mode="exact", config=self.config
        )
        return self.last_result

    def matches(self, policy: object) -> bool:
        return _holds(self._evaluate(policy), self.expected)

    def does_not_match(self, policy: object) -> bool:
        return _holds(self._evaluate(policy), opposite(self.expected))

    def _message(self, kind: Polarity) -> str:
        policy, result = self._evaluated()
        return self.formatter.format(
            policy,
            expected=kind,
            declared=result.declared,
            mismatches=_mismatches(result, kind),
        )

    def failure_message(self) -> str:
        return self._message(self.expected)

    def failure_message_when_negated(self) -> str:
        return self._message(opposite(self.expected))

    def description(self) -> str:
        return self.formatter.describe(self.expected, self.actions)


class OnlyActionsMatcher(Matcher):
    """Check that exactly the declared actions are permitted (or forbidden).

    Every other action the policy defines must have the opposite outcome.
    The negated form is plain negation: it holds whenever the partition
    is not exact.
    """

    def __init__(
        self,
        *actions: ActionSpec,
        expected: Polarity = "permit",
        config: MatchersConfig | None = None,
    ) -> None:
        super().__init__(config=config)
        self.expected: Polarity = expected
        self.actions = normalize_actions(actions)

    def matches(self, policy: object) -> bool:
        self._policy = policy
        self.last_result = evaluate_actions(policy, self.actions, mode="only", config=self.config)
        if self.expected == "permit":
            return self.last_result.permits_only
        return self.last_result.forbids_only

    def does_not_match(self, policy: object) -> bool:
        return not self.matches(policy)

    def failure_message(self) -> str:
        policy, result = self._evaluated()
        if self.expected == "permit":
            mismatches, extra = result.forbidden, result.extra_permitted
        else:
            mismatches, extra = result.permitted, result.extra_forbidden
        return self.formatter.format(
            policy,
            expected=self.expected,
            declared=result.declared,
            mismatches=mismatches,
            extra=extra,
            only=True,
        )

    def failure_message_when_negated(self) -> str:
        policy, result = self._evaluated()
        return self.formatter.format(
            policy,
            expected=self.expected,
            declared=result.declared,
            mismatches=(),
            only=True,
            negated=True,
        )

    def description(self) -> str:
        return self.formatter.describe(self.expected, self.actions, only=True)


class AllActionsMatcher(Matcher):
    """Check that every action the policy defines is permitted (or forbidden)."""

    def __init__(
        self, *, expected: Polarity = "permit", config: MatchersConfig | None = None
    ) -> None:
        super().__init__(config=config)
        self.expected: Polarity = expected

    def matches(self, policy: object) -> bool:
        self._policy = policy
        self.last_result = evaluate_actions(policy, (), mode="only", config=self.config)
        if self.expected == "permit":
            return not self.last_result.extra_forbidden
        return not self.last_result.extra_permitted

    def does_not_match(self, policy: object) -> bool:
        return not self.matches(policy)

    def failure_message(self) -> str:
        policy, result = self._evaluated()
        mismatches = (
            result.extra_forbidden if self.expected == "permit" else result.extra_permitted
        )
        return self.formatter.format(
            policy, expected=self.expected, declared=None, mismatches=mismatches
        )

    def failure_message_when_negated(self) -> str:
        policy, _ = self._evaluated()
        return self.formatter.format(
            policy, expected=self.expected, declared=None, mismatches=(), negated=True
        )

    def description(self) -> str:
        return self.formatter.describe(self.expected, None)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def permit_actions(*actions: ActionSpec, config: MatchersConfig | None = None) -> ActionsMatcher:
    """Match when every one of *actions* is permitted.

    Example::

        assert_matches(policy, permit_actions("show", "index"))
    """
    return ActionsMatcher(*actions, expected="permit", config=config, name="permit_actions")


def forbid_actions(*actions: ActionSpec, config: MatchersConfig | None = None) -> ActionsMatcher:
    """Match when every one of *actions* is forbidden. Other actions are ignored."""
    return ActionsMatcher(*actions, expected="forbid", config=config, name="forbid_actions")


def _single_action(
    factory: str, actions: tuple[ActionSpec, ...], expected: Polarity, config: MatchersConfig | None
) -> ActionsMatcher:
    names = normalize_actions(actions)
    if len(names) != 1:
        raise InvalidArityError(matcher=factory, count=len(names))
    return ActionsMatcher(*names, expected=expected, config=config, name=factory)


def permit_action(*action: ActionSpec, config: MatchersConfig | None = None) -> ActionsMatcher:
    """Match when the single *action* is permitted.

    Raises:
        InvalidArityError: If not exactly one action is given.
    """
    return _single_action("permit_action", action, "permit", config)


def forbid_action(*action: ActionSpec, config: MatchersConfig | None = None) -> ActionsMatcher:
    """Match when the single *action* is forbidden.

    Raises:
        InvalidArityError: If not exactly one action is given.
    """
    return _single_action("forbid_action", action, "forbid", config)


def permit_only_actions(
    *actions: ActionSpec, config: MatchersConfig | None = None
) -> OnlyActionsMatcher:
    """Match when *actions* are permitted and every other action is forbidden.

    Example::

        assert_matches(policy, permit_only_actions("show", "index"))
    """
    return OnlyActionsMatcher(*actions, expected="permit", config=config)


def forbid_only_actions(
    *actions: ActionSpec, config: MatchersConfig | None = None
) -> OnlyActionsMatcher:
    """Match when *actions* are forbidden and every other action is permitted."""
    return OnlyActionsMatcher(*actions, expected="forbid", config=config)


def permit_all_actions(*, config: MatchersConfig | None = None) -> AllActionsMatcher:
    """Match when the policy permits every action it defines."""
    return AllActionsMatcher(expected="permit", config=config)


def forbid_all_actions(*, config: MatchersConfig | None = None) -> AllActionsMatcher:
    """Match when the policy forbids every action it defines."""
    return AllActionsMatcher(expected="forbid", config=config)


def permit_new_and_create_actions(*, config: MatchersConfig | None = None) -> ActionsMatcher:
    return permit_actions("new", "create", config=config)


def forbid_new_and_create_actions(*, config: MatchersConfig | None = None) -> ActionsMatcher:
    return forbid_actions("new", "create", config=config)


def permit_edit_and_update_actions(*, config: MatchersConfig | None = None) -> ActionsMatcher:
    return permit_actions("edit", "update", config=config)


def forbid_edit_and_update_actions(*, config: MatchersConfig | None = None) -> ActionsMatcher:
    return forbid_actions("edit", "update", config=config)
