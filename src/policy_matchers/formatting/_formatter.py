"""Failure message rendering shared by every matcher."""

from __future__ import annotations

from collections.abc import Sequence

from policy_matchers._types import Polarity
from policy_matchers.config._config import MatchersConfig
from policy_matchers.evaluation._actions import policy_name
from policy_matchers.evaluation._models import AttributePath, render_paths

__all__ = ["FailureMessageFormatter", "opposite", "past_tense"]

_PAST_TENSE: dict[str, str] = {"permit": "permitted", "forbid": "forbade"}
_OPPOSITE: dict[str, Polarity] = {"permit": "forbid", "forbid": "permit"}


def opposite(kind: Polarity) -> Polarity:
    """Return the other polarity."""
    return _OPPOSITE[kind]


def past_tense(kind: Polarity) -> str:
    """Return ``"permitted"`` or ``"forbade"``."""
    return _PAST_TENSE[kind]


class FailureMessageFormatter:
    """Render ``expected '<Policy>' to <kind> <items>, but <kind> <items> for '<user>'``.

    The expected and observed kinds are parameters, so the same template
    serves both polarities and both the plain and negated messages.
    Items are rendered in the order given; callers pass declaration order
    for declared items and lexical order for extras.

    Example::

        formatter = FailureMessageFormatter(MatchersConfig())
        formatter.format(policy, expected="permit", declared=("create",),
                         mismatches=("create",))
        # "expected 'PostPolicy' to permit ['create'], but forbade ['create'] for 'alice'"
    """

    def __init__(self, config: MatchersConfig) -> None:
        self.config = config

    def user_label(self, policy: object) -> str | None:
        """Return the rendered subject of *policy*, or None if it has none.

        The attribute name comes from ``user_aliases`` for the policy's class,
        falling back to ``user_alias``.
        """
        alias = self.config.user_alias_for(policy_name(policy))
        user = getattr(policy, alias, None)
        if user is None:
            return None
        return str(user)

    def describe(
        self,
        expected: Polarity,
        declared: Sequence[AttributePath] | None,
        *,
        only: bool = False,
        noun: str = "",
        context: str = "",
    ) -> str:
        """Return the expectation phrase, e.g. ``permit only ['show']``.

        ``declared=None`` stands for every action of the policy.
        """
        if declared is None:
            items = "all actions"
        else:
            items = f"{noun}{render_paths(tuple(declared))}"
        qualifier = " only" if only else ""
        return f"{expected}{qualifier} {items}{context}"

    def format(
        self,
        policy: object,
        *,
        expected: Polarity,
        declared: Sequence[AttributePath] | None,
        mismatches: Sequence[AttributePath],
        actual: Polarity | None = None,
        extra: Sequence[AttributePath] = (),
        only: bool = False,
        negated: bool = False,
        noun: str = "",
        context: str = "",
    ) -> str:
        """Build a failure message.

        Args:
            policy: The policy under test.
            expected: The polarity the test expected.
            declared: Declared items, or None for "all actions".
            mismatches: Items observed with the *actual* polarity.
            actual: Observed polarity; defaults to the opposite of *expected*.
            extra: Undeclared items observed with the opposite of *actual*.
            only: Render the expectation as "only".
            negated: Render ``not to`` instead of ``to``.
            noun: Prefix for item lists (``"the mass assignment of "``).
            context: Suffix for the expectation (``" when authorising ..."``).
        """
        observed = actual if actual is not None else opposite(expected)
        expectation = self.describe(expected, declared, only=only, noun=noun, context=context)
        verb = "not to" if negated else "to"

        clauses: list[str] = []
        if mismatches:
            clauses.append(f"{past_tense(observed)} {noun}{render_paths(tuple(mismatches))}")
        if extra:
            clauses.append(f"{past_tense(opposite(observed))} {noun}{render_paths(tuple(extra))}")
        outcome = " and ".join(clauses) if clauses else "it did"

        message = f"expected '{policy_name(policy)}' {verb} {expectation}, but {outcome}"
        user = self.user_label(policy)
        if user is not None:
            message += f" for '{user}'"
        return message
