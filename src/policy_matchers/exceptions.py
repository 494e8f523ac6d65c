"""Exception hierarchy for policy-matchers."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "InvalidArityError",
    "InvalidAttributeError",
    "MatcherError",
    "MissingActionsError",
    "UnknownActionError",
    "UnsupportedNegationError",
]


class MatcherError(Exception):
    """Base exception for all policy-matchers errors."""


class InvalidArityError(MatcherError):
    """A single-item matcher was given the wrong number of items.

    Attributes:
        matcher: Name of the matcher factory (e.g. ``"permit_action"``).
        count: Number of items actually supplied.

    Example::

        permit_action("show", "create")
        # InvalidArityError: permit_action expects exactly one action, got 2
    """

    def __init__(self, *, matcher: str, count: int, noun: str = "action") -> None:
        self.matcher = matcher
        self.count = count
        super().__init__(f"{matcher} expects exactly one {noun}, got {count}")


class MissingActionsError(MatcherError):
    """An action matcher was built without any action.

    An empty declaration would satisfy both the matcher and its negation.
    """

    def __init__(self, *, matcher: str) -> None:
        self.matcher = matcher
        super().__init__(f"{matcher} requires at least one action")


class UnknownActionError(MatcherError):
    """The policy has no predicate for one or more declared actions.

    Raised instead of treating the action as forbidden, so a typo in a
    test does not pass as a legitimate denial.

    Attributes:
        policy_name: Class name of the policy under test.
        actions: The declared actions with no predicate, in declaration order.
        not_callable: Predicate names that exist on the policy but are not
            methods, such as a ``@property``. Predicates must be callable.

    Example::

        try:
            permit_actions("pubish").matches(policy)
        except UnknownActionError as exc:
            print(exc.actions)  # ('pubish',)
    """

    def __init__(
        self,
        *,
        policy_name: str,
        actions: Sequence[str],
        not_callable: Sequence[str] = (),
    ) -> None:
        self.policy_name = policy_name
        self.actions = tuple(actions)
        self.not_callable = tuple(not_callable)
        message = f"'{policy_name}' does not implement {list(self.actions)!r}"
        if self.not_callable:
            message += f" (not callable: {list(self.not_callable)!r})"
        super().__init__(message)


class InvalidAttributeError(MatcherError):
    """An attribute declaration is neither a name, a mapping, nor a list of those."""


class UnsupportedNegationError(MatcherError):
    """The matcher cannot be used in a negated expectation."""
