"""Compound matcher built with ``&``."""

from __future__ import annotations

from policy_matchers.exceptions import UnsupportedNegationError
from policy_matchers.matchers._base import Matcher

__all__ = ["AllOfMatcher"]


class AllOfMatcher(Matcher):
    """Match when every wrapped matcher matches.

    All parts are evaluated, so the failure message lists every failing
    part, one per line. Negation is ambiguous and therefore refused.

    Example::

        matcher = permit_actions("show") & forbid_actions("destroy")
    """

    def __init__(self, *matchers: Matcher) -> None:
        super().__init__(config=matchers[0].config if matchers else None)
        parts: list[Matcher] = []
        for matcher in matchers:
            if isinstance(matcher, AllOfMatcher):
                parts.extend(matcher.matchers)
            else:
                parts.append(matcher)
        self.matchers: tuple[Matcher, ...] = tuple(parts)
        self._failed: tuple[Matcher, ...] = ()

    def matches(self, policy: object) -> bool:
        self._policy = policy
        self._failed = tuple([m for m in self.matchers if not m.matches(policy)])
        self.last_result = tuple(m.last_result for m in self.matchers)
        return not self._failed

    def does_not_match(self, policy: object) -> bool:
        raise UnsupportedNegationError(
            f"negating {self.description()!r} is ambiguous; negate each part instead"
        )

    def failure_message(self) -> str:
        self._evaluated()
        return "\n".join(m.failure_message() for m in self._failed)

    def failure_message_when_negated(self) -> str:
        raise UnsupportedNegationError("compound matchers do not support negation")

    def description(self) -> str:
        return " and ".join(m.description() for m in self.matchers)
