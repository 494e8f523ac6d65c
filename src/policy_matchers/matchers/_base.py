"""Matcher base class: the hooks an assertion layer calls."""

from __future__ import annotations

import abc
from typing import Any

from policy_matchers.config._config import MatchersConfig, get_global_config
from policy_matchers.exceptions import MatcherError
from policy_matchers.formatting._formatter import FailureMessageFormatter

__all__ = ["Matcher"]


class Matcher(abc.ABC):
    """Base class for policy matchers.

    A matcher is evaluated with ``matches(policy)`` or
    ``does_not_match(policy)``; afterwards ``failure_message()`` or
    ``failure_message_when_negated()`` explain a failed expectation.
    Each evaluation replaces ``last_result``; nothing else is kept
    between calls.

    Subclasses implement the five hooks; the base class cannot be
    instantiated.

    Matchers combine with ``&``::

        matcher = permit_actions("show") & forbid_actions("destroy")
        assert matcher.matches(policy), matcher.failure_message()
    """

    def __init__(self, *, config: MatchersConfig | None = None) -> None:
        self.config = config if config is not None else get_global_config()
        self.formatter = FailureMessageFormatter(self.config)
        self.last_result: Any = None
        self._policy: object | None = None

    @abc.abstractmethod
    def matches(self, policy: object) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def does_not_match(self, policy: object) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def failure_message(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def failure_message_when_negated(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def description(self) -> str:
        raise NotImplementedError

    def _evaluated(self) -> tuple[object, Any]:
        """Return the last evaluated policy and result, or raise if none."""
        if self.last_result is None:
            raise MatcherError(
                f"{type(self).__name__} has not been evaluated; "
                f"call matches() or does_not_match() first"
            )
        return self._policy, self.last_result

    def __and__(self, other: Matcher) -> Matcher:
        from policy_matchers.matchers._compound import AllOfMatcher

        return AllOfMatcher(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description()!r})"
