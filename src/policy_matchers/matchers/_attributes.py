"""Attribute matchers: permit/forbid mass assignment of (nested) attributes."""

from __future__ import annotations

from policy_matchers._types import AttributeSpec, Polarity
from policy_matchers.config._config import MatchersConfig
from policy_matchers.evaluation._attributes import evaluate_attributes, normalize_attributes
from policy_matchers.evaluation._models import AttributePath, AttributeResult
from policy_matchers.exceptions import InvalidArityError, InvalidAttributeError
from policy_matchers.formatting._formatter import opposite
from policy_matchers.matchers._base import Matcher

__all__ = [
    "AttributesMatcher",
    "forbid_attribute",
    "forbid_attributes",
    "permit_attribute",
    "permit_attributes",
]

_NOUN = "the mass assignment of "


class AttributesMatcher(Matcher):
    """Check that declared attributes are permitted (or forbidden) for mass assignment.

    Attributes are read from ``permitted_attributes()``, or from the
    action-specific accessor once ``for_action`` is set.

    Example::

        matcher = permit_attributes("title", {"author": ["name"]}).for_action("update")
        assert matcher.matches(policy), matcher.failure_message()
    """

    def __init__(
        self,
        *attributes: AttributeSpec,
        expected: Polarity = "permit",
        config: MatchersConfig | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(config=config)
        self.expected: Polarity = expected
        self.attributes: tuple[AttributePath, ...] = normalize_attributes(attributes)
        self.action: str | None = None
        if not self.attributes:
            raise InvalidAttributeError(
                f"{name or f'{expected}_attributes'} requires at least one attribute"
            )

    def for_action(self, action: str) -> AttributesMatcher:
        """Scope the check to the permitted attributes of *action*. Returns self."""
        self.action = action
        return self

    def _evaluate(self, policy: object) -> AttributeResult:
        self._policy = policy
        self.last_result = evaluate_attributes(
            policy, self.attributes, action=self.action, config=self.config
        )
        return self.last_result

    @staticmethod
    def _holds(result: AttributeResult, kind: Polarity) -> bool:
        return result.all_permitted if kind == "permit" else result.all_forbidden

    def matches(self, policy: object) -> bool:
        return self._holds(self._evaluate(policy), self.expected)

    def does_not_match(self, policy: object) -> bool:
        return self._holds(self._evaluate(policy), opposite(self.expected))

    @property
    def _context(self) -> str:
        if self.action is None:
            return ""
        return f" when authorising the '{self.action}' action"

    def _message(self, kind: Polarity) -> str:
        policy, result = self._evaluated()
        return self.formatter.format(
            policy,
            expected=kind,
            declared=result.declared,
            mismatches=result.unmatched if kind == "permit" else result.matched,
            noun=_NOUN,
            context=self._context,
        )

    def failure_message(self) -> str:
        return self._message(self.expected)

    def failure_message_when_negated(self) -> str:
        return self._message(opposite(self.expected))

    def description(self) -> str:
        return self.formatter.describe(
            self.expected, self.attributes, noun=_NOUN, context=self._context
        )


def permit_attributes(
    *attributes: AttributeSpec, config: MatchersConfig | None = None
) -> AttributesMatcher:
    """Match when every declared attribute path is permitted.

    Example::

        assert_matches(policy, permit_attributes("title", {"tags": ["name"]}))
    """
    return AttributesMatcher(
        *attributes, expected="permit", config=config, name="permit_attributes"
    )


def forbid_attributes(
    *attributes: AttributeSpec, config: MatchersConfig | None = None
) -> AttributesMatcher:
    """Match when no declared attribute path is permitted."""
    return AttributesMatcher(
        *attributes, expected="forbid", config=config, name="forbid_attributes"
    )


def _single_attribute(
    factory: str,
    attributes: tuple[AttributeSpec, ...],
    expected: Polarity,
    config: MatchersConfig | None,
) -> AttributesMatcher:
    paths = normalize_attributes(attributes)
    if len(paths) != 1:
        raise InvalidArityError(matcher=factory, count=len(paths), noun="attribute")
    return AttributesMatcher(*paths, expected=expected, config=config, name=factory)


def permit_attribute(
    *attribute: AttributeSpec, config: MatchersConfig | None = None
) -> AttributesMatcher:
    """Match when the single attribute path is permitted.

    Raises:
        InvalidArityError: If not exactly one attribute path is given.
    """
    return _single_attribute("permit_attribute", attribute, "permit", config)


def forbid_attribute(
    *attribute: AttributeSpec, config: MatchersConfig | None = None
) -> AttributesMatcher:
    """Match when the single attribute path is forbidden.

    Raises:
        InvalidArityError: If not exactly one attribute path is given.
    """
    return _single_attribute("forbid_attribute", attribute, "forbid", config)
