"""Logging for policy evaluations and matcher outcomes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from policy_matchers.evaluation._models import ActionResult, AttributeResult

__all__ = [
    "log_action_evaluation",
    "log_attribute_evaluation",
    "log_matcher_failure",
    "log_unknown_actions",
]

logger = logging.getLogger("policy_matchers")


def log_action_evaluation(result: ActionResult, *, mode: str) -> None:
    """Log the partition produced by an action evaluation at DEBUG level.

    Example::

        log_action_evaluation(result, mode="only")
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Action evaluation: %s (%s): permitted=%s forbidden=%s "
        "extra_permitted=%s extra_forbidden=%s",
        result.policy_name,
        mode,
        list(result.permitted),
        list(result.forbidden),
        list(result.extra_permitted),
        list(result.extra_forbidden),
    )


def log_attribute_evaluation(result: AttributeResult) -> None:
    """Log the partition produced by an attribute evaluation at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Attribute evaluation: %s action=%s: matched=%r unmatched=%r",
        result.policy_name,
        result.action if result.action is not None else "<any>",
        list(result.matched),
        list(result.unmatched),
    )


def log_unknown_actions(*, policy_name: str, actions: Sequence[str]) -> None:
    """Log declared actions that have no predicate on the policy.

    Uses the ``policy_matchers.unknown_action`` sub-logger so the warning
    can be silenced on its own.
    """
    unknown_logger = logging.getLogger("policy_matchers.unknown_action")
    unknown_logger.warning(
        "'%s' does not implement %r",
        policy_name,
        list(actions),
    )


def log_matcher_failure(*, description: str, message: str) -> None:
    """Log a failed matcher evaluation at INFO level."""
    logger.info("Matcher %r failed: %s", description, message)
