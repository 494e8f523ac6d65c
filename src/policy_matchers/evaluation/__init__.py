"""Evaluators that partition declared actions and attributes against a policy."""

from __future__ import annotations

from policy_matchers.evaluation._actions import (
    evaluate_actions,
    normalize_actions,
    policy_actions,
    policy_name,
)
from policy_matchers.evaluation._attributes import (
    PermittedAttributes,
    evaluate_attributes,
    normalize_attributes,
    permitted_attributes,
)
from policy_matchers.evaluation._models import (
    ActionResult,
    AttributePath,
    AttributeResult,
    NestedAttribute,
)

__all__ = [
    "ActionResult",
    "AttributePath",
    "AttributeResult",
    "NestedAttribute",
    "PermittedAttributes",
    "evaluate_actions",
    "evaluate_attributes",
    "normalize_actions",
    "normalize_attributes",
    "permitted_attributes",
    "policy_actions",
    "policy_name",
]
