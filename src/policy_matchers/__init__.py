"""policy-matchers: assertion helpers for testing authorization policies.

Checks that a policy object permits or forbids a declared set of actions
and mass-assignable attributes, and explains failures in plain English.

Example::

    from policy_matchers import forbid_attributes, permit_only_actions
    from policy_matchers.testing import assert_matches

    def test_editor(policy):
        assert_matches(policy, permit_only_actions("show", "update"))
        assert_matches(policy, forbid_attributes("slug").for_action("update"))
"""

from importlib.metadata import PackageNotFoundError, version

from policy_matchers.config._config import MatchersConfig, configure
from policy_matchers.evaluation._actions import evaluate_actions
from policy_matchers.evaluation._attributes import evaluate_attributes
from policy_matchers.evaluation._models import (
    ActionResult,
    AttributeResult,
    NestedAttribute,
)
from policy_matchers.exceptions import (
    InvalidArityError,
    InvalidAttributeError,
    MatcherError,
    MissingActionsError,
    UnknownActionError,
    UnsupportedNegationError,
)
from policy_matchers.formatting._formatter import FailureMessageFormatter
from policy_matchers.matchers import (
    Matcher,
    forbid_action,
    forbid_actions,
    forbid_all_actions,
    forbid_attribute,
    forbid_attributes,
    forbid_edit_and_update_actions,
    forbid_new_and_create_actions,
    forbid_only_actions,
    permit_action,
    permit_actions,
    permit_all_actions,
    permit_attribute,
    permit_attributes,
    permit_edit_and_update_actions,
    permit_new_and_create_actions,
    permit_only_actions,
)

try:
    __version__ = version("policy-matchers")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "ActionResult",
    "AttributeResult",
    "FailureMessageFormatter",
    "InvalidArityError",
    "InvalidAttributeError",
    "Matcher",
    "MatcherError",
    "MatchersConfig",
    "MissingActionsError",
    "NestedAttribute",
    "UnknownActionError",
    "UnsupportedNegationError",
    "configure",
    "evaluate_actions",
    "evaluate_attributes",
    "forbid_action",
    "forbid_actions",
    "forbid_all_actions",
    "forbid_attribute",
    "forbid_attributes",
    "forbid_edit_and_update_actions",
    "forbid_new_and_create_actions",
    "forbid_only_actions",
    "permit_action",
    "permit_actions",
    "permit_all_actions",
    "permit_attribute",
    "permit_attributes",
    "permit_edit_and_update_actions",
    "permit_new_and_create_actions",
    "permit_only_actions",
]
