"""policy-matchers testing utilities: stub policies, assertions, and fixtures.

Provides test helpers for verifying authorization policies:

- **make_policy**: Build a policy with fixed answers.
- **Assertion helpers**: ``assert_matches``, ``assert_does_not_match``,
  ``assert_permits``, ``assert_forbids``.
- **Fixtures**: ``matchers_config``, ``isolated_matchers_state``.

Example::

    from policy_matchers import permit_only_actions
    from policy_matchers.testing import assert_matches

    def test_guest_can_only_read():
        assert_matches(PostPolicy(guest, post), permit_only_actions("index", "show"))
"""

from policy_matchers.testing._assertions import (
    assert_does_not_match,
    assert_forbids,
    assert_matches,
    assert_permits,
)
from policy_matchers.testing._fixtures import isolated_matchers_state, matchers_config
from policy_matchers.testing._isolation import isolated_matchers_config
from policy_matchers.testing._policies import make_policy

__all__ = [
    "assert_does_not_match",
    "assert_forbids",
    "assert_matches",
    "assert_permits",
    "isolated_matchers_config",
    "isolated_matchers_state",
    "make_policy",
    "matchers_config",
]
