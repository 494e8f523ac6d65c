"""Import fixtures from policy_matchers.testing for test discovery."""

from policy_matchers.testing._fixtures import isolated_matchers_state, matchers_config

__all__ = ["isolated_matchers_state", "matchers_config"]
