"""Isolation utilities for the global matchers config in tests."""

from __future__ import annotations

import contextlib
from collections.abc import Generator

from policy_matchers.config._config import (
    MatchersConfig,
    _reset_global_config,
    _set_global_config,
    get_global_config,
)

__all__ = ["isolated_matchers_config"]


@contextlib.contextmanager
def isolated_matchers_config(
    config: MatchersConfig | None = None,
) -> Generator[MatchersConfig, None, None]:
    """Context manager that isolates the global matchers config.

    Saves the current global config, installs *config* (or the defaults),
    yields it, and restores the saved config on exit, even if the body
    raises.

    Example::

        with isolated_matchers_config(MatchersConfig(user_alias="account")) as cfg:
            assert_matches(policy, permit_actions("show"))
        # Original config is restored
    """
    saved_config = get_global_config()
    try:
        if config is None:
            _reset_global_config()
        else:
            _set_global_config(config)
        yield get_global_config()
    finally:
        _set_global_config(saved_config)
