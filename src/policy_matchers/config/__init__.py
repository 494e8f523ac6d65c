"""Configuration module for policy-matchers."""

from __future__ import annotations

from policy_matchers.config._config import MatchersConfig, configure, get_global_config

__all__ = ["MatchersConfig", "configure", "get_global_config"]
