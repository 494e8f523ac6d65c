"""Failure message formatting."""

from __future__ import annotations

from policy_matchers.formatting._formatter import FailureMessageFormatter, opposite, past_tense

__all__ = ["FailureMessageFormatter", "opposite", "past_tense"]
