"""Layered configuration for policy-matchers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

__all__ = [
    "MatchersConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]


@dataclass(frozen=True, slots=True)
class MatchersConfig:
    """Settings shared by evaluators, matchers, and the message formatter.

    Attributes:
        user_alias: Name of the policy attribute holding the subject
            (``"user"`` for most policies, ``"account"`` for some).
        user_aliases: Per-policy overrides of ``user_alias``, keyed by
            policy class name.
        predicate_prefix: Prefix of action predicate methods. With the
            default ``"can_"``, action ``"show"`` maps to ``can_show()``.
        actions_method: Name of an optional policy method enumerating
            every action the policy knows about.
        log_evaluations: Emit DEBUG records for every evaluation.

    Example::

        config = MatchersConfig(user_aliases={"BillingPolicy": "account"})
        merged = config.merge(predicate_prefix="may_")
    """

    user_alias: str = "user"
    user_aliases: Mapping[str, str] = field(default_factory=dict, hash=False)
    predicate_prefix: str = "can_"
    actions_method: str = "known_actions"
    log_evaluations: bool = False

    def __post_init__(self) -> None:
        if not self.user_alias.isidentifier():
            raise ValueError(f"user_alias must be a valid identifier, got {self.user_alias!r}")
        for policy, alias in self.user_aliases.items():
            if not isinstance(alias, str) or not alias.isidentifier():
                raise ValueError(
                    f"user_aliases[{policy!r}] must be a valid identifier, got {alias!r}"
                )
        object.__setattr__(self, "user_aliases", dict(self.user_aliases))
        if self.predicate_prefix and not self.predicate_prefix.isidentifier():
            raise ValueError(
                f"predicate_prefix must be empty or a valid identifier prefix, "
                f"got {self.predicate_prefix!r}"
            )
        if not self.actions_method.isidentifier():
            raise ValueError(
                f"actions_method must be a valid identifier, got {self.actions_method!r}"
            )

    def predicate_name(self, action: str) -> str:
        """Return the policy method name answering *action*.

        Example::

            MatchersConfig().predicate_name("show")  # "can_show"
        """
        return f"{self.predicate_prefix}{action}"

    def user_alias_for(self, policy_name: str) -> str:
        """Return the subject attribute name for the policy class *policy_name*."""
        return self.user_aliases.get(policy_name, self.user_alias)

    def merge(
        self,
        *,
        user_alias: str | None = None,
        user_aliases: Mapping[str, str] | None = None,
        predicate_prefix: str | None = None,
        actions_method: str | None = None,
        log_evaluations: bool | None = None,
    ) -> MatchersConfig:
        """Return a new config with non-None overrides applied.

        Args:
            user_alias: Override for user_alias (ignored if None).
            user_aliases: Replacement for user_aliases (ignored if None).
            predicate_prefix: Override for predicate_prefix (ignored if None).
            actions_method: Override for actions_method (ignored if None).
            log_evaluations: Override for log_evaluations (ignored if None).

        Returns:
            A new ``MatchersConfig`` with overrides merged.
        """
        return MatchersConfig(
            user_alias=(user_alias if user_alias is not None else self.user_alias),
            user_aliases=(user_aliases if user_aliases is not None else self.user_aliases),
            predicate_prefix=(
                predicate_prefix if predicate_prefix is not None else self.predicate_prefix
            ),
            actions_method=(actions_method if actions_method is not None else self.actions_method),
            log_evaluations=(
                log_evaluations if log_evaluations is not None else self.log_evaluations
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = MatchersConfig()


def get_global_config() -> MatchersConfig:
    """Return the current global configuration.

    Matchers read it once, when they are constructed, unless an explicit
    ``config=`` is passed.
    """
    return _global_config


def configure(
    *,
    user_alias: str | None = None,
    user_aliases: Mapping[str, str] | None = None,
    predicate_prefix: str | None = None,
    actions_method: str | None = None,
    log_evaluations: bool | None = None,
) -> MatchersConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. A new *user_aliases* mapping
    replaces the previous one. Returns the new global config.

    Example::

        configure(user_alias="account")
        # Failure messages now name policy.account

        configure(user_aliases={"BillingPolicy": "account"})
        # Only BillingPolicy is rendered with policy.account
    """
    global _global_config
    _global_config = _global_config.merge(
        user_alias=user_alias,
        user_aliases=user_aliases,
        predicate_prefix=predicate_prefix,
        actions_method=actions_method,
        log_evaluations=log_evaluations,
    )
    return _global_config


def _set_global_config(cfg: MatchersConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = MatchersConfig()
