"""Stub policy factory for testing policy matchers and policy-aware code."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from policy_matchers._types import AttributeSpec
from policy_matchers.config._config import MatchersConfig, get_global_config

__all__ = ["make_policy"]


def _predicate(action: str, allowed: bool) -> Callable[[Any], bool]:
    def _check(self: Any) -> bool:
        self.calls.append(action)
        return allowed

    _check.__name__ = action
    return _check


def make_policy(
    actions: Mapping[str, bool] | None = None,
    /,
    *,
    name: str = "TestPolicy",
    user: object = "user",
    attributes: AttributeSpec | None = None,
    attributes_for: Mapping[str, AttributeSpec] | None = None,
    config: MatchersConfig | None = None,
    **predicates: bool,
) -> Any:
    """Build a policy instance with fixed answers.

    Every action becomes a predicate method named with the configured
    prefix (``can_show`` by default). Each call is appended to the
    instance's ``calls`` list, so tests can check what was queried.

    Args:
        actions: Mapping of action name to its fixed answer.
        name: Class name of the generated policy.
        user: Value stored under the subject attribute, ``user_aliases[name]``
            or else ``user_alias``.
        attributes: Result of ``permitted_attributes()``; omitted if None.
        attributes_for: Per-action results of ``permitted_attributes_for_<action>()``.
        config: Optional config; defaults to the global config.
        **predicates: More actions, merged over *actions*. An action whose
            name clashes with one of the options above (``name``, ``user``,
            ``attributes``, ``attributes_for``, ``config``) must be passed
            in the positional *actions* mapping instead, as in
            ``make_policy({"name": True})``.

    Returns:
        An instance of a freshly created policy class.

    Example::

        policy = make_policy(show=True, create=False, attributes=["title"])
        policy.can_show()  # True
        policy.calls       # ["show"]
    """
    cfg = config if config is not None else get_global_config()
    alias = cfg.user_alias_for(name)
    answers = {**(actions or {}), **predicates}

    namespace: dict[str, Any] = {
        cfg.predicate_name(action): _predicate(action, bool(allowed))
        for action, allowed in answers.items()
    }
    if attributes is not None:
        namespace["permitted_attributes"] = lambda self: attributes
    for action, spec in (attributes_for or {}).items():
        namespace[f"permitted_attributes_for_{action}"] = lambda self, _spec=spec: _spec

    def _init(self: Any) -> None:
        self.calls = []
        setattr(self, alias, user)

    namespace["__init__"] = _init
    namespace["__repr__"] = lambda self: f"<{name} {alias}={user!r}>"
    return type(name, (), namespace)()
