"""Action evaluation: query a policy's predicates for a declared set of actions."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import Any

from policy_matchers._audit import log_action_evaluation, log_unknown_actions
from policy_matchers._types import ActionMode, ActionSpec
from policy_matchers.config._config import MatchersConfig, get_global_config
from policy_matchers.evaluation._models import ActionResult
from policy_matchers.exceptions import UnknownActionError

__all__ = ["evaluate_actions", "normalize_actions", "policy_actions", "policy_name"]

_MODES: set[str] = {"exact", "only"}
_MISSING = object()


def policy_name(policy: object) -> str:
    """Return the display name of *policy* (its class name)."""
    return type(policy).__name__


def normalize_actions(actions: ActionSpec) -> tuple[str, ...]:
    """Flatten *actions* into unique names, keeping first-seen order.

    Strings are taken as single names; any other iterable is flattened
    recursively, so ``("show", ["new", "create"])`` yields three actions.

    Raises:
        TypeError: If an item is neither a string nor an iterable.

    Example::

        normalize_actions(["show", ("show", "create")])  # ("show", "create")
    """
    seen: dict[str, None] = {}

    def _walk(item: Any) -> None:
        if isinstance(item, str):
            seen.setdefault(item, None)
        elif isinstance(item, Iterable):
            for sub in item:
                _walk(sub)
        else:
            raise TypeError(f"action names must be strings, got {item!r}")

    _walk(actions)
    return tuple(seen)


def policy_actions(policy: object, *, config: MatchersConfig | None = None) -> tuple[str, ...]:
    """Return every action *policy* defines, in lexical order.

    Uses the policy's enumeration method (``config.actions_method``) when
    it has one. Otherwise lists public methods whose name starts with
    ``config.predicate_prefix`` and that take no arguments, ignoring
    anything inherited from ``object`` and the permitted-attributes
    accessors. Prefixed helpers such as ``can_access(self, record)`` are
    not actions.

    Example::

        class PostPolicy:
            def can_show(self): return True
            def can_create(self): return False

        policy_actions(PostPolicy())  # ("create", "show")
    """
    cfg = config if config is not None else get_global_config()

    enumerate_fn = getattr(policy, cfg.actions_method, None)
    if callable(enumerate_fn):
        return tuple(sorted(normalize_actions(enumerate_fn())))

    prefix = cfg.predicate_prefix
    reserved = set(dir(object)) | {
        cfg.actions_method,
        cfg.user_alias,
        cfg.user_alias_for(policy_name(policy)),
    }
    actions: set[str] = set()
    for attr in dir(policy):
        if attr.startswith("_") or attr in reserved or not attr.startswith(prefix):
            continue
        if attr.startswith("permitted_attributes"):
            continue
        if _is_predicate(getattr(policy, attr, None)):
            actions.add(attr[len(prefix) :])
    actions.discard("")
    return tuple(sorted(actions))


def _is_predicate(candidate: object) -> bool:
    """Return True if *candidate* can be called without arguments."""
    if not callable(candidate):
        return False
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return True
    return all(
        param.default is not param.empty
        or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def _resolve_predicates(
    policy: object,
    actions: tuple[str, ...],
    cfg: MatchersConfig,
) -> dict[str, Callable[[], Any]]:
    """Look up the predicate of every action or raise for all missing ones."""
    predicates: dict[str, Callable[[], Any]] = {}
    missing: list[str] = []
    not_callable: list[str] = []
    for action in actions:
        attr = cfg.predicate_name(action)
        predicate = getattr(policy, attr, _MISSING)
        if callable(predicate):
            predicates[action] = predicate
            continue
        missing.append(action)
        if predicate is not _MISSING:
            not_callable.append(attr)
    if missing:
        name = policy_name(policy)
        log_unknown_actions(policy_name=name, actions=missing)
        raise UnknownActionError(policy_name=name, actions=missing, not_callable=not_callable)
    return predicates


def _partition(predicates: dict[str, Callable[[], Any]]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    permitted: list[str] = []
    forbidden: list[str] = []
    for action, predicate in predicates.items():
        (permitted if predicate() else forbidden).append(action)
    return tuple(permitted), tuple(forbidden)


def evaluate_actions(
    policy: object,
    actions: ActionSpec,
    *,
    mode: ActionMode = "exact",
    config: MatchersConfig | None = None,
) -> ActionResult:
    """Partition the declared *actions* into permitted and forbidden.

    Every declared action is resolved before any predicate runs, so a
    typo raises ``UnknownActionError`` without touching the policy.
    Predicates are called in declaration order.

    With ``mode="only"``, the policy's remaining actions (see
    ``policy_actions``) are evaluated as well and reported in the
    ``extra_permitted`` / ``extra_forbidden`` fields.

    Args:
        policy: The policy instance under test.
        actions: Action names, possibly nested in lists.
        mode: ``"exact"`` or ``"only"``.
        config: Optional config; defaults to the global config.

    Returns:
        A fresh ``ActionResult``.

    Raises:
        UnknownActionError: If a declared action has no predicate.
        ValueError: If *mode* is not recognised.

    Example::

        result = evaluate_actions(policy, ["show", "create"], mode="only")
        if result.extra_permitted:
            print("also permits", result.extra_permitted)
    """
    if mode not in _MODES:
        raise ValueError(f"mode must be one of {_MODES!r}, got {mode!r}")
    cfg = config if config is not None else get_global_config()

    declared = normalize_actions(actions)
    predicates = _resolve_predicates(policy, declared, cfg)

    extra: tuple[str, ...] = ()
    extra_predicates: dict[str, Callable[[], Any]] = {}
    if mode == "only":
        extra = tuple(a for a in policy_actions(policy, config=cfg) if a not in predicates)
        extra_predicates = _resolve_predicates(policy, extra, cfg)

    permitted, forbidden = _partition(predicates)
    extra_permitted, extra_forbidden = _partition(extra_predicates)

    result = ActionResult(
        policy_name=policy_name(policy),
        declared=declared,
        permitted=permitted,
        forbidden=forbidden,
        extra_permitted=extra_permitted,
        extra_forbidden=extra_forbidden,
    )
    if cfg.log_evaluations:
        log_action_evaluation(result, mode=mode)
    return result
