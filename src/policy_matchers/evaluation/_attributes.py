"""Attribute evaluation: check declared attribute paths against a policy's allow-list."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from policy_matchers._audit import log_attribute_evaluation
from policy_matchers._types import AttributeSpec
from policy_matchers.config._config import MatchersConfig, get_global_config
from policy_matchers.evaluation._actions import policy_name
from policy_matchers.evaluation._models import AttributePath, AttributeResult, NestedAttribute
from policy_matchers.exceptions import InvalidAttributeError

__all__ = [
    "PermittedAttributes",
    "evaluate_attributes",
    "normalize_attributes",
    "permitted_attributes",
]


def normalize_attributes(spec: AttributeSpec) -> tuple[AttributePath, ...]:
    """Normalise an attribute declaration into unique paths, keeping order.

    Accepts a single name, a mapping ``{name: children}`` (one path per
    key), or any iterable mixing the two. Children are normalised the
    same way, to any depth.

    Raises:
        InvalidAttributeError: If *spec* contains anything else.

    Example::

        normalize_attributes(["title", {"author": ["name", "email"]}])
        # ("title", NestedAttribute("author", ("name", "email")))
    """
    paths: dict[AttributePath, None] = {}

    def _walk(item: Any) -> None:
        if isinstance(item, NestedAttribute):
            paths.setdefault(item, None)
        elif isinstance(item, str):
            paths.setdefault(item, None)
        elif isinstance(item, Mapping):
            for key, children in item.items():
                if not isinstance(key, str):
                    raise InvalidAttributeError(f"attribute names must be strings, got {key!r}")
                paths.setdefault(NestedAttribute(key, normalize_attributes(children)), None)
        elif isinstance(item, Iterable):
            for sub in item:
                _walk(sub)
        else:
            raise InvalidAttributeError(
                f"attributes must be names, mappings or lists of those, got {item!r}"
            )

    _walk(spec)
    return tuple(paths)


@dataclass
class PermittedAttributes:
    """One level of a policy's permitted-attribute tree.

    A name may be permitted bare (``names``), as a nested structure
    (``nested``), or both. Nested entries for the same name are merged.
    """

    names: set[str] = field(default_factory=set)
    nested: dict[str, PermittedAttributes] = field(default_factory=dict)

    @classmethod
    def from_paths(cls, paths: Iterable[AttributePath]) -> PermittedAttributes:
        tree = cls()
        for path in paths:
            tree.add(path)
        return tree

    def add(self, path: AttributePath) -> None:
        if isinstance(path, NestedAttribute):
            subtree = self.nested.setdefault(path.name, PermittedAttributes())
            for child in path.children:
                subtree.add(child)
        else:
            self.names.add(path)

    def contains(self, path: AttributePath) -> bool:
        """Return True if *path* is permitted at this level.

        A bare name needs a bare entry. A nested path needs a nested entry
        under its name that contains every child; a bare entry of the same
        name does not count.
        """
        if isinstance(path, NestedAttribute):
            subtree = self.nested.get(path.name)
            if subtree is None:
                return False
            return all(subtree.contains(child) for child in path.children)
        return path in self.names


def permitted_attributes(
    policy: object,
    action: str | None = None,
) -> tuple[AttributePath, ...]:
    """Return the attribute paths *policy* permits, optionally for *action*.

    Lookup order: ``permitted_attributes_for_<action>()``, then
    ``permitted_attributes_for(action)``, then ``permitted_attributes()``.
    A policy with none of these permits nothing.
    """
    if action is not None:
        specific = getattr(policy, f"permitted_attributes_for_{action}", None)
        if callable(specific):
            return normalize_attributes(specific() or ())
        generic_for = getattr(policy, "permitted_attributes_for", None)
        if callable(generic_for):
            return normalize_attributes(generic_for(action) or ())
    accessor = getattr(policy, "permitted_attributes", None)
    if callable(accessor):
        return normalize_attributes(accessor() or ())
    return ()


def evaluate_attributes(
    policy: object,
    attributes: AttributeSpec,
    *,
    action: str | None = None,
    config: MatchersConfig | None = None,
) -> AttributeResult:
    """Partition the declared *attributes* into matched and unmatched paths.

    Args:
        policy: The policy instance under test.
        attributes: Attribute declaration (see ``normalize_attributes``).
        action: Optional action context for the permitted-attributes lookup.
        config: Optional config; defaults to the global config.

    Returns:
        A fresh ``AttributeResult``.

    Example::

        result = evaluate_attributes(policy, {"author": ["name"]}, action="update")
        assert result.all_permitted
    """
    cfg = config if config is not None else get_global_config()
    declared = normalize_attributes(attributes)
    tree = PermittedAttributes.from_paths(permitted_attributes(policy, action))

    matched: list[AttributePath] = []
    unmatched: list[AttributePath] = []
    for path in declared:
        (matched if tree.contains(path) else unmatched).append(path)

    result = AttributeResult(
        policy_name=policy_name(policy),
        action=action,
        declared=declared,
        matched=tuple(matched),
        unmatched=tuple(unmatched),
    )
    if cfg.log_evaluations:
        log_attribute_evaluation(result)
    return result
