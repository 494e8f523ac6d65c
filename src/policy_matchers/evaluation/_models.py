"""Result models produced by the action and attribute evaluators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

__all__ = [
    "ActionResult",
    "AttributePath",
    "AttributeResult",
    "NestedAttribute",
    "render_path",
    "render_paths",
]


@dataclass(frozen=True, slots=True)
class NestedAttribute:
    """An attribute whose children are declared too, e.g. ``{"author": ["name"]}``.

    Attributes:
        name: The parent attribute name.
        children: Child paths in declaration order.
    """

    name: str
    children: tuple[AttributePath, ...]

    def to_spec(self) -> dict[str, list[Any]]:
        """Return the plain ``{name: [children]}`` form."""
        return {self.name: [_to_spec(child) for child in self.children]}


# A bare attribute name or a nested one.
AttributePath = Union[str, NestedAttribute]


def _to_spec(path: AttributePath) -> Any:
    if isinstance(path, NestedAttribute):
        return path.to_spec()
    return path


def render_path(path: AttributePath) -> str:
    """Render a path the way it would be written in a test.

    Example::

        render_path(NestedAttribute("author", ("name",)))  # "{'author': ['name']}"
    """
    return repr(_to_spec(path))


def render_paths(paths: tuple[AttributePath, ...] | tuple[str, ...]) -> str:
    """Render a sequence of actions or attribute paths as a list literal."""
    return "[" + ", ".join(render_path(p) for p in paths) + "]"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Partition of declared (and, for "only" evaluations, undeclared) actions.

    ``permitted`` and ``forbidden`` together are exactly ``declared``, in
    declaration order. The ``extra_*`` tuples hold the rest of the policy's
    actions in lexical order and stay empty for "exact" evaluations.

    Attributes:
        policy_name: Class name of the evaluated policy.
        declared: Declared actions, deduplicated, in declaration order.
        permitted: Declared actions the policy permits.
        forbidden: Declared actions the policy forbids.
        extra_permitted: Undeclared actions the policy permits.
        extra_forbidden: Undeclared actions the policy forbids.
    """

    policy_name: str
    declared: tuple[str, ...]
    permitted: tuple[str, ...]
    forbidden: tuple[str, ...]
    extra_permitted: tuple[str, ...] = ()
    extra_forbidden: tuple[str, ...] = ()

    @property
    def all_permitted(self) -> bool:
        """True if every declared action is permitted."""
        return not self.forbidden

    @property
    def all_forbidden(self) -> bool:
        """True if every declared action is forbidden."""
        return not self.permitted

    @property
    def permits_only(self) -> bool:
        """True if exactly the declared actions are permitted."""
        return not self.forbidden and not self.extra_permitted

    @property
    def forbids_only(self) -> bool:
        """True if exactly the declared actions are forbidden."""
        return not self.permitted and not self.extra_forbidden

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "policy_name": self.policy_name,
            "declared": list(self.declared),
            "permitted": list(self.permitted),
            "forbidden": list(self.forbidden),
            "extra_permitted": list(self.extra_permitted),
            "extra_forbidden": list(self.extra_forbidden),
        }


@dataclass(frozen=True, slots=True)
class AttributeResult:
    """Partition of declared attribute paths for one action context.

    Attributes:
        policy_name: Class name of the evaluated policy.
        action: The action context, or None for the context-free accessor.
        declared: Declared paths, deduplicated, in declaration order.
        matched: Declared paths found in the permitted set.
        unmatched: Declared paths missing from the permitted set.
    """

    policy_name: str
    action: str | None
    declared: tuple[AttributePath, ...]
    matched: tuple[AttributePath, ...]
    unmatched: tuple[AttributePath, ...]

    @property
    def all_permitted(self) -> bool:
        """True if every declared path is permitted."""
        return not self.unmatched

    @property
    def all_forbidden(self) -> bool:
        """True if no declared path is permitted."""
        return not self.matched

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "policy_name": self.policy_name,
            "action": self.action,
            "declared": [_to_spec(p) for p in self.declared],
            "matched": [_to_spec(p) for p in self.matched],
            "unmatched": [_to_spec(p) for p in self.unmatched],
        }
