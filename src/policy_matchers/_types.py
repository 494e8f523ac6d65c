"""Shared type aliases for policy-matchers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Literal, Union

__all__ = [
    "ActionMode",
    "ActionSpec",
    "AttributeSpec",
    "Polarity",
]

# Which side of the decision a matcher expects.
Polarity = Literal["permit", "forbid"]

# "exact" checks only the declared actions; "only" also checks the rest.
ActionMode = Literal["exact", "only"]

# A single action name or any (nested) iterable of names.
ActionSpec = Union[str, Iterable["ActionSpec"]]

# A bare attribute name, a mapping of name to child specs, or an iterable of those.
AttributeSpec = Union[str, Mapping[str, "AttributeSpec"], Iterable["AttributeSpec"]]
