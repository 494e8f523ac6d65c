"""Shared test policies and fixtures for policy-matchers tests."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import pytest

from policy_matchers.config._config import _reset_global_config

# ---------------------------------------------------------------------------
# Test subjects
# ---------------------------------------------------------------------------


@dataclass
class User:
    name: str
    role: str = "viewer"

    def __str__(self) -> str:
        return self.name


@dataclass
class Post:
    id: int
    author: User | None = None
    published: bool = False


# ---------------------------------------------------------------------------
# Test policies
# ---------------------------------------------------------------------------


class PostPolicy:
    """Pundit-style policy: viewers read, authors edit, admins do everything."""

    def __init__(self, user: User, post: Post) -> None:
        self.user = user
        self.post = post

    @property
    def _is_admin(self) -> bool:
        return self.user.role == "admin"

    @property
    def _is_author(self) -> bool:
        return self.post.author is not None and self.post.author.name == self.user.name

    def can_index(self) -> bool:
        return True

    def can_show(self) -> bool:
        return self.post.published or self._is_author or self._is_admin

    def can_new(self) -> bool:
        return self.can_create()

    def can_create(self) -> bool:
        return self.user.role in ("editor", "admin")

    def can_edit(self) -> bool:
        return self.can_update()

    def can_update(self) -> bool:
        return self._is_author or self._is_admin

    def can_destroy(self) -> bool:
        return self._is_admin

    def permitted_attributes(self) -> list[Any]:
        if self._is_admin:
            return ["title", "body", "slug", {"tags": ["name", "color"]}]
        return ["title", "body", {"tags": ["name"]}]

    def permitted_attributes_for_create(self) -> list[Any]:
        return ["title", "body", "slug"]

    def permitted_attributes_for_update(self) -> list[Any]:
        return [] if not self._is_author else ["title", "body"]


class DynamicPolicy:
    """Policy answering predicates it never declared, through ``__getattr__``."""

    user = "dynamic-user"

    def __getattr__(self, name: str) -> Any:
        if name.startswith("can_"):
            return lambda: name == "can_poke"
        raise AttributeError(name)


class EnumeratedPolicy:
    """Policy listing its actions explicitly."""

    user = "enumerated-user"

    def known_actions(self) -> list[str]:
        return ["read", "write"]

    def can_read(self) -> bool:
        return True

    def can_write(self) -> bool:
        return False

    def can_helper(self) -> bool:
        return True


@dataclass
class RecordingPolicy:
    """Policy recording every predicate call, in order."""

    answers: dict[str, bool]
    user: str = "recorder"
    calls: list[str] = field(default_factory=list)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("can_") and name[4:] in self.answers:
            action = name[4:]

            def _predicate() -> bool:
                self.calls.append(action)
                return self.answers[action]

            return _predicate
        raise AttributeError(name)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config() -> Generator[None, None, None]:
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def alice() -> User:
    return User(name="alice", role="editor")


@pytest.fixture()
def admin() -> User:
    return User(name="root", role="admin")


@pytest.fixture()
def viewer() -> User:
    return User(name="bob")


@pytest.fixture()
def draft(alice: User) -> Post:
    return Post(id=1, author=alice, published=False)


@pytest.fixture()
def author_policy(alice: User, draft: Post) -> PostPolicy:
    """Alice, an editor, on her own draft: everything but destroy."""
    return PostPolicy(alice, draft)


@pytest.fixture()
def viewer_policy(viewer: User, draft: Post) -> PostPolicy:
    """Bob, a viewer, on someone else's draft: index only."""
    return PostPolicy(viewer, draft)


@pytest.fixture()
def admin_policy(admin: User, draft: Post) -> PostPolicy:
    """An admin: everything."""
    return PostPolicy(admin, draft)
