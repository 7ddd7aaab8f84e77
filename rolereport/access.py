"""Role-based visibility rules applied to items before rendering."""
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, Mapping, Tuple

from rolereport.models import Item, Role, User

USER_VALUE_LIMIT = 500
PRIORITY_THRESHOLD = 1000

ItemPolicy = Callable[[Tuple[Item, ...]], Tuple[Item, ...]]


def _admin_view(items: Tuple[Item, ...]) -> Tuple[Item, ...]:
    """Admins see everything; high-value items are flagged as priority."""

    return tuple(_with_priority(item, item.value > PRIORITY_THRESHOLD) for item in items)


def _user_view(items: Tuple[Item, ...]) -> Tuple[Item, ...]:
    """Regular users only see items up to the visibility limit."""

    return tuple(
        _with_priority(item, False) for item in items if item.value <= USER_VALUE_LIMIT
    )


def _no_access(items: Tuple[Item, ...]) -> Tuple[Item, ...]:
    return ()


def _with_priority(item: Item, flag: bool) -> Item:
    # Copy only when the flag changes; supplied items are never modified.
    if item.priority == flag:
        return item
    return replace(item, priority=flag)


_POLICIES: Mapping[Role, ItemPolicy] = {
    Role.ADMIN: _admin_view,
    Role.USER: _user_view,
}


def filter_items(user: User, items: Iterable[Item]) -> Tuple[Item, ...]:
    """Return the items *user* may see, in input order, annotated for their role."""

    policy = _POLICIES.get(Role.parse(user.role), _no_access)
    return policy(tuple(items))


__all__ = [
    "PRIORITY_THRESHOLD",
    "USER_VALUE_LIMIT",
    "filter_items",
]
