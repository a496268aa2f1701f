"""Mutable access to the payload of a Some."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import msgspec

if TYPE_CHECKING:
    from myoption.types.option import Some

__all__ = ["RefMut"]


class RefMut[T]:
    """A writable handle on the value held by a Some.

    Returned (wrapped in Some) by ``Some.as_mut()``. Writes go straight into
    the originating Some, which is otherwise immutable.

    A RefMut must not outlive the logical scope of the Option it came from:
    keep it only as long as you would hold the Option itself. Mutating a Some
    that is currently used as a dict key or set member breaks that container.

    Examples:
        >>> opt = Some([1, 2])
        >>> opt.as_mut().unwrap().set([3])
        >>> opt
        Some(value=[3])
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: Some[T]) -> None:
        self._owner = owner

    def get(self) -> T:
        """Return the current value of the owning Some."""
        return self._owner.value

    def set(self, value: T) -> None:
        """Replace the value of the owning Some in place."""
        msgspec.structs.force_setattr(self._owner, "value", value)

    def replace(self, value: T) -> T:
        """Store ``value`` and return the previous one."""
        old = self._owner.value
        self.set(value)
        return old

    def update(self, f: Callable[[T], T]) -> T:
        """Store ``f(current)`` and return it."""
        new = f(self._owner.value)
        self.set(new)
        return new

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def __repr__(self) -> str:
        return f"RefMut({self._owner.value!r})"
