"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, NoReturn, TypeIs

import msgspec

from myoption.errors import UNWRAP_NONE_ON_SOME, UNWRAP_ON_NOTHING, fail
from myoption.types.ref import RefMut

if TYPE_CHECKING:
    from myoption.types.result import Err, Ok

__all__ = ["Nothing", "NothingType", "Option", "Some", "from_nullable", "is_option"]


class Some[T](msgspec.Struct, frozen=True, gc=False, tag="Some"):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or chained through Option-returning operations.

    Combinators that produce a new Option (``map``, ``and_then``, ``filter``,
    ``xor`` ...) logically consume the receiver: the result supersedes it.
    Python does not enforce this, so the original stays usable.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> Some(2).filter(lambda x: x % 2 == 0)
        Some(value=2)
    """

    value: T

    def __bool__(self) -> NoReturn:
        raise TypeError("Option has no truth value; use .is_some() / .is_none()")

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies ``pred``."""
        return pred(self.value)

    def as_ref(self) -> Some[T]:
        """Return a new Some sharing the contained value.

        The receiver is left untouched, so it can still be consumed later.
        """
        return Some(self.value)

    def as_mut(self) -> Some[RefMut[T]]:
        """Return Some(RefMut) giving write access to the contained value.

        Writes through the RefMut change this Some in place. Do not keep the
        RefMut beyond the lifetime of this Option.

        Returns:
            Some wrapping a RefMut bound to this Some.
        """
        return Some(RefMut(self))

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def unwrap_none(self) -> NoReturn:
        """Raise since a Some was expected to be Nothing.

        Raises:
            UnwrapError: Always, naming the contained value.
        """
        fail(f"{UNWRAP_NONE_ON_SOME}: {self.value!r}", "unwrap_none")

    def expect_none(self, msg: str) -> NoReturn:
        """Raise with a custom message since a Some was expected to be Nothing.

        Args:
            msg: Custom error message, followed by the contained value.

        Raises:
            UnwrapError: Always.
        """
        fail(f"{msg}: {self.value!r}", "expect_none")

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: U, f: Callable[[T], U]) -> U:
        """Apply f to the contained value, ignoring the default.

        The default was already evaluated by the caller even though it is
        unused here.
        """
        return f(self.value)

    def map_or_else[U](self, _default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the contained value without calling the default factory."""
        return f(self.value)

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _err: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from myoption.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _f: Ignored error factory function.

        Returns:
            Ok containing the value.
        """
        from myoption.types.result import Ok

        return Ok(self.value)

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return Some if exactly one of self, other is Some.

        Since this is Some, returns self when other is Nothing and
        Nothing when both are Some.
        """
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If either is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value  # type: ignore[return-value]

    def into_optional(self) -> T:
        """Return the contained value, for APIs that speak ``T | None``."""
        return self.value

    def iter(self) -> Iterator[T]:
        """Iterate over the contained value (exactly one item)."""
        return iter(self)


class NothingType(msgspec.Struct, frozen=True, gc=False, tag="Nothing"):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __bool__(self) -> NoReturn:
        raise TypeError("Option has no truth value; use .is_some() / .is_none()")

    def __iter__(self) -> Iterator[NoReturn]:
        return iter(())

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and[T](self, _pred: Callable[[T], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def as_ref(self) -> NothingType:
        return Nothing

    def as_mut(self) -> NothingType:
        return Nothing

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        fail(UNWRAP_ON_NOTHING, "unwrap")

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        fail(msg, "expect")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def unwrap_none(self) -> None:
        """Succeed silently since this is Nothing."""
        return None

    def expect_none(self, _msg: str) -> None:
        """Succeed silently since this is Nothing."""
        return None

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return Nothing

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[T, U](self, default: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute the default since there's no value to map."""
        return default()

    def inspect[T](self, _f: Callable[[T], object]) -> NothingType:
        return Nothing

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return Nothing

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return Nothing

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from myoption.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from myoption.types.result import Err

        return Err(f())

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return Nothing

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other: Some if other is Some, Nothing if both are Nothing."""
        return other

    def zip[T, U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return Nothing

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return Nothing

    def into_optional(self) -> None:
        return None

    def iter(self) -> Iterator[NoReturn]:
        """Iterate over nothing."""
        return iter(self)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Some[T] | NothingType:
    """Convert a nullable value to an Option.

    Args:
        value: The value that may be None.

    Returns:
        Some(value) if value is not None, otherwise Nothing.
    """
    return Some(value) if value is not None else Nothing


def is_option(value: object) -> bool:
    """Return True if value is a Some or Nothing."""
    return isinstance(value, Some | NothingType)
