"""Errors and resolution results.

Resolvers never raise: they return ``Resolved`` or ``Unresolved``. The
controller unwraps the result at the operation that triggered the
resolution (construction, render, reset), so a ConfigurationError always
surfaces synchronously to that caller.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ViewControllerError(Exception):
    """Base class for all view controller errors."""


class ConfigurationError(ViewControllerError):
    """A view descriptor or render target could not be resolved."""


class ViewLifecycleError(ViewControllerError):
    """An operation was called in a lifecycle state that does not allow it."""


@dataclass(frozen=True)
class Resolved(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Unresolved:
    error: ConfigurationError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Resolution = Union[Resolved[T], Unresolved]
