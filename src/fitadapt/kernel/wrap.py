"""Callable wrapping - the construction path shared by every adaptor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fitadapt.kernel.config import get_config
from fitadapt.kernel.errors import BindingError
from fitadapt.kernel.signature import CallableSpec, callable_name, describe

R = TypeVar("R")
A = TypeVar("A")


@dataclass(frozen=True)
class Wrapped(Generic[R]):
    """Immutable value holding a callable and its signature description.

    The description is computed once, at construction.
    """

    fn: Callable[..., R]
    spec: CallableSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.fn, Wrapped):
            object.__setattr__(self, "fn", self.fn.fn)
        if not callable(self.fn):
            raise BindingError(f"{self.fn!r} is not callable", target=repr(self.fn))
        object.__setattr__(self, "spec", describe(self.fn))

    @property
    def name(self) -> str:
        return callable_name(self.fn)

    def accepts(self, count: int) -> bool:
        """Whether ``count`` positional arguments bind, honouring the config."""
        if not get_config().check_signatures:
            return True
        return self.spec.accepts(count)

    def check(self, count: int) -> None:
        """Raise BindingError unless ``count`` positional arguments bind."""
        if not self.accepts(count):
            raise BindingError(
                f"{self.name} cannot be called with {count} positional argument(s)",
                target=self.name,
                arity=count,
            )

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        return self.fn(*args, **kwargs)


def wrap(fn: Callable[..., R]) -> Wrapped[R]:
    """Wrap a raw callable, rejecting non-callables."""
    if isinstance(fn, Wrapped):
        return fn
    return Wrapped(fn)


def make(cls: Callable[..., A]) -> Callable[..., A]:
    """Return a factory that constructs ``cls`` from its arguments.

    Args:
        cls: The adaptor type to construct

    Returns:
        Function forwarding its arguments to ``cls``
    """
    def factory(*args: Any, **kwargs: Any) -> A:
        return cls(*args, **kwargs)

    factory.__name__ = f"make_{getattr(cls, '__name__', 'adaptor')}"
    factory.__qualname__ = factory.__name__
    factory.__doc__ = getattr(cls, "__doc__", None)
    return factory
