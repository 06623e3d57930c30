"""Reverse-pipe call syntax: ``x | f`` and ``x | f(y)``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fitadapt.kernel.errors import BindingError
from fitadapt.kernel.wrap import Wrapped, wrap


@dataclass(frozen=True)
class PipeClosure:
    """Trailing arguments waiting for the piped-in first argument."""

    f: Wrapped[Any]
    args: tuple[Any, ...] = ()

    def __ror__(self, x: Any) -> Any:
        return self.f(x, *self.args)


@dataclass(frozen=True)
class PipableAdaptor:
    """Callable usable directly or on the right of ``|``.

    ``pipable(f)(*args)`` calls ``f`` when ``args`` bind; when one more
    argument is needed it returns a PipeClosure so that
    ``x | pipable(f)(*args) == f(x, *args)``.
    """

    f: Wrapped[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "f", wrap(self.f))

    def __call__(self, *args: Any) -> Any:
        spec = self.f.spec
        if spec.accepts(len(args)):
            return self.f(*args)
        if spec.accepts(len(args) + 1):
            return PipeClosure(self.f, args)
        raise BindingError(
            f"{self.f.name} cannot be called or piped with {len(args)} argument(s)",
            target=self.f.name,
            arity=len(args),
        )

    def __ror__(self, x: Any) -> Any:
        self.f.check(1)
        return self.f(x)


def pipable(f: Callable[..., Any]) -> PipableAdaptor:
    return PipableAdaptor(f)
