"""Infix invocation of binary callables: ``x <<f>> y``."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fitadapt.kernel.wrap import Wrapped, wrap


@dataclass(frozen=True)
class InfixLeft:
    """Binary callable with its left operand bound."""

    f: Wrapped[Any]
    lhs: Any

    def __rshift__(self, rhs: Any) -> Any:
        return self.f(self.lhs, rhs)


@dataclass(frozen=True)
class InfixAdaptor:
    """Binary callable usable as ``x <<adaptor>> y``.

    ``<<`` and ``>>`` share precedence and associate left, so the
    expression is ``(x << adaptor) >> y``.
    """

    f: Wrapped[Any]

    def __post_init__(self) -> None:
        wrapped = wrap(self.f)
        wrapped.check(2)
        object.__setattr__(self, "f", wrapped)

    def __rlshift__(self, lhs: Any) -> InfixLeft:
        return InfixLeft(self.f, lhs)

    def __call__(self, lhs: Any, rhs: Any) -> Any:
        return self.f(lhs, rhs)


def infix(f: Callable[[Any, Any], Any]) -> InfixAdaptor:
    return InfixAdaptor(f)
