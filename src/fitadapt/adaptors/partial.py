"""Partial application that calls once enough arguments are collected."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fitadapt.kernel.wrap import Wrapped, wrap


@dataclass(frozen=True, init=False)
class PartialAdaptor:
    """Collect positional arguments until ``f`` can be called.

    Semantics:
        - If the collected arguments bind to ``f``, call it
        - If fewer than ``f`` requires, return a new PartialAdaptor
        - Otherwise raise BindingError without calling ``f``
    """

    f: Wrapped[Any]
    args: tuple[Any, ...]

    def __init__(self, f: Callable[..., Any], *args: Any) -> None:
        object.__setattr__(self, "f", wrap(f))
        object.__setattr__(self, "args", args)

    def __call__(self, *args: Any) -> Any:
        collected = self.args + args
        spec = self.f.spec
        if not spec.accepts(len(collected)) and len(collected) < spec.min_positional:
            return PartialAdaptor(self.f, *collected)
        self.f.check(len(collected))
        return self.f(*collected)


def partial(f: Callable[..., Any], *args: Any) -> PartialAdaptor:
    """Bind leading positional arguments of ``f``.

    Example:
        ```python
        add = partial(lambda x, y: x + y)
        add(1, 2)   # 3
        add(1)(2)   # 3
        ```
    """
    return PartialAdaptor(f, *args)
