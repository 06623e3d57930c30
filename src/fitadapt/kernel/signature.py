"""Callable signature descriptions."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel

ParameterKind = Literal[
    "positional_only",
    "positional_or_keyword",
    "var_positional",
    "keyword_only",
    "var_keyword",
]

_KINDS: dict[Any, ParameterKind] = {
    inspect.Parameter.POSITIONAL_ONLY: "positional_only",
    inspect.Parameter.POSITIONAL_OR_KEYWORD: "positional_or_keyword",
    inspect.Parameter.VAR_POSITIONAL: "var_positional",
    inspect.Parameter.KEYWORD_ONLY: "keyword_only",
    inspect.Parameter.VAR_KEYWORD: "var_keyword",
}


class ParameterSpec(BaseModel):
    """Parameter of a described callable."""
    name: str
    kind: ParameterKind
    required: bool


class CallableSpec(BaseModel):
    """Positional call shape of a callable.

    A spec with ``introspectable=False`` comes from a callable whose
    signature is not available; it accepts every argument count.
    """
    name: str
    parameters: list[ParameterSpec] = []
    introspectable: bool = True

    @property
    def min_positional(self) -> int:
        return sum(
            1 for p in self.parameters
            if p.required and p.kind in ("positional_only", "positional_or_keyword")
        )

    @property
    def max_positional(self) -> int | None:
        """Upper bound on positional arguments, None when unbounded."""
        if any(p.kind == "var_positional" for p in self.parameters):
            return None
        return sum(1 for p in self.parameters if p.kind in ("positional_only", "positional_or_keyword"))

    def accepts(self, count: int) -> bool:
        """Whether the callable can be invoked with ``count`` positional arguments."""
        if not self.introspectable:
            return True
        if any(p.required and p.kind == "keyword_only" for p in self.parameters):
            return False
        upper = self.max_positional
        return count >= self.min_positional and (upper is None or count <= upper)


def callable_name(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def describe(fn: Callable[..., Any]) -> CallableSpec:
    """Build a CallableSpec for ``fn`` from ``inspect.signature``."""
    name = callable_name(fn)
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        return CallableSpec(name=name, introspectable=False)
    return CallableSpec(
        name=name,
        parameters=[
            ParameterSpec(
                name=p.name,
                kind=_KINDS[p.kind],
                required=p.default is inspect.Parameter.empty
                and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD),
            )
            for p in sig.parameters.values()
        ],
    )
