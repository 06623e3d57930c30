"""Distribution combinator: route argument i to callable i, then combine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fitadapt.kernel.errors import BindingError
from fitadapt.kernel.wrap import Wrapped, make, wrap

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")


def pack_get(index: int, gs: Sequence[T]) -> T:
    """Return the callable responsible for argument position ``index``."""
    if not 0 <= index < len(gs):
        raise BindingError(
            f"no callable routes position {index}; {len(gs)} callable(s) wrapped",
            arity=index,
        )
    return gs[index]


@dataclass(frozen=True)
class RoutingTable:
    """Fixed index -> callable table, built once per combinator."""

    routes: tuple[Wrapped[Any], ...] = ()

    @classmethod
    def build(cls, gs: Sequence[Callable[..., Any]]) -> RoutingTable:
        routes = tuple(wrap(g) for g in gs)
        for route in routes:
            route.check(1)
        return cls(routes)

    def route(self, index: int) -> Wrapped[Any]:
        return pack_get(index, self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[Wrapped[Any]]:
        return iter(self.routes)


@dataclass(frozen=True, init=False)
class CombineAdaptor(Generic[R]):
    """Distribute the call's arguments over unary callables and combine.

    ``CombineAdaptor(f, g0, ..., gn_1)(a0, ..., am_1)`` evaluates
    ``g0(a0), ..., gn_1(an_1)`` left to right and returns
    ``f(g0(a0), ..., gn_1(an_1))``. Arguments past the n-th are not
    routed and do not reach ``f``; with no wrapped callables ``f()`` is
    called.

    Attributes:
        f: Combining callable
        table: Routing table of the wrapped unary callables
    """

    f: Wrapped[R]
    table: RoutingTable

    def __init__(self, f: Callable[..., R], *gs: Callable[..., Any]) -> None:
        object.__setattr__(self, "f", wrap(f))
        object.__setattr__(self, "table", RoutingTable.build(gs))
        logger.debug("combine %s over %d callable(s)", self.f.name, len(self.table))

    @property
    def gs(self) -> tuple[Wrapped[Any], ...]:
        return self.table.routes

    def route(self, index: int) -> Wrapped[Any]:
        return self.table.route(index)

    def __call__(self, *args: Any) -> R:
        n = len(self.table)
        if len(args) < n:
            raise BindingError(
                f"combine over {n} callable(s) needs at least {n} argument(s), got {len(args)}",
                target=self.f.name,
                arity=len(args),
            )
        # f sees exactly one value per route
        self.f.check(n)

        results = [g(arg) for g, arg in zip(self.table, args)]
        return self.f(*results)


combine = make(CombineAdaptor)
