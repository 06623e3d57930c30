"""Combinator laws as executable predicates.

Combinators satisfy the following algebraic laws:

1. Seed identity: compress(f, z)() == z
2. Seed step: compress(f, z)(x, *xs) == compress(f, f(z, x))(*xs)
3. Single identity: compress(f)(x) == x
4. Unseeded step: compress(f)(x, y, *xs) == compress(f)(f(x, y), *xs)
5. Distribution: combine(f, *gs)(*args) == f(*(g(a) for g, a in zip(gs, args))) for len(args) >= len(gs)

Each predicate evaluates both sides of its law and compares them with ==.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from fitadapt.combinators.combine import combine
from fitadapt.combinators.compress import compress


def seed_identity(f: Callable[[Any, Any], Any], z: Any) -> bool:
    return compress(f, z)() == z


def seed_step(f: Callable[[Any, Any], Any], z: Any, x: Any, *xs: Any) -> bool:
    return compress(f, z)(x, *xs) == compress(f, f(z, x))(*xs)


def single_identity(f: Callable[[Any, Any], Any], x: Any) -> bool:
    return compress(f)(x) == x


def unseeded_step(f: Callable[[Any, Any], Any], x: Any, y: Any, *xs: Any) -> bool:
    return compress(f)(x, y, *xs) == compress(f)(f(x, y), *xs)


def distribution(f: Callable[..., Any], gs: Sequence[Callable[[Any], Any]], *args: Any) -> bool:
    expected = f(*(g(a) for g, a in zip(gs, args)))
    return combine(f, *gs)(*args) == expected
