"""Fold combinator: apply a binary operation across the call's arguments.

The binary operation takes the state first and the next argument second.
An optional initial state may be given; otherwise the first argument is
the initial state.

Example:
    ```python
    from fitadapt import compress
    compress(max)(2, 3, 4, 5)                 # 5
    compress(lambda a, b: a + b, 0)(1, 2, 3)  # 6
    ```
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fitadapt.kernel.errors import BindingError
from fitadapt.kernel.wrap import Wrapped, wrap

logger = logging.getLogger(__name__)

S = TypeVar("S")


def _fold(f: Callable[[Any, Any], Any], state: Any, xs: Iterable[Any]) -> Any:
    """Left fold of ``f`` over ``xs`` starting from ``state``."""
    current_state = state
    for x in xs:
        current_state = f(current_state, x)
    return current_state


def _binary(f: Callable[..., Any]) -> Wrapped[Any]:
    wrapped = wrap(f)
    wrapped.check(2)
    return wrapped


def _copy_state(state: S) -> S:
    try:
        return copy.deepcopy(state)
    except (TypeError, copy.Error) as exc:
        raise BindingError(f"fold state {state!r} cannot be copied: {exc}") from exc


@dataclass(frozen=True)
class CompressAdaptor:
    """Unseeded fold: the first argument is the initial state.

    ``CompressAdaptor(f)(x)`` returns ``x`` without calling ``f``;
    calling with no arguments raises BindingError.
    """

    f: Wrapped[Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "f", _binary(self.f))
        logger.debug("compress %s", self.f.name)

    def __call__(self, *xs: Any) -> Any:
        if not xs:
            raise BindingError(
                f"compress({self.f.name}) without a state needs at least one argument",
                target=self.f.name,
                arity=0,
            )
        if len(xs) == 1:
            return xs[0]
        return _fold(self.f, xs[0], xs[1:])


@dataclass(frozen=True)
class SeededCompressAdaptor(Generic[S]):
    """Seeded fold over ``(state, *xs)``.

    With no arguments the stored state is returned as given. Otherwise a
    copy of it is the first operand of ``f``, so no call can modify it.
    """

    f: Wrapped[Any]
    state: S

    def __post_init__(self) -> None:
        object.__setattr__(self, "f", _binary(self.f))
        # seeds that cannot be copied are rejected here
        _copy_state(self.state)
        logger.debug("compress %s seeded with %s", self.f.name, type(self.state).__name__)

    def __call__(self, *xs: Any) -> Any:
        if not xs:
            return self.state
        return _fold(self.f, _copy_state(self.state), xs)


def compress(f: Callable[..., Any], *state: Any) -> CompressAdaptor | SeededCompressAdaptor[Any]:
    """Create a fold combinator.

    Args:
        f: Binary callable taking (state, argument)
        state: Optional initial state (at most one)

    Returns:
        SeededCompressAdaptor when a state is given, CompressAdaptor otherwise
    """
    if len(state) > 1:
        raise BindingError(
            f"compress takes at most one initial state, got {len(state)}",
            arity=len(state),
        )
    if state:
        return SeededCompressAdaptor(f, state[0])
    return CompressAdaptor(f)
