"""Minimal tour of the combinators."""

from __future__ import annotations

import logging

from fitadapt import combine, compress, infix, partial, pipable

logging.basicConfig(level=logging.DEBUG)


def increment(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def main() -> None:
    # Distribute (3, 5) over increment and double, then sum the results
    summed = combine(lambda *xs: sum(xs), increment, double)
    print("combine:", summed(3, 5))

    # Fold with and without an initial state
    print("compress max:", compress(max)(2, 3, 4, 5))
    print("compress sum:", compress(lambda a, b: a + b, 0)(1, 2, 3))

    add = partial(lambda x, y: x + y)
    print("partial:", add(1)(2))
    print("pipable:", 2 | pipable(increment))
    cat = infix(lambda a, b: f"{a}{b}")
    print("infix:", "a" <<cat>> "b")


if __name__ == "__main__":
    main()
