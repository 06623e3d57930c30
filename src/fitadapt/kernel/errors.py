"""Error types for adaptor binding."""

from __future__ import annotations


class BindingError(TypeError):
    """Error raised when a call shape cannot be bound to an adaptor.

    Raised at construction or at the call boundary, always before any
    wrapped callable runs. Keeps the offending callable's name and the
    positional argument count for debugging.
    """

    def __init__(self, message: str, target: str | None = None, arity: int | None = None) -> None:
        self.target = target
        self.arity = arity
        super().__init__(message)

    def __repr__(self) -> str:
        return f"BindingError({super().__str__()!r}, target={self.target!r}, arity={self.arity!r})"
