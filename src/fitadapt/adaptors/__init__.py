"""Call-syntax adaptors: partial application, pipes and infix calls."""

from fitadapt.adaptors.infix import InfixAdaptor, infix
from fitadapt.adaptors.partial import PartialAdaptor, partial
from fitadapt.adaptors.pipable import PipableAdaptor, PipeClosure, pipable

__all__ = [
    "partial",
    "PartialAdaptor",
    "pipable",
    "PipableAdaptor",
    "PipeClosure",
    "infix",
    "InfixAdaptor",
]
