from .adaptors import infix, partial, pipable
from .combinators import CombineAdaptor, CompressAdaptor, SeededCompressAdaptor, combine, compress
from .kernel import AdaptorConfig, BindingError, Wrapped, make, wrap

__all__ = [
    # Combinators
    "combine",
    "compress",
    "CombineAdaptor",
    "CompressAdaptor",
    "SeededCompressAdaptor",
    # Adaptors
    "partial",
    "pipable",
    "infix",
    # Kernel
    "wrap",
    "make",
    "Wrapped",
    "BindingError",
    "AdaptorConfig",
]
