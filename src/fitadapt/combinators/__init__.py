"""Combinators - composition adaptors over several callables."""

from fitadapt.combinators.combine import CombineAdaptor, RoutingTable, combine, pack_get
from fitadapt.combinators.compress import CompressAdaptor, SeededCompressAdaptor, compress

__all__ = [
    "combine",
    "CombineAdaptor",
    "RoutingTable",
    "pack_get",
    "compress",
    "CompressAdaptor",
    "SeededCompressAdaptor",
]
