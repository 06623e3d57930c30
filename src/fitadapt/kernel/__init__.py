"""Kernel layer - wrapping, signature description and configuration."""

from fitadapt.kernel.config import AdaptorConfig, get_config, set_config
from fitadapt.kernel.errors import BindingError
from fitadapt.kernel.signature import CallableSpec, ParameterSpec, describe
from fitadapt.kernel.wrap import Wrapped, make, wrap

__all__ = [
    "Wrapped",
    "wrap",
    "make",
    "BindingError",
    # Signatures
    "CallableSpec",
    "ParameterSpec",
    "describe",
    # Config
    "AdaptorConfig",
    "get_config",
    "set_config",
]
