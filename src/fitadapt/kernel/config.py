"""Process-wide adaptor configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class AdaptorConfig:
    """Adaptor configuration.

    Attributes:
        check_signatures: Check wrapped callables' signatures against the
            call shape before invoking them. Structural checks (too few
            arguments for ``combine``, an empty unseeded ``compress``)
            are always on.
    """
    check_signatures: bool = True

    @classmethod
    def from_env(cls) -> AdaptorConfig:
        raw = os.getenv("FITADAPT_CHECK_SIGNATURES")
        if raw is None:
            return cls()
        return cls(check_signatures=raw.strip().lower() not in _FALSE_VALUES)


_config = AdaptorConfig.from_env()


def get_config() -> AdaptorConfig:
    return _config


def set_config(config: AdaptorConfig) -> AdaptorConfig:
    """Replace the process default, returning the previous one."""
    global _config
    previous = _config
    _config = config
    return previous
