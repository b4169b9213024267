"""
Runtime configuration for the stable summation library.

Settings are read once from environment variables and cached:

- ``STABLESUM_TENSOR_DTYPE``: ``float64`` (default) or ``float32``, the
  accumulator dtype for tensor reductions when no dtype is passed
- ``STABLESUM_LOG_LEVEL``: level used by :func:`configure_logging`
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

import torch

TENSOR_DTYPES = {
    "float64": torch.float64,
    "double": torch.float64,
    "float32": torch.float32,
    "float": torch.float32,
}

_settings: Optional["Settings"] = None


@dataclass(frozen=True)
class Settings:
    """Immutable library settings."""

    tensor_dtype: torch.dtype = torch.float64
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        dtype_name = os.environ.get("STABLESUM_TENSOR_DTYPE", "float64").strip().lower()
        if dtype_name not in TENSOR_DTYPES:
            raise ValueError(
                f"Unknown STABLESUM_TENSOR_DTYPE: {dtype_name!r} "
                f"(expected one of {sorted(TENSOR_DTYPES)})"
            )

        log_level = os.environ.get("STABLESUM_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown STABLESUM_LOG_LEVEL: {log_level!r}")

        return cls(tensor_dtype=TENSOR_DTYPES[dtype_name], log_level=log_level)


def get_settings() -> Settings:
    """Return the cached settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Discard cached settings and re-read the environment."""
    global _settings
    _settings = None
    return get_settings()


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level; defaults to the configured ``log_level``

    Returns:
        The ``stablesum`` logger
    """
    logger = logging.getLogger("stablesum")
    logger.setLevel(level if level is not None else get_settings().log_level)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)

    return logger
