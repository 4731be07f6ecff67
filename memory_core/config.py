"""Environment configuration and logging setup.

Variables:
- MEMORY_SEED: default seed for shuffles when the caller passes none.
- MEMORY_DEBUG: set to 1/true/yes/on for debug logging.
- MEMORY_LOG_LEVEL: explicit level name (DEBUG, INFO, WARNING, ...).
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')

LOG_FORMATS = {
    'simple': '%(name)s - %(levelname)s - %(message)s',
    'detailed': '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
}

_handler: Optional[logging.Handler] = None


def debug_enabled() -> bool:
    return os.getenv('MEMORY_DEBUG', '0').strip().lower() in _TRUTHY


def default_seed() -> Optional[int]:
    """Reads MEMORY_SEED. Unset or blank means no seed (nondeterministic shuffles)."""
    raw = os.getenv('MEMORY_SEED', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'MEMORY_SEED must be an integer, got {raw!r}') from None


def log_level() -> int:
    name = os.getenv('MEMORY_LOG_LEVEL', '').strip().upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
        raise ValueError(f'unknown MEMORY_LOG_LEVEL {name!r}')
    return logging.DEBUG if debug_enabled() else logging.INFO


def configure_logging(level: Optional[int] = None, format_style: str = 'simple') -> None:
    """
    Attach a stdout handler to the memory_core logger.

    Args:
        level: logging level; read from the environment when omitted
        format_style: "simple" or "detailed"
    """
    global _handler
    root = logging.getLogger('memory_core')
    root.setLevel(log_level() if level is None else level)
    # Handlers attached by the host application are left alone.
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMATS.get(format_style, LOG_FORMATS['simple'])))
    root.addHandler(_handler)
