"""Logging utilities for meshcull.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All meshcull code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'meshcull'


def _ensure_root() -> logging.Logger:
    """Ensure the 'meshcull' logger has a single stream handler and is isolated
    from the process root logger. Returns the 'meshcull' logger.
    """
    root = logging.getLogger(_ROOT_NAME)
    # Replace the NullHandler added by the package __init__ with a real handler
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        return default
    return resolved


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'meshcull' logger family level and optional external noise suppression.

    This does NOT modify the process root logger.
    """
    root = _ensure_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'meshcull' namespace.

    Names not already prefixed with 'meshcull.' are nested under it. Without
    an explicit level the logger is NOTSET and inherits from the 'meshcull'
    parent, so configure_logging() controls the whole family.
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    else:
        log.setLevel(logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
