"""Matrices that remember their inverse until the matrix is replaced."""
from __future__ import annotations

import logging
from typing import IO, Any

from numpy.linalg import LinAlgError as InversionError

from ._internal.cache import CacheMatrix, make_cache_matrix
from ._internal.linalg_cache import cache_solve
from ._internal.runtime import get_solver, set_solver, temporary_solver

__version__ = "0.1.0"

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())

_message_handler: logging.Handler | None = None


def enable_messages(stream: IO[Any] | None = None) -> logging.Handler:
    """Print cache hit/miss messages to ``stream`` (stderr by default).

    Calling this again returns the installed handler while it is still
    attached to the logger; otherwise a new one is installed.
    """
    global _message_handler
    if _message_handler is not None and _message_handler in _logger.handlers:
        return _message_handler

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(handler)
    if _logger.level == logging.NOTSET:
        _logger.setLevel(logging.DEBUG)
    _message_handler = handler
    return handler


__all__ = [
    "CacheMatrix",
    "InversionError",
    "cache_solve",
    "enable_messages",
    "get_solver",
    "make_cache_matrix",
    "set_solver",
    "temporary_solver",
]
