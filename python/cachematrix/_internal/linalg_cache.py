from __future__ import annotations

import logging
from typing import Any

from .runtime import runtime

logger = logging.getLogger(__name__)

CACHED_MESSAGE = "Getting cached inverse."
FRESH_MESSAGE = "Getting a freshly computed inverse value."


def cache_solve(x: Any) -> Any:
    """Compute or retrieve the cached inverse of ``x``.

    ``x`` is a :class:`~cachematrix.CacheMatrix` (anything exposing
    ``get_matrix``/``get_inverse``/``set_inverse``). The matrix is assumed to
    be square and invertible; if the solver rejects it, its error propagates
    and nothing is cached.
    """

    level = runtime.message_level()

    inv = x.get_inverse()
    if inv is not None:
        logger.log(level, CACHED_MESSAGE)
        return inv

    data = x.get_matrix()
    inv = runtime.solver()(data)
    x.set_inverse(inv)

    logger.log(level, FRESH_MESSAGE)
    return inv
