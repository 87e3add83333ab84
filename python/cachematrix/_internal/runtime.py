from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import numpy as np

Solver = Callable[[Any], Any]


class Runtime:
    def __init__(
        self,
        *,
        default_solver: Solver = np.linalg.inv,
        env_var: str = "CACHEMATRIX_MESSAGE_LEVEL",
    ) -> None:
        self._default_solver = default_solver
        self._solver: Solver = default_solver
        self._env_var = env_var
        self._message_level_cache: int | None = None

    def solver(self) -> Solver:
        return self._solver

    def set_solver(self, solver: Solver | None) -> None:
        if solver is None:
            self._solver = self._default_solver
            return
        if not callable(solver):
            raise TypeError(f"solver must be callable, got {type(solver).__name__}")
        self._solver = solver

    def message_level(self) -> int:
        if self._message_level_cache is not None:
            return self._message_level_cache

        raw = os.environ.get(self._env_var)
        level = logging.INFO if not raw else _parse_level(raw, env_var=self._env_var)
        self._message_level_cache = level
        return level

    def reset(self) -> None:
        """Forget the cached message level so the environment is read again."""
        self._message_level_cache = None


def _parse_level(raw: str, *, env_var: str) -> int:
    text = raw.strip()
    if text.lstrip("-").isdigit():
        level: Any = int(text)
    else:
        level = logging.getLevelName(text.upper())
    if not isinstance(level, int) or level < logging.DEBUG:
        raise ValueError(f"{env_var}={raw!r} is not a logging level name or number >= DEBUG")
    return level


runtime = Runtime()


def get_solver() -> Solver:
    """Return the routine currently used to invert matrices."""
    return runtime.solver()


def set_solver(solver: Solver | None) -> None:
    """Install a replacement inversion routine (``None`` restores numpy.linalg.inv)."""
    runtime.set_solver(solver)


@contextmanager
def temporary_solver(solver: Solver) -> Iterator[Solver]:
    """Temporarily override the inversion routine.

    The override is process-global; this helper does not provide thread
    isolation.
    """

    prev = runtime.solver()
    runtime.set_solver(solver)
    try:
        yield solver
    finally:
        runtime.set_solver(prev)
