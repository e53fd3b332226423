"""Function composition helpers.

Stages are chained left to right, so ``compose(f, g, h)(x) == h(g(f(x)))``.
That reads in the same order the data flows through the pipeline.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")


def _identity(value: Any) -> Any:
    return value


def _forward(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def composed(value: Any) -> Any:
        return g(f(value))

    return composed


def compose(*stages: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose single-argument callables, applying them left to right.

    Args:
        *stages: Callables where each one accepts the previous one's output.

    Returns:
        A callable running every stage in order. With no stages, the identity.
    """
    if not stages:
        return _identity
    return reduce(_forward, stages)


def map_optional(value: A | None, fn: Callable[[A], B]) -> B | None:
    """Apply ``fn`` to ``value`` unless it is ``None``."""
    if value is None:
        return None
    return fn(value)
