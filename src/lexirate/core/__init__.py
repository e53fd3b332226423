"""Core utilities: composition, logging, exceptions."""

from lexirate.core.compose import compose, map_optional
from lexirate.core.exceptions import LexirateError
from lexirate.core.logging import get_logger, setup_logging

__all__ = [
    "LexirateError",
    "compose",
    "get_logger",
    "map_optional",
    "setup_logging",
]
