"""Access to plain-text resources, bundled or on disk.

Resources are UTF-8 ``.txt`` files addressed by name without the suffix,
e.g. ``"positive-words"``. Reads that fail come back as ``None`` so callers
decide whether a missing file matters.
"""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from lexirate.core.logging import get_logger

logger = get_logger(__name__)

DATA_PACKAGE = "lexirate.data"
SAMPLES_DIR = "samples"
RESOURCE_SUFFIX = ".txt"


def data_root() -> Traversable:
    """Root of the bundled data directory."""
    return files(DATA_PACKAGE)


def samples_root() -> Traversable:
    """Directory holding the bundled sample corpus."""
    return data_root() / SAMPLES_DIR


def read_file(resource: Path | Traversable) -> str | None:
    """Read a UTF-8 file, or return None if it is missing or unreadable."""
    if not resource.is_file():
        logger.warning("Resource not found", resource=str(resource))
        return None

    try:
        return resource.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.warning("Resource is not valid UTF-8", resource=str(resource), error=str(e))
        return None
    except OSError as e:
        logger.warning("Resource could not be read", resource=str(resource), error=str(e))
        return None


def load_text(name: str, *, directory: Path | Traversable | None = None) -> str | None:
    """Read a named text resource.

    Args:
        name: Resource name without the ``.txt`` suffix.
        directory: Where to look. Defaults to the bundled data directory.

    Returns:
        File contents, or None if the resource is missing or not valid UTF-8.
    """
    root = directory if directory is not None else data_root()
    return read_file(root / f"{name}{RESOURCE_SUFFIX}")


def load_sample(name: str) -> str | None:
    """Read one text from the bundled sample corpus."""
    return load_text(name, directory=samples_root())


def list_samples() -> list[str]:
    """Names of the bundled sample texts, sorted."""
    return sorted(
        entry.name[: -len(RESOURCE_SUFFIX)]
        for entry in samples_root().iterdir()
        if entry.is_file() and entry.name.endswith(RESOURCE_SUFFIX)
    )
