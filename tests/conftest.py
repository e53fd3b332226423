"""Pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest
import structlog

from lexirate.config import get_settings
from lexirate.sentiment.lexicon import Lexicon
from lexirate.sentiment.rater import default_rater


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests by default unless -m integration is specified."""
    markexpr = config.getoption("-m", default="")
    if "integration" in markexpr:
        return

    skip_integration = pytest.mark.skip(reason="Integration test - run with: pytest -m integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Swallow log events so they never reach captured stdout."""
    structlog.configure(
        processors=[structlog.testing.LogCapture()],
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_caches() -> Iterator[None]:
    """Drop cached settings and the shared rater between tests."""
    get_settings.cache_clear()
    default_rater.cache_clear()
    yield
    get_settings.cache_clear()
    default_rater.cache_clear()


@pytest.fixture
def small_lexicon() -> Lexicon:
    """A tiny hand-written lexicon for predictable scores."""
    return Lexicon(
        positive=frozenset({"happy", "joy", "best", "good", "dont"}),
        negative=frozenset({"worst", "horror", "bad", "don"}),
    )
