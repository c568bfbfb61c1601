import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI binds to CliRunner's captured streams."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()
