"""Root pytest configuration."""

import pytest

from mdhtml import converter_api


@pytest.fixture
def reset_default_facade():
    """Restore the process-wide facade after a test replaces it."""
    saved = converter_api._facade
    converter_api._facade = None
    yield
    converter_api._facade = saved
