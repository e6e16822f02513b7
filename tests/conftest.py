import pytest

from labelled_graphs.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached process-wide; start and end every test clean."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
