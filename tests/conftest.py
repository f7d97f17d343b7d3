import pytest

from completion_log.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep each test independent of the caller's environment and settings cache."""
    for name in ("COMPLETION_API_KEY", "COMPLETION_API_URL", "COMPLETION_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
