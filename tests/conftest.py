import pytest

from soft_assert import SoftAssertionCollector
from soft_assert.config import ATTACH_ENV, TITLE_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the developer's environment out of the tests."""
    monkeypatch.delenv(ATTACH_ENV, raising=False)
    monkeypatch.delenv(TITLE_ENV, raising=False)


@pytest.fixture
def collector():
    """Fixture for a fresh SoftAssertionCollector."""
    return SoftAssertionCollector()
