import pytest

from soft_assert.config import ATTACH_ENV, TITLE_ENV, SoftAssertSettings
from soft_assert.errors import DEFAULT_TITLE


class FakeConfig:
    """Minimal stand-in for the pytest config object."""

    def __init__(self, **options):
        self.options = options

    def getoption(self, name, default=None):
        return self.options.get(name, default)


@pytest.mark.unit
class TestSoftAssertSettings:
    """Unit tests for resolving plugin settings."""

    def test_defaults(self):
        settings = SoftAssertSettings.from_env()

        assert settings.attach_to_allure is True
        assert settings.title == DEFAULT_TITLE

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(ATTACH_ENV, 'false')
        monkeypatch.setenv(TITLE_ENV, 'Soft failures')

        settings = SoftAssertSettings.from_env()

        assert settings.attach_to_allure is False
        assert settings.title == 'Soft failures'

    def test_explicit_values_override_environment(self, monkeypatch):
        monkeypatch.setenv(ATTACH_ENV, 'false')
        monkeypatch.setenv(TITLE_ENV, 'From env')

        settings = SoftAssertSettings.from_env(attach='TRUE', title='From option')

        assert settings.attach_to_allure is True
        assert settings.title == 'From option'

    def test_from_pytest_config(self, monkeypatch):
        monkeypatch.setenv(TITLE_ENV, 'From env')
        config = FakeConfig(soft_assert_attach='false')

        settings = SoftAssertSettings.from_pytest_config(config)

        assert settings.attach_to_allure is False
        assert settings.title == 'From env'

    def test_from_pytest_config_is_cached(self):
        config = FakeConfig()

        first = SoftAssertSettings.from_pytest_config(config)
        config.options['soft_assert_title'] = 'Changed later'

        assert SoftAssertSettings.from_pytest_config(config) is first
        assert first.title == DEFAULT_TITLE

    @pytest.mark.parametrize('value', ['yes', '1', ''])
    def test_invalid_attach_value(self, value):
        with pytest.raises(ValueError, match='Invalid value for soft assert attach'):
            SoftAssertSettings.from_env(attach=value)

    def test_invalid_attach_environment_is_usage_error(self, monkeypatch):
        monkeypatch.setenv(ATTACH_ENV, 'yes')

        with pytest.raises(pytest.UsageError, match="'yes'"):
            SoftAssertSettings.from_pytest_config(FakeConfig())
