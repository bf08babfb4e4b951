"""
config.py

Settings for the soft assertion pytest plugin.

Values come from command-line options first, then environment variables, then defaults:
    --soft-assert-attach / SOFT_ASSERT_ATTACH: attach the aggregated report to Allure (true/false)
    --soft-assert-title / SOFT_ASSERT_TITLE: first line of the aggregated report
"""
import os
from typing import Any, Optional

import pytest

from soft_assert.errors import DEFAULT_TITLE

ATTACH_ENV = 'SOFT_ASSERT_ATTACH'
TITLE_ENV = 'SOFT_ASSERT_TITLE'


def _is_true(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized not in ('true', 'false'):
        raise ValueError(f"Invalid value for soft assert attach: {value!r}, expected 'true' or 'false'")
    return normalized == 'true'


class SoftAssertSettings:
    """
    Resolved plugin settings.

    Attributes:
        attach_to_allure (bool): Attach the rendered report to the running Allure test
        title (str): Title used by collectors created through the fixture
    """

    def __init__(self, attach_to_allure: bool = True, title: str = DEFAULT_TITLE) -> None:
        self.attach_to_allure = attach_to_allure
        self.title = title

    def __repr__(self) -> str:
        return f'SoftAssertSettings(attach_to_allure={self.attach_to_allure!r}, title={self.title!r})'

    @classmethod
    def from_env(cls, attach: Optional[str] = None, title: Optional[str] = None) -> 'SoftAssertSettings':
        """
        Build settings from explicit values, falling back to environment variables.

        Args:
            attach: 'true'/'false', overrides SOFT_ASSERT_ATTACH when given
            title: Overrides SOFT_ASSERT_TITLE when given

        Returns:
            SoftAssertSettings: The resolved settings

        Raises:
            ValueError: If the attach value is neither 'true' nor 'false'
        """
        if attach is None:
            attach = os.getenv(ATTACH_ENV, 'true')
        if title is None:
            title = os.getenv(TITLE_ENV, DEFAULT_TITLE)
        return cls(attach_to_allure=_is_true(attach), title=title)

    @classmethod
    def from_pytest_config(cls, config: Any) -> 'SoftAssertSettings':
        """
        Resolve settings for a pytest run and cache them on the config object.

        Args:
            config: The pytest config object

        Returns:
            SoftAssertSettings: The resolved settings

        Raises:
            pytest.UsageError: If the attach option or variable is invalid
        """
        if not hasattr(config, '_soft_assert_settings'):
            try:
                config._soft_assert_settings = cls.from_env(
                    attach=config.getoption('soft_assert_attach', default=None),
                    title=config.getoption('soft_assert_title', default=None),
                )
            except ValueError as e:
                raise pytest.UsageError(str(e)) from e
        return config._soft_assert_settings
