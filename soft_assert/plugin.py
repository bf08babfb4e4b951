"""
plugin.py

Pytest plugin that provides the ``soft_assert`` fixture and reports soft assertion failures
as part of the test's call phase. Registered through the ``pytest11`` entry point.
"""
import pytest
from _pytest.runner import CallInfo

from soft_assert.collector import SoftAssertionCollector
from soft_assert.config import SoftAssertSettings
from soft_assert.result_handler import SoftAssertResultHandler


# Pytest Configuration
def pytest_addoption(parser):
    """Add custom command-line options"""
    group = parser.getgroup('soft-assert', 'soft assertions')
    group.addoption("--soft-assert-attach", action="store", default=None,
                    help="Attach soft assertion failures to the Allure report (true/false). "
                         "Defaults to $SOFT_ASSERT_ATTACH or true")
    group.addoption("--soft-assert-title", action="store", default=None,
                    help="Title of the aggregated soft assertion report. Defaults to $SOFT_ASSERT_TITLE")


@pytest.hookimpl
def pytest_configure(config):
    SoftAssertSettings.from_pytest_config(config)


@pytest.fixture
def soft_assert(request):
    """
    Provides a soft assertion collector that records failures without stopping test execution.

    The collector is attached to the test item so the call phase report can include its
    failures. Checks recorded after the call phase are raised when the fixture is torn down.

    Args:
        request: The pytest request object

    Returns:
        SoftAssertionCollector: Soft assertion collector owned by this test
    """
    settings = SoftAssertSettings.from_pytest_config(request.config)
    collector = SoftAssertionCollector(title=settings.title)
    request.node._soft_assert = collector  # Attach to the pytest item for later access
    yield collector
    collector.flush_and_report()


# Pytest Hooks
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item) -> None:
    """
    Fail the call phase of tests whose soft assertions failed.

    The aggregated failure becomes the exception of the call, so xfail handling and the
    Allure listener treat it like any other assertion failure.

    Args:
        item: The pytest test item being run
    """
    outcome = yield

    handler = SoftAssertResultHandler(item.config)
    handler.process_call_outcome(item, outcome)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call: CallInfo) -> None:
    """
    Show soft assertion failures next to a failure raised by the test itself.

    Args:
        item: The pytest test item being run
        call: Information about the test function call
    """
    outcome = yield
    report = outcome.get_result()

    handler = SoftAssertResultHandler(item.config)
    handler.process_test_result(item, call, report)
