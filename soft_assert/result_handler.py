"""
result_handler.py

Turns soft assertion failures left in a test's collector into the outcome of its call phase.
This module keeps the reporting logic out of the pytest hooks in plugin.py.

Soft failures are raised inside the call phase, so pytest, its xfail handling and Allure all
see a real AssertionError. When the test body already failed on its own, the soft report is
kept aside and appended to that failure's report instead.
"""
import logging
from typing import Any, Optional

import allure
from _pytest.nodes import Item
from _pytest.reports import TestReport
from _pytest.runner import CallInfo

from soft_assert.collector import SoftAssertionCollector
from soft_assert.config import SoftAssertSettings
from soft_assert.errors import AggregatedAssertionFailure

logger = logging.getLogger(__name__)

ATTACHMENT_NAME = 'Soft assertion failures'


class SoftAssertResultHandler:
    """
    Processes the soft assertion collector attached to a test item.

    The fixture attaches its collector as ``item._soft_assert``; this handler drains it at the
    end of the call phase.
    """

    def __init__(self, config: Any) -> None:
        """
        Initialize the result handler.

        Args:
            config: The pytest config object for storing state
        """
        self.config = config
        self.settings = SoftAssertSettings.from_pytest_config(config)

        # Soft reports waiting to be appended to a hard failure, keyed by nodeid
        if not hasattr(self.config, '_soft_assert_reports'):
            self.config._soft_assert_reports = {}

    def process_call_outcome(self, item: Item, outcome: Any) -> None:
        """
        Process the outcome of the pytest_runtest_call hook.

        A passing test body gets the aggregated failure forced as its exception. A test body
        that raised keeps its own exception and the soft report is stored for
        process_test_result.

        Args:
            item: The pytest test item being run
            outcome: The pluggy result of the call phase
        """
        __tracebackhide__ = True
        collector: Optional[SoftAssertionCollector] = getattr(item, '_soft_assert', None)
        if collector is None or not collector.has_failures():
            return

        try:
            collector.flush_and_report()
        except AggregatedAssertionFailure as failure:
            text = failure.render()
            if self.settings.attach_to_allure:
                self._attach_report(text)

            if outcome.exception is None:
                logger.warning(f"{item.nodeid} failed with {len(failure.failures)} soft assertion failure(s)")
                outcome.force_exception(failure)
            else:
                self.config._soft_assert_reports[item.nodeid] = text

    def process_test_result(self, item: Item, call: CallInfo, report: TestReport) -> None:
        """
        Append a stored soft report to the call phase report of a test that raised.

        Args:
            item: The pytest test item being run
            call: Information about the test function call
            report: The pytest report object
        """
        if report.when != 'call':
            return

        text = self.config._soft_assert_reports.pop(item.nodeid, None)
        if text is None:
            return

        longrepr = report.longrepr
        if hasattr(longrepr, 'addsection'):
            # Part of the failure itself, so --show-capture does not hide it
            longrepr.addsection(ATTACHMENT_NAME, text)
        elif isinstance(longrepr, str):
            report.longrepr = f'{longrepr}\n{text}'
        else:
            logger.warning(f"{item.nodeid} was {report.outcome}; dropping soft assertion failures:\n{text}")

    @staticmethod
    def _attach_report(text: str) -> None:
        allure.attach(text, name=ATTACHMENT_NAME, attachment_type=allure.attachment_type.TEXT)
