"""
collector.py

Soft assertion collector. Checks record failures instead of raising, and flush_and_report
raises them all at once as a single AggregatedAssertionFailure.
"""
import logging
from enum import Enum
from typing import Any

from soft_assert.errors import DEFAULT_TITLE, AggregatedAssertionFailure, FailureRecord
from soft_assert.values import require_number, strictly_equal, to_text

logger = logging.getLogger(__name__)

EQUAL_TEMPLATE = '🔪{message}\n🙅🏼 Actual: {actual!r}\n💁🏼 Expected: {expected!r}'
CONTAINS_TEMPLATE = '{message}\n💁🏼 Actual: "{actual}" does not contain "{expected}"'
TRUE_TEMPLATE = '{message}\n💁🏼 Expected: True, but got: {value!r}'
FALSE_TEMPLATE = '{message}\n💁🏼 Expected: False, but got: {value!r}'
NOT_EQUAL_TEMPLATE = '{message}\n💁🏼 Values were not supposed to be the same. Got: {actual!r}'
GREATER_THAN_TEMPLATE = '{message}\n💁🏼 {actual} is not greater than {expected}'
LESS_THAN_TEMPLATE = '{message}\n💁🏼 {actual} is not less than {expected}'
NOT_NULL_TEMPLATE = '{message}\n💁🏼 Received value is: {value!r}. It should not be None'
CAPTURED_TEMPLATE = 'Line: {lineno}.\n{error}'


class CollectorState(Enum):
    IDLE = 'idle'
    COLLECTING = 'collecting'


class SoftAssertionCollector:
    """
    Collects soft assertion failures and allows tests to continue running.

    Each instance owns its own buffer, so every test session should use its own collector.
    It can also be used as a context manager: a plain AssertionError raised inside the
    ``with`` block is recorded and suppressed.

    Example:
        >>> soft = SoftAssertionCollector()
        >>> soft.assert_equal(cart.count, 1, 'Cart badge count')
        >>> with soft:
        ...     assert product.price == '$29.99'
        >>> soft.flush_and_report()
    """

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title
        self._failures: list[FailureRecord] = []

    def __enter__(self):
        """
        Start the soft assertion context.
        """
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """
        Capture assertion failures raised inside the block and store them.
        """
        if exc_type is AssertionError:
            self._record(CAPTURED_TEMPLATE.format(lineno=traceback.tb_lineno, error=exc_value))
            return True  # Suppress the exception
        return False

    def __len__(self) -> int:
        return len(self._failures)

    @property
    def state(self) -> CollectorState:
        return CollectorState.COLLECTING if self._failures else CollectorState.IDLE

    def _record(self, message: str) -> None:
        logger.debug(f"Soft assertion failed: {message}")
        self._failures.append(FailureRecord(message))

    # Checks

    def assert_equal(self, actual: Any, expected: Any, message: str) -> None:
        """
        Check that actual is strictly equal to expected (no type coercion).

        Args:
            actual: The value under test
            expected: The expected value
            message: Context shown with the failure
        """
        if not strictly_equal(actual, expected):
            self._record(EQUAL_TEMPLATE.format(message=message, actual=actual, expected=expected))

    def assert_contains(self, actual: Any, expected: Any, message: str) -> None:
        """
        Check that the text of actual contains the text of expected.

        Args:
            actual: Text or number to search in
            expected: Text or number to search for
            message: Context shown with the failure

        Raises:
            TypeError: If either value is not text or a number
        """
        actual_text, expected_text = to_text(actual), to_text(expected)
        if expected_text not in actual_text:
            self._record(CONTAINS_TEMPLATE.format(message=message, actual=actual_text, expected=expected_text))

    def assert_true(self, value: Any, message: str) -> None:
        """Check that value is exactly True."""
        if value is not True:
            self._record(TRUE_TEMPLATE.format(message=message, value=value))

    def assert_false(self, value: Any, message: str) -> None:
        """Check that value is exactly False."""
        if value is not False:
            self._record(FALSE_TEMPLATE.format(message=message, value=value))

    def assert_not_equal(self, actual: Any, expected: Any, message: str) -> None:
        if strictly_equal(actual, expected):
            self._record(NOT_EQUAL_TEMPLATE.format(message=message, actual=actual))

    def assert_greater_than(self, actual: Any, expected: Any, message: str) -> None:
        """
        Check that actual > expected. NaN on either side fails the check.

        Raises:
            TypeError: If either value is not a number
        """
        require_number(actual, 'actual')
        require_number(expected, 'expected')
        if not actual > expected:
            self._record(GREATER_THAN_TEMPLATE.format(message=message, actual=actual, expected=expected))

    def assert_less_than(self, actual: Any, expected: Any, message: str) -> None:
        """
        Check that actual < expected. NaN on either side fails the check.

        Raises:
            TypeError: If either value is not a number
        """
        require_number(actual, 'actual')
        require_number(expected, 'expected')
        if not actual < expected:
            self._record(LESS_THAN_TEMPLATE.format(message=message, actual=actual, expected=expected))

    def assert_not_null(self, value: Any, message: str) -> None:
        """Check that value is not None. Falsy values such as 0 or '' pass."""
        if value is None:
            self._record(NOT_NULL_TEMPLATE.format(message=message, value=value))

    # Lifecycle

    def has_failures(self) -> bool:
        """
        Check if there are any failures recorded.
        """
        return bool(self._failures)

    def get_failures(self) -> list[FailureRecord]:
        """
        Retrieve all recorded failures without clearing them.
        """
        return list(self._failures)

    def drain(self) -> list[FailureRecord]:
        """
        Remove and return every recorded failure.

        Returns:
            list[FailureRecord]: The failures in the order they were recorded
        """
        failures, self._failures = self._failures, []
        return failures

    def flush_and_report(self) -> None:
        """
        Raise all recorded failures at once.

        Does nothing when no failure was recorded. Otherwise the buffer is cleared before
        raising, so the next session starts clean whether or not the error is caught.

        Raises:
            AggregatedAssertionFailure: If at least one check failed
        """
        __tracebackhide__ = True
        if not self._failures:
            return
        logger.debug(f"Reporting {len(self._failures)} soft assertion failure(s): "
                     f"{[failure.message for failure in self._failures]}")
        raise AggregatedAssertionFailure(self.drain(), title=self.title)

    assert_all = flush_and_report
