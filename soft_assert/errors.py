"""
errors.py

Failure records and the aggregated failure raised when soft assertions are reported.
"""
from dataclasses import dataclass
from typing import Iterable

DEFAULT_TITLE = 'Assertion Errors(click to expand Allure report):'


@dataclass(frozen=True)
class FailureRecord:
    """A single failed soft check."""

    message: str


class AggregatedAssertionFailure(AssertionError):
    """
    Raised once per session with every soft failure collected so far.

    Subclasses AssertionError so pytest reports it as a test failure rather than an error.

    Attributes:
        failures (tuple[FailureRecord, ...]): The collected records in insertion order
        title (str): First line of the rendered report
    """

    def __init__(self, failures: Iterable[FailureRecord], title: str = DEFAULT_TITLE) -> None:
        self.failures = tuple(failures)
        self.title = title
        super().__init__(self.render())

    @property
    def messages(self) -> list[str]:
        return [failure.message for failure in self.failures]

    def render(self) -> str:
        """
        Render the numbered report.

        Returns:
            str: The title followed by one numbered block per failure, 1-based
        """
        blocks = '\n'.join(
            f'❌ [Assertion {index}]: \n{failure.message}\n'
            for index, failure in enumerate(self.failures, start=1)
        )
        return f'{self.title}\n{blocks}'
