from soft_assert.collector import CollectorState, SoftAssertionCollector
from soft_assert.config import SoftAssertSettings
from soft_assert.errors import DEFAULT_TITLE, AggregatedAssertionFailure, FailureRecord
from soft_assert.values import ValueKind, kind_of, strictly_equal

__all__ = [
    'AggregatedAssertionFailure',
    'CollectorState',
    'DEFAULT_TITLE',
    'FailureRecord',
    'SoftAssertSettings',
    'SoftAssertionCollector',
    'ValueKind',
    'kind_of',
    'strictly_equal',
]
