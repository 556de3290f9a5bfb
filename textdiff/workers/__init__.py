"""
Background workers for non-blocking operations.

Provides QThread-based workers for file comparison.
Workers use Qt signals for thread-safe communication
with the UI thread.
"""

from textdiff.workers.base_worker import (
    BaseWorker,
    CancelledException,
    WorkerSignals,
    WorkerState,
    WorkerThread,
)
from textdiff.workers.compare_worker import (
    LineCompareWorker,
)

__all__ = [
    # Base
    'BaseWorker',
    'CancelledException',
    'WorkerSignals',
    'WorkerState',
    'WorkerThread',
    # Compare
    'LineCompareWorker',
]
