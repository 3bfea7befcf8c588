"""
Prometheus metrics for the record store.

Tracks repository operations per table, their outcome and latency.
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from prometheus_client import Counter, Histogram

from recordstore.domain.exceptions import RecordNotFoundException

record_operations_total = Counter(
    "recordstore_operations_total",
    "Total repository operations",
    ["table", "operation", "status"],
)

record_operation_duration_seconds = Histogram(
    "recordstore_operation_duration_seconds",
    "Repository operation duration in seconds",
    ["table", "operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)


@asynccontextmanager
async def track_operation(table: str, operation: str) -> AsyncIterator[None]:
    """
    Record outcome and duration of one repository operation.

    Status is ``not_found`` for missing records, ``error`` for any other
    exception and ``success`` otherwise. Exceptions are re-raised.
    """
    start = time.perf_counter()
    status = "success"
    try:
        yield
    except RecordNotFoundException:
        status = "not_found"
        raise
    except Exception:
        status = "error"
        raise
    finally:
        record_operations_total.labels(table=table, operation=operation, status=status).inc()
        record_operation_duration_seconds.labels(table=table, operation=operation).observe(
            time.perf_counter() - start
        )
