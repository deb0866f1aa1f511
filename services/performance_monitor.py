"""
Repository Call Performance Monitor

Decorator that times async repository calls, logs their duration and
warns about slow ones.
"""

import time
from functools import wraps

from logging_config import logger


class QueryPerformanceMonitor:
    """Monitor and log database query performance"""

    # Threshold in seconds for what constitutes a "slow" query
    SLOW_QUERY_THRESHOLD = 1.0

    @staticmethod
    def monitor_query(operation_name: str, slow_threshold: float | None = None):
        """
        Decorator to monitor database query performance

        When the decorated function is a repository method, the collection
        name of ``self`` is added to the log context.

        Args:
            operation_name: Descriptive name of the operation being monitored
            slow_threshold: Override default slow query threshold in seconds

        Usage:
            @monitor_query("count_employees_by_department")
            async def count_by_department(self, department_id):
                ...
        """

        def decorator(func):
            @wraps(func)
            async def wrapper(*args, **kwargs):
                threshold = slow_threshold or QueryPerformanceMonitor.SLOW_QUERY_THRESHOLD
                collection = getattr(args[0], "collection_name", None) if args else None
                start_time = time.perf_counter()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    logger.error(
                        f"Query failed: {operation_name}",
                        extra={
                            "operation": operation_name,
                            "collection": collection,
                            "duration_seconds": round(time.perf_counter() - start_time, 3),
                            "error": str(e),
                        },
                    )
                    raise

                elapsed = time.perf_counter() - start_time
                if elapsed > threshold:
                    logger.warning(
                        f"Slow query detected: {operation_name}",
                        extra={
                            "operation": operation_name,
                            "collection": collection,
                            "duration_seconds": round(elapsed, 3),
                            "function": func.__name__,
                            "threshold": threshold,
                        },
                    )
                else:
                    logger.debug(
                        f"Query completed: {operation_name}",
                        extra={
                            "operation": operation_name,
                            "collection": collection,
                            "duration_seconds": round(elapsed, 3),
                        },
                    )
                return result

            return wrapper

        return decorator


# Convenience function for direct usage
monitor_query = QueryPerformanceMonitor.monitor_query
