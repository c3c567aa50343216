"""
Retry handler for Suri API calls: exponential backoff with jitter and a
circuit breaker that stops hammering an API that keeps failing.
"""

import logging
import random
import threading
import time
from typing import Any, Callable, Dict, Optional

from queue_dashboard.services.error_classifier import ErrorClassifier
from queue_dashboard.services.errors import CircuitBreakerError, RetryExhaustedException

logger = logging.getLogger(__name__)


class RetryHandler:
    """
    Runs a callable, retrying transient failures.

    Whether an error is transient is decided by ``retry_condition``, which
    defaults to ``ErrorClassifier.is_retryable`` (429, 5xx, timeouts and
    connection errors). Non-retryable errors propagate unchanged.

    After ``circuit_breaker_threshold`` consecutive exhausted calls the
    circuit opens and calls fail fast with ``CircuitBreakerError`` until
    ``circuit_breaker_timeout`` seconds have passed.
    """

    def __init__(
        self,
        max_retries: int = 3,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        exponential_base: float = 2,
        jitter_factor: float = 0.1,
        circuit_breaker_threshold: int = 5,
        circuit_breaker_timeout: float = 60.0,
        retry_condition: Optional[Callable[[Exception], bool]] = None,
        classifier: Optional[ErrorClassifier] = None,
    ):
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter_factor = jitter_factor
        self.circuit_breaker_threshold = circuit_breaker_threshold
        self.circuit_breaker_timeout = circuit_breaker_timeout
        self.classifier = classifier or ErrorClassifier()
        self.retry_condition = retry_condition or self.classifier.is_retryable

        self._circuit_open = False
        self._circuit_opened_at = 0.0
        self._consecutive_failures = 0

        self._stats: Dict[str, int] = {"calls": 0, "retries": 0, "failures": 0}
        self._lock = threading.Lock()

    def _calculate_delay(self, attempt: int) -> float:
        """Backoff delay in seconds for a 0-based attempt number."""
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        jitter = random.uniform(-self.jitter_factor, self.jitter_factor) * delay
        return max(0.0, delay + jitter)

    def _circuit_is_open(self) -> bool:
        with self._lock:
            if not self._circuit_open:
                return False
            if time.monotonic() - self._circuit_opened_at >= self.circuit_breaker_timeout:
                logger.info("Circuit breaker half-open, allowing a trial call")
                return False
            return True

    def _record_success(self) -> None:
        with self._lock:
            self._consecutive_failures = 0
            if self._circuit_open:
                logger.info("Circuit breaker closed")
                self._circuit_open = False

    def _record_failure(self) -> None:
        with self._lock:
            self._consecutive_failures += 1
            self._stats["failures"] += 1
            if (
                not self._circuit_open
                and self._consecutive_failures >= self.circuit_breaker_threshold
            ):
                logger.warning(
                    f"Circuit breaker opened after {self._consecutive_failures} "
                    f"consecutive failures"
                )
                self._circuit_open = True
                self._circuit_opened_at = time.monotonic()

    def execute_with_retry(self, func: Callable, *args, **kwargs) -> Any:
        """
        Call ``func(*args, **kwargs)``, retrying retryable failures.

        Raises:
            CircuitBreakerError: If the circuit breaker is open
            RetryExhaustedException: If every attempt failed with a retryable error
            Exception: The original exception if it is not retryable
        """
        with self._lock:
            self._stats["calls"] += 1

        if self._circuit_is_open():
            raise CircuitBreakerError("Circuit breaker is open")

        func_name = getattr(func, "__name__", repr(func))

        for attempt in range(self.max_retries + 1):
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if not self.retry_condition(e):
                    logger.debug(f"Not retrying {func_name}: {type(e).__name__}")
                    raise

                if attempt >= self.max_retries:
                    logger.warning(
                        f"{func_name} failed after {attempt + 1} attempt(s): "
                        f"{self.classifier.get_error_description(e)}"
                    )
                    with self._lock:
                        self._stats["retries"] += attempt
                    self._record_failure()
                    raise RetryExhaustedException(
                        f"Max retries ({self.max_retries}) exceeded. "
                        f"Last error: {type(e).__name__}: {e}"
                    ) from e

                delay = self._calculate_delay(attempt)
                logger.debug(
                    f"Retrying {func_name} in {delay:.2f}s "
                    f"(attempt {attempt + 1}/{self.max_retries + 1}): {e}"
                )
                time.sleep(delay)
                continue

            if attempt > 0:
                logger.info(f"{func_name} succeeded after {attempt} retries")
                with self._lock:
                    self._stats["retries"] += attempt
            self._record_success()
            return result

        raise AssertionError("unreachable")  # pragma: no cover

    def get_retry_statistics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "total_calls": self._stats["calls"],
                "total_retries": self._stats["retries"],
                "total_failures": self._stats["failures"],
                "circuit_breaker_open": self._circuit_open,
                "consecutive_failures": self._consecutive_failures,
            }

    def reset_circuit_breaker(self) -> None:
        """Manually close the circuit breaker."""
        with self._lock:
            self._circuit_open = False
            self._consecutive_failures = 0
            self._circuit_opened_at = 0.0
        logger.info("Circuit breaker manually reset")
