"""
Retry with exponential backoff for storage connection setup.

Only infrastructure calls (opening the PostgreSQL pool) go through this
module. Validation errors from the search engine are deterministic and are
never retried.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Awaitable, Callable


logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior with exponential backoff.

    Attributes:
        max_retries: Maximum number of attempts (including the first one)
        initial_delay_seconds: Delay before the second attempt
        backoff_multiplier: Factor applied to the delay after each failure
    """
    max_retries: int = 3
    initial_delay_seconds: float = 1.0
    backoff_multiplier: float = 2.0

    def get_backoff_delay(self, attempt: int) -> float:
        """
        Calculate backoff delay after a failed attempt.

        delay = initial_delay_seconds * (backoff_multiplier ^ attempt)

        Args:
            attempt: The failed attempt number (0-indexed)

        Returns:
            Delay in seconds before the next attempt
        """
        return self.initial_delay_seconds * (self.backoff_multiplier ** attempt)


async def retry_with_backoff(
    operation: Callable[..., Awaitable[Any]],
    *args,
    config: RetryConfig = None,
    **kwargs
) -> Any:
    """
    Execute an async operation, retrying with exponential backoff.

    Args:
        operation: Async callable to execute
        *args: Positional arguments for the operation
        config: Retry configuration (defaults to RetryConfig())
        **kwargs: Keyword arguments for the operation

    Returns:
        Result of the first successful attempt

    Raises:
        Exception: The last exception encountered once attempts are exhausted
    """
    config = config or RetryConfig()
    name = getattr(operation, "__name__", repr(operation))
    last_exception = None

    for attempt in range(config.max_retries):
        try:
            logger.info(f"Attempt {attempt + 1}/{config.max_retries} for operation {name}")
            return await operation(*args, **kwargs)
        except Exception as e:
            last_exception = e
            _log_failure(name, attempt + 1, config.max_retries, e)

            if attempt == config.max_retries - 1:
                logger.error(
                    f"Operation {name} failed after {config.max_retries} attempts. "
                    f"Final error: {e}"
                )
                break

            delay = config.get_backoff_delay(attempt)
            logger.info(f"Waiting {delay:.1f}s before retry...")
            await asyncio.sleep(delay)

    raise last_exception


def _log_failure(name: str, attempt: int, max_attempts: int, error: Exception) -> None:
    context = {
        'timestamp': datetime.now().isoformat(),
        'operation': name,
        'attempt': f"{attempt}/{max_attempts}",
        'error_type': type(error).__name__,
        'error_message': str(error),
    }
    logger.error(
        f"Operation failed: {name} | "
        f"Attempt: {attempt}/{max_attempts} | "
        f"Error: {type(error).__name__}: {error}"
    )
    logger.debug(f"Full error context: {context}")
