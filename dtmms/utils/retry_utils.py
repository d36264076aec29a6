from redis.exceptions import ResponseError
from tenacity import (
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
    Retrying,
)


def _is_transient(error: BaseException) -> bool:
    # Invalid input and Redis command errors (e.g. WRONGTYPE) fail the same
    # way on every attempt.
    return not isinstance(error, (ValueError, ResponseError))


class RetryUtils:
    """
    Holds the retry policy used for every Redis round trip.

    Calls are made as `retry_utils.get_retry_on_transient(fn, *args)`; the
    last exception is re-raised once attempts are exhausted.
    """

    def __init__(self):
        self._retry_on_transient = Retrying(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(3),
            wait=wait_exponential(multiplier=1, min=1, max=3),
            reraise=True,
        )

    @property
    def get_retry_on_transient(self) -> Retrying:
        """
        Returns the Retrying instance for transient failures: up to 3 attempts
        with exponential back-off between 1 and 3 seconds. `ValueError` and
        Redis `ResponseError` are raised immediately.
        """
        return self._retry_on_transient
