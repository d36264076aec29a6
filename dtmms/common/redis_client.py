from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError
from dtmms.common.environment_constants import (
    REDIS_HOST,
    REDIS_PASSWORD,
    REDIS_PORT,
    REDIS_SSL,
)
import os


class RedisClientError(Exception):
    """Exception raised when creating the Redis client fails."""


class RedisClient:
    """
    A Redis client factory that creates and caches a Redis client.

    Connection parameters are read from the environment. The injected retry
    utility retries connection attempts on transient errors.

    Attributes:
        _redis_client (Redis): Cached Redis client instance.
    """

    def __init__(
        self,
        logger,
        retry_utils,
    ):
        """
        Initialize the Redis client factory.

        Args:
            logger: Logger instance for logging.
            retry_utils: RetryUtils instance providing retry logic.

        Raises:
            ValueError: If the Redis host or port is not configured.
            RedisClientError: If the connection fails after retries.
        """
        self.logger = logger
        self.retry_utils = retry_utils
        self._redis_host = os.environ.get(REDIS_HOST)
        self._redis_port = os.environ.get(REDIS_PORT)
        self._redis_password = os.environ.get(REDIS_PASSWORD)
        self._redis_ssl = os.environ.get(REDIS_SSL, "false").lower() == "true"
        self._redis_client = self.create_redis_client()

    def _connect_to_redis(self) -> Redis:
        """
        Attempt to create a Redis client and verify connectivity.

        Returns:
            Redis: Connected Redis client.

        Raises:
            RedisConnectionError: If a connection-related error occurs.
            TimeoutError: If a timeout occurs during connection.
        """
        client = Redis(
            host=self._redis_host,
            port=int(self._redis_port),
            password=self._redis_password,
            ssl=self._redis_ssl,
            decode_responses=True,
        )
        client.ping()
        return client

    def create_redis_client(self) -> Redis:
        """
        Create and return the Redis client instance.

        Retries transient connection errors using the injected RetryUtils instance.

        Returns:
            Redis: Connected Redis client.

        Raises:
            ValueError: If the Redis host or port is not configured.
            RedisClientError: If connection fails after retries.
            Exception: For any unexpected errors during client creation.
        """
        if not self._redis_host:
            self.logger.error(
                f"Initialize Redis client failed: environment variable {REDIS_HOST} is not set."
            )
            raise ValueError(f"Please set environment variable: {REDIS_HOST}.")
        if not self._redis_port:
            self.logger.error(
                f"Initialize Redis client failed: environment variable {REDIS_PORT} is not set."
            )
            raise ValueError(f"Please set environment variable: {REDIS_PORT}.")

        try:
            redis_client = self.retry_utils.get_retry_on_transient(
                self._connect_to_redis
            )
            self.logger.info("Created Redis client successfully.")
        except (RedisConnectionError, TimeoutError) as e:
            self.logger.error(
                f"Failed to connect to Redis server {self._redis_host}:{self._redis_port} after retries: {e}"
            )
            raise RedisClientError("Failed to create Redis client.") from e
        except Exception as e:
            self.logger.error(f"Unexpected error during Redis client creation: {e}")
            raise

        return redis_client

    def get_redis_client(self) -> Redis:
        """
        Return the cached Redis client instance.

        Returns:
            Redis: Connected Redis client.
        """
        return self._redis_client
