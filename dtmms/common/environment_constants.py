# Names of the environment variables read by the application.
REDIS_HOST = "REDIS_HOST"
REDIS_PORT = "REDIS_PORT"
REDIS_PASSWORD = "REDIS_PASSWORD"
REDIS_SSL = "REDIS_SSL"

LOG_LEVEL = "LOG_LEVEL"

STORAGE_NAMESPACE = "STORAGE_NAMESPACE"
