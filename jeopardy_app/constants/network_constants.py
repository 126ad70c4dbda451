"""Network configuration constants for the category service."""

DEFAULT_API_BASE_URL: str = "https://projects.springboard.com/jeopardy/api"
CATEGORY_POOL_SIZE: int = 100
FETCH_TIMEOUT_SECONDS: float = 10.0
FETCH_MAX_RETRIES: int = 2
FETCH_RETRY_WAIT_SECONDS: float = 1.0

# Outer bound on one fetch: every attempt may use its full timeout, plus the
# exponential backoff waits (1s, 2s) between them.
FETCH_DEADLINE_SECONDS: float = (
    (FETCH_MAX_RETRIES + 1) * FETCH_TIMEOUT_SECONDS
    + FETCH_RETRY_WAIT_SECONDS * (2**FETCH_MAX_RETRIES - 1)
)

LOCAL_SERVER_HOST: str = "127.0.0.1"
LOCAL_SERVER_PORT: int = 8000
LOCAL_MAX_POOL: int = 100
