"""Pure constants for the arXiv client. No side effects at import time."""

# === API ===
ARXIV_API_URL = "https://export.arxiv.org/api/query"
DEFAULT_USER_AGENT = "arxiv-client/0.1"

# === Pagination ===
DEFAULT_PAGE_SIZE = 500  # Results per request
DEFAULT_TOTAL_LIMIT = 0  # 0 = no cap across pages
MAX_PAGE_SIZE = 30000  # arXiv refuses larger windows

# === Sorting ===
DEFAULT_SORT_BY = "relevance"
DEFAULT_SORT_ORDER = "descending"

# === Rate Limit ===
# arXiv asks clients to keep at least a few seconds between calls;
# one second is the floor the API tolerates for short bursts.
DEFAULT_MIN_REQUEST_INTERVAL = 1.0  # seconds

# === Retry ===
DEFAULT_RETRY_ATTEMPTS = 3  # Total attempts, first one included
DEFAULT_RETRY_DELAY = 1.0  # seconds, applied from the second retry onward
DEFAULT_RETRY_MULTIPLIER = 1.0  # 1.0 = fixed delay
DEFAULT_MAX_RETRY_DELAY = 60.0  # seconds

# === Timeouts (seconds) ===
DEFAULT_TIMEOUT = 30.0

# === Feed ===
ARXIV_ABS_PREFIXES = ("http://arxiv.org/abs/", "https://arxiv.org/abs/")
ARXIV_ERROR_ID_PREFIX = "http://arxiv.org/api/errors"
