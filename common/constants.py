# Default wait window for arrival checks and presence predicates (milliseconds)
DEFAULT_TIMEOUT_MS = 5000
# Delay between two polls of a waiting predicate (milliseconds)
DEFAULT_POLL_INTERVAL_MS = 100

FLASH_ERROR_SELECTOR = "#flash .error"
FIELD_ACCESSOR_SUFFIX = "_field"
# Locators starting with this prefix are resolved by label text
LABEL_PREFIX = "label="
