"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
DEFAULT_TOKEN_LENGTH = 8
MIN_TOKEN_LENGTH = 6
TOKEN_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_DB_TIMEOUT_SECONDS = 5.0
FALLBACK_ADDRESS = "127.0.0.1"
