"""Core constants used across UserDB modules.

This module centralizes registry endpoints, timeouts, and limits.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

SPECIAL_DIRECTORY_URL = "http://registry.dstar.su/api/node.php"
FIXED_USERS_URL = "https://raw.githubusercontent.com/travisgoodspeed/md380tools/master/db/fixed.csv"
RADIOID_USERS_URL = "https://www.radioid.net/static/users_quoted.csv"
HAMDIGITAL_USERS_URL = "https://ham-digital.org/status/users_quoted.csv"
REFLECTOR_USERS_URL = "http://registry.dstar.su/reflector.db"
SPECIAL_USERS_PATH = "md380tools/special_IDs.csv"
DEFAULT_TRANSPORT_TIMEOUT_SECONDS = 20.0
DEFAULT_CLIENT_TIMEOUT_SECONDS = 300.0
DEFAULT_LOG_LEVEL = "WARNING"
DOWNLOAD_CHUNK_SIZE = 64 * 1024
USER_AGENT = "userdb/0.1"
MIN_PROGRESS = 0
MAX_PROGRESS = 1_000_000
MIN_QUOTED_USER_LINES = 50_000
MAX_RADIO_ID = (1 << 24) - 1
SPECIAL_MIN_FIELD_COUNT = 7
