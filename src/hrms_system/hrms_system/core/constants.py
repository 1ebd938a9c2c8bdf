"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EXPIRING_LICENSE_DAYS = 30
RECENT_LEAVES_LIMIT = 5
DEFAULT_NOTIFICATION_LIMIT = 50
MAX_NOTIFICATION_LIMIT = 200
USER_ID_HEADER = "X-User-Id"
REQUEST_ID_HEADER = "X-Request-ID"
