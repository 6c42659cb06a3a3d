"""Shared constants for the fleet SSH check."""

from datetime import timezone, timedelta

# Timezone
UTC_PLUS_8 = timezone(timedelta(hours=8))

# SSH
SSH_HOST_KEY_OPTIONS = ["-o", "StrictHostKeyChecking=no"]
LAUNCH_FAILED_RETURNCODE = -1

# Quote characters stripped from extracted addresses
ADDRESS_QUOTE_CHARS = '"'

# Logging
LOG_DATE_FORMAT = "%Y-%m-%d"
LOG_TIMESTAMP_FORMAT = "seconds"
