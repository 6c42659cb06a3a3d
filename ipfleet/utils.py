"""Shared utilities for the fleet SSH check."""

import os
import datetime
from .constants import UTC_PLUS_8, LOG_DATE_FORMAT, LOG_TIMESTAMP_FORMAT


def get_current_timestamp() -> str:
    """Get current timestamp in UTC+8 timezone."""
    return datetime.datetime.now(UTC_PLUS_8).isoformat(timespec=LOG_TIMESTAMP_FORMAT)


def get_run_log_path(report_dir: str) -> str:
    """Daily JSONL run log path inside report_dir."""
    day = datetime.datetime.now(UTC_PLUS_8).strftime(LOG_DATE_FORMAT)
    return os.path.join(report_dir, f"fleet_ssh_{day}.jsonl")


def ensure_directory_exists(directory: str) -> None:
    """Ensure directory exists, create if necessary."""
    if directory:
        os.makedirs(directory, exist_ok=True)
