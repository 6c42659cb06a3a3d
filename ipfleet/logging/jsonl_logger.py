"""JSONL format logging for the fleet SSH check."""

import json
import os
from typing import List

from ..testing import SSHResult


class JSONLLogger:
    """Handles JSONL format logging."""

    def __init__(self, log_file: str):
        """Initialize JSONL logger.

        Args:
            log_file: Path to JSONL log file
        """
        self.log_file = log_file
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Ensure log file and directory exist."""
        if not os.path.exists(self.log_file):
            directory = os.path.dirname(self.log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            # Just touch the file to create it
            with open(self.log_file, "w"):
                pass

    def log_run(self, timestamp: str, instance_ids: List[str],
                results: List[SSHResult]) -> None:
        """Log one fan-out run in JSONL format.

        Args:
            timestamp: ISO format timestamp
            instance_ids: Instance IDs the address list was built from
            results: Per-address SSH exit statuses
        """
        jsonl_entry = {
            "timestamp": timestamp,
            "instance_ids": instance_ids,
            "ip_count": len(results),
            "failed": sum(1 for r in results if r.returncode != 0),
            "results": [
                {"index": r.index, "ip": r.ip, "returncode": r.returncode}
                for r in results
            ]
        }

        # Append to JSONL file
        with open(self.log_file, "a") as f:
            json.dump(jsonl_entry, f)
            f.write("\n")
            f.flush()  # Ensure data is written to disk
