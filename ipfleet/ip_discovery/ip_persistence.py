"""Address list persistence for the fleet SSH check."""

import os
import tempfile
from typing import List

from .ip_loader import load_ip_list


class IPPersistence:
    """Manages the address file and its one-generation backup."""

    def __init__(self, ips_file: str, backup_file: str):
        """Initialize IP persistence manager.

        Args:
            ips_file: Path of the line-delimited address list
            backup_file: Path the previous list is moved to on rotation
        """
        self.ips_file = ips_file
        self.backup_file = backup_file

    def rotate(self) -> None:
        """Move the current list to the backup and start an empty one.

        If there is no current list the existing backup is left alone.
        """
        if os.path.exists(self.ips_file):
            os.replace(self.ips_file, self.backup_file)
        else:
            print(f"[INFO] No {self.ips_file} to back up")
        with open(self.ips_file, 'w'):
            pass

    def save(self, ips: List[str]) -> None:
        """Write the address list, one entry per line.

        Args:
            ips: Addresses to persist
        """
        directory = os.path.dirname(os.path.abspath(self.ips_file))

        # Atomic write: write to temp file then rename
        temp_fd, temp_path = tempfile.mkstemp(dir=directory, text=True)
        try:
            with os.fdopen(temp_fd, 'w') as f:
                for ip in ips:
                    f.write(f"{ip}\n")
            os.replace(temp_path, self.ips_file)
        except Exception:
            # Clean up temp file on error
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def load(self) -> List[str]:
        """Read the current address list."""
        return load_ip_list(self.ips_file)

    def load_backup(self) -> List[str]:
        """Read the previous address list."""
        return load_ip_list(self.backup_file)
