"""Configuration management for the fleet SSH check."""

import json
import os
import sys
from typing import Any, Dict, Optional


DEFAULTS: Dict[str, Any] = {
    'region': None,
    'instances_file': 'instances',
    'ips_file': 'ips',
    'ips_backup_file': 'ips_old',
    'dedup_mode': 'adjacent',
    'ssh_binary': 'ssh',
    'ssh_user': None,
    'key_path': None,
    'ssh_connect_timeout': None,
    'ssh_remote_command': None,
    'report_status': False,
    'report_dir': None,
}

DEDUP_MODES = ('adjacent', 'global')


class Config:
    """Centralized configuration management with validation.

    Every field has a default, so a missing default config file is not an
    error. An explicitly requested file that does not exist is.
    """

    def __init__(self, config_path: str = "config.json", required: bool = False,
                 overrides: Optional[Dict[str, Any]] = None):
        """Load and validate configuration from JSON file.

        Args:
            config_path: Path to configuration file
            required: Exit if the file is missing instead of using defaults
            overrides: Values that take precedence over the file (e.g. CLI flags)
        """
        self._data = dict(DEFAULTS)
        self._load_and_validate(config_path, required)
        if overrides:
            self._data.update({k: v for k, v in overrides.items() if v is not None})
            self._validate()

    def _load_and_validate(self, config_path: str, required: bool) -> None:
        """Load configuration and validate field values."""
        try:
            with open(config_path, 'r') as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("Configuration must be a JSON object")
            self._data.update(loaded)
        except FileNotFoundError:
            if required:
                print(f"[ERROR] Configuration file '{config_path}' not found")
                sys.exit(1)
        except json.JSONDecodeError as e:
            print(f"[ERROR] Invalid JSON in configuration file: {e}")
            sys.exit(1)
        except Exception as e:
            print(f"[ERROR] Error loading config: {e}")
            sys.exit(1)

        self._validate()

    def _validate(self) -> None:
        """Check field types and enumerations."""
        if self._data['dedup_mode'] not in DEDUP_MODES:
            print(f"[ERROR] Invalid dedup_mode '{self._data['dedup_mode']}', "
                  f"expected one of {list(DEDUP_MODES)}")
            sys.exit(1)

        timeout = self._data['ssh_connect_timeout']
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
            print(f"[ERROR] ssh_connect_timeout must be a positive integer, got {timeout!r}")
            sys.exit(1)

        for field in ('instances_file', 'ips_file', 'ips_backup_file', 'ssh_binary'):
            if not isinstance(self._data[field], str) or not self._data[field]:
                print(f"[ERROR] {field} must be a non-empty string")
                sys.exit(1)

        for field in ('region', 'ssh_user', 'key_path', 'ssh_remote_command', 'report_dir'):
            if self._data[field] is not None and not isinstance(self._data[field], str):
                print(f"[ERROR] {field} must be a string or null, got {self._data[field]!r}")
                sys.exit(1)

        if not isinstance(self._data['report_status'], bool):
            print(f"[ERROR] report_status must be true or false, got {self._data['report_status']!r}")
            sys.exit(1)

        # Expand user paths
        if self._data['key_path']:
            self._data['key_path'] = os.path.expanduser(self._data['key_path'])

    @property
    def region(self) -> Optional[str]:
        """AWS region, or None for the boto3 default chain."""
        return self._data['region']

    @property
    def instances_file(self) -> str:
        """File holding the instance identifiers."""
        return self._data['instances_file']

    @property
    def ips_file(self) -> str:
        """Line-delimited address list."""
        return self._data['ips_file']

    @property
    def ips_backup_file(self) -> str:
        """One-generation backup of the address list."""
        return self._data['ips_backup_file']

    @property
    def dedup_mode(self) -> str:
        """'adjacent' collapses consecutive repeats only, 'global' removes all repeats."""
        return self._data['dedup_mode']

    @property
    def ssh_binary(self) -> str:
        return self._data['ssh_binary']

    @property
    def ssh_user(self) -> Optional[str]:
        return self._data['ssh_user']

    @property
    def key_path(self) -> Optional[str]:
        """Path to SSH private key, None for default authentication."""
        return self._data['key_path']

    @property
    def ssh_connect_timeout(self) -> Optional[int]:
        """Per-connection ConnectTimeout in seconds, None leaves ssh's default."""
        return self._data['ssh_connect_timeout']

    @property
    def ssh_remote_command(self) -> Optional[str]:
        return self._data['ssh_remote_command']

    @property
    def report_status(self) -> bool:
        """Whether to print a per-address exit status summary."""
        return bool(self._data['report_status'])

    @property
    def report_dir(self) -> Optional[str]:
        """Directory for JSONL run records, None disables them."""
        return self._data['report_dir']
