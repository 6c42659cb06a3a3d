"""Loaders for the instance identifier file and the address list."""

import os
from typing import List, Optional


def _read_tokens(path: str) -> List[str]:
    """Whitespace-split file content, empty if the file is not valid UTF-8."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read().split()
    except UnicodeDecodeError as e:
        print(f"[WARN] {path} is not valid UTF-8, treating it as empty: {e}")
        return []


def load_instance_ids(instances_file: str) -> Optional[List[str]]:
    """Read instance identifiers verbatim.

    Args:
        instances_file: Path to the identifier file

    Returns:
        Whitespace-separated tokens, or None if the file does not exist
    """
    if not os.path.isfile(instances_file):
        return None
    return _read_tokens(instances_file)


def load_ip_list(ip_list_file: str) -> List[str]:
    """Load the address list into memory.

    Args:
        ip_list_file: Path to the line-delimited address file

    Returns:
        Addresses in file order, empty if the file is missing
    """
    if not os.path.exists(ip_list_file):
        return []
    return _read_tokens(ip_list_file)
