"""Connectivity testing modules for the fleet SSH check."""

from .ssh_client import SSHClient, SSHResult

__all__ = ['SSHClient', 'SSHResult']
