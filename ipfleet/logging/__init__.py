"""Logging modules for the fleet SSH check."""

from .jsonl_logger import JSONLLogger

__all__ = ['JSONLLogger']
