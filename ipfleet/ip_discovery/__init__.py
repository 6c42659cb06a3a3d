"""IP discovery and management module for the fleet SSH check."""

from .ip_collector import IPCollector, dedupe_adjacent, dedupe_global
from .ip_persistence import IPPersistence
from .ip_loader import load_instance_ids, load_ip_list

__all__ = ['IPCollector', 'IPPersistence', 'dedupe_adjacent', 'dedupe_global',
           'load_instance_ids', 'load_ip_list']
