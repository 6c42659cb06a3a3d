"""AWS-related modules for the fleet SSH check."""

from .ec2_manager import EC2Manager, extract_private_ips

__all__ = ['EC2Manager', 'extract_private_ips']
