"""IP collection from EC2 for the fleet SSH check."""

from typing import Callable, Dict, List

from ..aws import EC2Manager


def dedupe_adjacent(ips: List[str]) -> List[str]:
    """Collapse runs of consecutive equal entries.

    Non-adjacent repeats survive: [a, b, a, c, c] -> [a, b, a, c].
    """
    result = []
    for ip in ips:
        if not result or result[-1] != ip:
            result.append(ip)
    return result


def dedupe_global(ips: List[str]) -> List[str]:
    """Remove every repeat, keeping first-seen order."""
    seen = set()
    result = []
    for ip in ips:
        if ip not in seen:
            seen.add(ip)
            result.append(ip)
    return result


DEDUPERS: Dict[str, Callable[[List[str]], List[str]]] = {
    'adjacent': dedupe_adjacent,
    'global': dedupe_global,
}


class IPCollector:
    """Collects private IPs of a set of instances."""

    def __init__(self, ec2_manager: EC2Manager, dedup_mode: str = 'adjacent'):
        """Initialize IP collector.

        Args:
            ec2_manager: EC2 manager used for DescribeInstances
            dedup_mode: 'adjacent' or 'global'
        """
        self.ec2_manager = ec2_manager
        self.dedupe = DEDUPERS[dedup_mode]

    def collect(self, instance_ids: List[str]) -> List[str]:
        """Describe the instances and return their deduplicated private IPs.

        Args:
            instance_ids: Instance IDs passed through to the API untouched

        Returns:
            Address list, empty if the API call failed
        """
        return self.dedupe(self.ec2_manager.describe_private_ips(instance_ids))
