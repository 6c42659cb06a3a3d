"""EC2 instance queries for the fleet SSH check."""

from typing import Any, Dict, List, Optional
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import Config
from ..constants import ADDRESS_QUOTE_CHARS


def extract_private_ips(response: Dict[str, Any]) -> List[str]:
    """Pull PrivateIpAddress out of a DescribeInstances response.

    Walks every instance of every reservation in response order. Instances
    without a private address (terminated ones, for example) are skipped.

    Args:
        response: DescribeInstances response dict

    Returns:
        List of addresses, quote characters stripped, repeats kept
    """
    ips = []
    for reservation in response.get('Reservations', []):
        for instance in reservation.get('Instances', []):
            private_ip = instance.get('PrivateIpAddress')
            if not private_ip:
                print(f"[WARN] Instance {instance.get('InstanceId', '?')} has no private IP, skipping")
                continue
            for quote in ADDRESS_QUOTE_CHARS:
                private_ip = private_ip.replace(quote, '')
            ips.append(private_ip)
    return ips


class EC2Manager:
    """Manages EC2 instance queries."""

    def __init__(self, config: Config, client: Optional[Any] = None):
        """Initialize EC2 manager.

        Args:
            config: Configuration object
            client: Preconfigured EC2 client (created from config.region if omitted)
        """
        self.config = config
        self.client = client if client is not None else self._create_client()

    def _create_client(self) -> Optional[Any]:
        """Create the EC2 client, None if boto3 cannot (e.g. no region configured)."""
        try:
            return boto3.client('ec2', region_name=self.config.region)
        except (ClientError, BotoCoreError) as e:
            print(f"[ERROR] Creating EC2 client failed: {e}")
            return None

    def describe_private_ips(self, instance_ids: List[str]) -> List[str]:
        """Get the private IPs of the given instances.

        Args:
            instance_ids: List of instance IDs

        Returns:
            Private addresses in response order, empty list on API failure
        """
        if not instance_ids:
            print("[WARN] No instance IDs given, nothing to describe")
            return []

        if self.client is None:
            print("[ERROR] No EC2 client available, skipping describe")
            return []

        try:
            response = self.client.describe_instances(InstanceIds=instance_ids)
        except (ClientError, BotoCoreError) as e:
            print(f"[ERROR] Describing instances failed: {e}")
            return []

        return extract_private_ips(response)
