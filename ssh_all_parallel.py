#!/usr/bin/env python3
"""
Refresh the private IPs of a set of EC2 instances and SSH to all of them at once.

Reads instance IDs from the `instances` file, writes their private IPs to `ips`
(previous list kept as `ips_old`), then opens one SSH connection per address
in parallel and waits until every connection has exited.

Usage:
    python3 ssh_all_parallel.py [--config config.json]
"""

import argparse
import sys

from ipfleet.config import Config
from ipfleet.orchestrator import Orchestrator


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Refresh fleet private IPs and SSH to every instance in parallel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use ./instances and ./ips
  python3 ssh_all_parallel.py

  # Different working files
  python3 ssh_all_parallel.py --instances-file fleet_a --ips-file fleet_a_ips
        """
    )
    parser.add_argument('--config', default='config.json',
                       help='Path to config file (default: config.json, optional)')
    parser.add_argument('--instances-file',
                       help='File with instance IDs (default: instances)')
    parser.add_argument('--ips-file',
                       help='Address list file (default: ips)')
    parser.add_argument('--ips-backup-file',
                       help='Backup of the previous address list (default: ips_old)')

    args = parser.parse_args(argv)

    config = Config(
        args.config,
        required=args.config != parser.get_default('config'),
        overrides={
            'instances_file': args.instances_file,
            'ips_file': args.ips_file,
            'ips_backup_file': args.ips_backup_file,
        }
    )

    orchestrator = Orchestrator(config)
    orchestrator.run()
    sys.exit(0)


if __name__ == "__main__":
    main()
