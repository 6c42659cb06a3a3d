"""Main orchestration logic for the fleet SSH check."""

from typing import List, Optional

from .config import Config
from .aws import EC2Manager
from .testing import SSHClient, SSHResult
from .logging import JSONLLogger
from .utils import get_current_timestamp, get_run_log_path, ensure_directory_exists
from .ip_discovery import IPCollector, IPPersistence, load_instance_ids


class Orchestrator:
    """Refreshes the fleet address list and fans SSH out across it."""

    def __init__(self, config: Config, ec2_manager: Optional[EC2Manager] = None,
                 ssh_client: Optional[SSHClient] = None):
        """Initialize orchestrator with all required components.

        Args:
            config: Configuration object
            ec2_manager: EC2 manager to use, created on first refresh if omitted
            ssh_client: SSH client to use, built from config if omitted
        """
        self.config = config
        self._ec2_manager = ec2_manager
        self.persistence = IPPersistence(config.ips_file, config.ips_backup_file)
        self.ssh_client = ssh_client or SSHClient.from_config(config)
        self.instance_ids: List[str] = []

        self.jsonl_logger = None
        if config.report_dir:
            ensure_directory_exists(config.report_dir)
            self.jsonl_logger = JSONLLogger(get_run_log_path(config.report_dir))

    @property
    def ec2_manager(self) -> EC2Manager:
        """EC2 manager, built on first use so runs without instances need no AWS setup."""
        if self._ec2_manager is None:
            self._ec2_manager = EC2Manager(self.config)
        return self._ec2_manager

    def refresh_ip_list(self) -> List[str]:
        """Rotate the address file and rebuild it from EC2.

        The rotation always happens. Without an identifier file the new
        list stays empty even if the previous one had entries.

        Returns:
            The address list now on disk
        """
        self.persistence.rotate()

        instance_ids = load_instance_ids(self.config.instances_file)
        if instance_ids is None:
            self.instance_ids = []
            return []

        self.instance_ids = instance_ids
        collector = IPCollector(self.ec2_manager, self.config.dedup_mode)
        ips = collector.collect(instance_ids)
        self.persistence.save(ips)
        return ips

    def fan_out(self) -> List[SSHResult]:
        """SSH to every address on disk concurrently and wait for all."""
        ips = self.persistence.load()
        if ips:
            print(f"[INFO] Launching {len(ips)} SSH connections")
        results = self.ssh_client.fan_out(ips)

        if self.config.report_status:
            self._print_status(results)
        if self.jsonl_logger:
            self.jsonl_logger.log_run(get_current_timestamp(), self.instance_ids, results)
        return results

    def _print_status(self, results: List[SSHResult]) -> None:
        for result in results:
            status = "[OK]" if result.returncode == 0 else "[FAIL]"
            print(f"  {status} n{result.index} {result.ip} (exit {result.returncode})")
        failed = sum(1 for r in results if r.returncode != 0)
        print(f"[INFO] {len(results) - failed}/{len(results)} SSH connections exited cleanly")

    def run(self) -> List[SSHResult]:
        """Refresh, report the count, then fan out."""
        ips = self.refresh_ip_list()
        print(f"GET {len(ips)} IPs")
        return self.fan_out()
