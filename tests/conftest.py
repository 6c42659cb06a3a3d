"""pytest configuration for fleet SSH check tests."""

import os
import stat

import boto3
import pytest


FAKE_SSH = """#!/bin/sh
# Last argument is the target host
for arg in "$@"; do host="$arg"; done
echo "$@" >> "{log_dir}/argv"
touch "{log_dir}/started.$$"
i=0
while [ "$(ls "{log_dir}" | grep -c '^started\\.')" -lt {expect} ] && [ $i -lt 200 ]; do
    sleep 0.05
    i=$((i+1))
done
[ "$(ls "{log_dir}" | grep -c '^started\\.')" -ge {expect} ] || exit 3
touch "{log_dir}/done.$$"
case " {fail_hosts} " in
    *" $host "*) exit 255 ;;
esac
exit 0
"""


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    """Dummy credentials so no test can reach a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def ec2_client():
    return boto3.client("ec2", region_name="us-east-1")


@pytest.fixture
def make_fake_ssh(tmp_path):
    """Build an ssh stand-in that only exits once `expect` copies are running."""

    def _make(expect=1, fail_hosts=()):
        log_dir = tmp_path / "ssh_log"
        log_dir.mkdir(exist_ok=True)
        script = tmp_path / "fake_ssh"
        script.write_text(FAKE_SSH.format(
            log_dir=log_dir, expect=expect, fail_hosts=" ".join(fail_hosts)))
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script), log_dir

    return _make


def count_markers(log_dir, prefix):
    return len([name for name in os.listdir(log_dir) if name.startswith(prefix)])


def describe_response(*ips):
    """DescribeInstances response with one instance per address in one reservation."""
    return {
        "Reservations": [{
            "Instances": [
                {"InstanceId": f"i-{n:03d}", "PrivateIpAddress": ip}
                for n, ip in enumerate(ips)
            ]
        }]
    }
