import subprocess

from ipfleet.testing import SSHClient, SSHResult

from conftest import count_markers


def test_build_command_defaults():
    client = SSHClient()
    assert client.build_command("10.0.0.1") == [
        "ssh", "-o", "StrictHostKeyChecking=no", "10.0.0.1"
    ]


def test_build_command_with_options():
    client = SSHClient(ssh_binary="/usr/bin/ssh", user="ubuntu", key_path="/k/id",
                       connect_timeout=5, remote_command="uptime")
    assert client.build_command("10.0.0.1") == [
        "/usr/bin/ssh", "-o", "StrictHostKeyChecking=no",
        "-i", "/k/id",
        "-o", "ConnectTimeout=5",
        "ubuntu@10.0.0.1",
        "uptime",
    ]


def test_launch_does_not_block(make_fake_ssh):
    # Expects two copies, so a lone copy keeps waiting
    fake_ssh, log_dir = make_fake_ssh(expect=2)
    client = SSHClient(ssh_binary=fake_ssh)

    first = client.launch("10.0.0.1")
    assert isinstance(first, subprocess.Popen)
    second = client.launch("10.0.0.2")

    assert first.wait(timeout=30) == 0
    assert second.wait(timeout=30) == 0
    assert count_markers(log_dir, "done.") == 2


def test_fan_out_runs_every_address_concurrently(make_fake_ssh):
    ips = [f"10.0.0.{n}" for n in range(1, 6)]
    # Each fake ssh only exits cleanly once all five are running at once
    fake_ssh, log_dir = make_fake_ssh(expect=5)

    results = SSHClient(ssh_binary=fake_ssh).fan_out(ips)

    assert results == [SSHResult(n, ip, 0) for n, ip in enumerate(ips)]
    assert count_markers(log_dir, "started.") == 5
    # Barrier: nothing returns before every process has finished
    assert count_markers(log_dir, "done.") == 5


def test_fan_out_collects_failures(make_fake_ssh):
    fake_ssh, _ = make_fake_ssh(expect=3, fail_hosts=["10.0.0.2"])

    results = SSHClient(ssh_binary=fake_ssh).fan_out(["10.0.0.1", "10.0.0.2", "10.0.0.3"])

    assert [r.returncode for r in results] == [0, 255, 0]


def test_fan_out_launches_repeats_separately(make_fake_ssh):
    fake_ssh, log_dir = make_fake_ssh(expect=3)

    results = SSHClient(ssh_binary=fake_ssh).fan_out(["10.0.0.1", "10.0.0.2", "10.0.0.1"])

    assert [(r.index, r.ip) for r in results] == [(0, "10.0.0.1"), (1, "10.0.0.2"), (2, "10.0.0.1")]
    assert count_markers(log_dir, "started.") == 3


def test_fan_out_missing_binary_is_not_fatal(tmp_path, capsys):
    client = SSHClient(ssh_binary=str(tmp_path / "no-such-ssh"))

    results = client.fan_out(["10.0.0.1", "10.0.0.2"])

    assert [r.returncode for r in results] == [-1, -1]
    assert "[WARN]" in capsys.readouterr().out


def test_fan_out_empty_list():
    assert SSHClient().fan_out([]) == []
