"""Fake /proc and /sys trees for host inspection tests."""

from pathlib import Path

import pytest

from cgvalidate.config import HostPaths

PROC_CGROUPS_HEADER = "#subsys_name\thierarchy\tnum_cgroups\tenabled\n"

ALL_CGROUPS = {
    "cpuset": 1,
    "cpu": 1,
    "cpuacct": 1,
    "blkio": 1,
    "memory": 1,
    "devices": 1,
    "freezer": 1,
    "net_cls": 1,
}


def proc_cgroups_text(table: dict[str, int]) -> str:
    lines = [f"{name}\t{i + 2}\t1\t{flag}" for i, (name, flag) in enumerate(table.items())]
    return PROC_CGROUPS_HEADER + "\n".join(lines) + "\n"


def _mountinfo_line(n: int, mount_point: Path, fs_type: str, options: str) -> str:
    return f"{30 + n} 25 0:{26 + n} / {mount_point} rw,nosuid,nodev,noexec,relatime shared:{n} - {fs_type} {fs_type} {options}"


@pytest.fixture
def fake_host(tmp_path):
    """
    Factory for a fake host. Returns HostPaths pointing into tmp_path.

    v1 hosts get cpu,cpuacct and memory hierarchies under <tmp>/cgroup;
    unified hosts get a single cgroup2 mount at <tmp>/cgroup.
    """

    def build(
        cgroups: dict[str, int] | None = None,
        unified: bool = False,
        mounted: bool = True,
        use_hierarchy: str | None = "1\n",
        cfs_bandwidth: bool = True,
        proc_cgroups: str | None = None,
    ) -> HostPaths:
        root = tmp_path / "cgroup"
        root.mkdir(exist_ok=True)
        proc = tmp_path / "proc"
        proc.mkdir(exist_ok=True)

        text = proc_cgroups if proc_cgroups is not None else proc_cgroups_text(cgroups if cgroups is not None else ALL_CGROUPS)
        (proc / "cgroups").write_text(text)

        mountinfo = [_mountinfo_line(0, "/", "ext4", "rw,errors=remount-ro")]
        mounts = ["/dev/sda1 / ext4 rw,relatime 0 0"]
        if unified:
            mountinfo.append(_mountinfo_line(1, root, "cgroup2", "rw,nsdelegate"))
            mounts.append(f"cgroup2 {root} cgroup2 rw,nosuid,nodev,noexec,relatime 0 0")
        elif mounted:
            cpu = root / "cpu,cpuacct"
            memory = root / "memory"
            cpu.mkdir(exist_ok=True)
            memory.mkdir(exist_ok=True)
            if cfs_bandwidth:
                (cpu / "cpu.cfs_period_us").write_text("100000\n")
            if use_hierarchy is not None:
                (memory / "memory.use_hierarchy").write_text(use_hierarchy)
            mountinfo.append(_mountinfo_line(1, cpu, "cgroup", "rw,cpu,cpuacct"))
            mountinfo.append(_mountinfo_line(2, memory, "cgroup", "rw,memory"))
            mounts.append(f"cgroup {cpu} cgroup rw,nosuid,nodev,noexec,relatime,cpu,cpuacct 0 0")
            mounts.append(f"cgroup {memory} cgroup rw,nosuid,nodev,noexec,relatime,memory 0 0")
        (proc / "mountinfo").write_text("\n".join(mountinfo) + "\n")
        (proc / "mounts").write_text("\n".join(mounts) + "\n")
        (proc / "osrelease").write_text("5.15.0-91-generic\n")

        block = tmp_path / "block"
        for dev, sched in (("sda", "mq-deadline kyber [bfq] none"), ("nvme0n1", "[none] mq-deadline")):
            (block / dev / "queue").mkdir(parents=True, exist_ok=True)
            (block / dev / "queue" / "scheduler").write_text(sched + "\n")
        (tmp_path / "os-release").write_text('NAME="Debian GNU/Linux"\nPRETTY_NAME="Debian GNU/Linux 12 (bookworm)"\n')

        return HostPaths(
            proc_cgroups=str(proc / "cgroups"),
            proc_mounts=str(proc / "mounts"),
            mountinfo=str(proc / "mountinfo"),
            cgroup_root=str(root),
            sys_block=str(block),
            os_release=str(tmp_path / "os-release"),
            kernel_release=str(proc / "osrelease"),
        )

    return build
