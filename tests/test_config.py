"""Tests for settings loading."""

from unittest.mock import patch

from cgvalidate.config import HostPaths, Settings, load_settings, settings_from_dict


def test_defaults():
    s = Settings()
    assert s.paths.proc_cgroups == "/proc/cgroups"
    assert s.paths.cgroup_root == "/sys/fs/cgroup"
    assert s.runtime_bin == "docker"


def test_load_yaml(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "runtime_bin: /usr/local/bin/docker\n"
        "runtime_timeout: 2\n"
        "paths:\n"
        "  proc_cgroups: /host/proc/cgroups\n"
        "  sys_block: /host/sys/block\n"
    )
    s = load_settings(p)
    assert s.runtime_bin == "/usr/local/bin/docker"
    assert s.runtime_timeout == 2.0
    assert s.paths.proc_cgroups == "/host/proc/cgroups"
    assert s.paths.sys_block == "/host/sys/block"
    assert s.paths.proc_mounts == HostPaths().proc_mounts


def test_unknown_keys_ignored():
    s = settings_from_dict({"colour": True, "paths": {"nope": "/x", "mountinfo": "/m"}})
    assert s.paths.mountinfo == "/m"


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "missing.yaml") == Settings()


def test_default_location_missing(tmp_path):
    with patch("cgvalidate.config.DEFAULT_CONFIG_PATH", tmp_path / "none.yaml"):
        assert load_settings() == Settings()


def test_malformed_yaml_gives_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("paths: [unclosed\n")
    assert load_settings(p) == Settings()


def test_non_mapping_gives_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("- a\n- b\n")
    assert load_settings(p) == Settings()


def test_bad_timeout_gives_defaults(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("runtime_timeout: soon\n")
    assert load_settings(p) == Settings()
