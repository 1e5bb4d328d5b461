"""Tests for the cgroup inventory: /proc/cgroups parsing and presence checks."""

import pytest

from cgvalidate.errors import ParseError
from cgvalidate.host.cgroups import check_present, format_table, load_enabled, parse_enabled

PROC_CGROUPS = """#subsys_name\thierarchy\tnum_cgroups\tenabled
cpuset\t2\t4\t1
cpu\t3\t64\t1

cpuacct\t3\t64\t1
memory\t0\t1\t0
"""


def test_parse_skips_header_and_blank_lines():
    table = parse_enabled(PROC_CGROUPS)
    assert table == {"cpuset": 1, "cpu": 1, "cpuacct": 1, "memory": 0}


def test_parse_skips_first_line_whatever_it_holds():
    """The first line is always the header, even without '#'."""
    assert parse_enabled("subsys hierarchy count enabled\ncpu 1 1 1\n") == {"cpu": 1}


def test_parse_wrong_field_count_aborts():
    """One bad line means no table at all."""
    with pytest.raises(ParseError):
        parse_enabled(PROC_CGROUPS + "blkio 4 1\n")


def test_parse_non_integer_field_aborts():
    with pytest.raises(ParseError):
        parse_enabled("#header\ncpu 3 64 yes\n")


def test_load_enabled_reads_file(tmp_path):
    p = tmp_path / "cgroups"
    p.write_text(PROC_CGROUPS)
    assert load_enabled(str(p))["cpu"] == 1


def test_load_enabled_missing_file_is_os_error(tmp_path):
    with pytest.raises(OSError):
        load_enabled(str(tmp_path / "missing"))


def test_load_enabled_parse_error_is_not_os_error(tmp_path):
    p = tmp_path / "cgroups"
    p.write_text("#header\ngarbage\n")
    with pytest.raises(ParseError) as exc:
        load_enabled(str(p))
    assert not isinstance(exc.value, OSError)


def test_check_present_all_enabled():
    ok, out = check_present({"cpu": 1, "cpuacct": 1}, ["cpu", "cpuacct"])
    assert ok
    assert out == ""


def test_check_present_names_missing_subsystem():
    ok, out = check_present({"a": 1}, ["a", "b"])
    assert not ok
    assert "Missing cgroup b" in out
    assert "a:1" in out


def test_check_present_names_disabled_subsystem():
    ok, out = check_present({"cpu": 1, "memory": 0}, ["cpu", "memory"])
    assert not ok
    assert "Cgroup memory not enabled" in out


def test_check_present_short_circuits_on_first_failure():
    """Only the first offending subsystem is reported."""
    ok, out = check_present({}, ["x", "y", "z"])
    assert not ok
    assert "Missing cgroup x" in out
    assert "y" not in out.split("Available")[0]
    assert "z" not in out


def test_check_present_follows_desired_order():
    ok, out = check_present({"cpu": 0}, ["memory", "cpu"])
    assert "Missing cgroup memory" in out


def test_format_table_sorted():
    assert format_table({"memory": 0, "cpu": 1}) == "cpu:1 memory:0"
