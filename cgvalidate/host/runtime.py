"""Docker runtime info — queried through the docker CLI."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess

from ..errors import ParseError, RuntimeInfoError
from ..models import RuntimeInfo
from ..version import parse_major_minor

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "Unknown"


class DockerRuntime:
    """Runtime-info provider backed by `docker info` / `docker version`."""

    name = "Docker"

    def __init__(self, binary: str = "docker", timeout: float = 5.0):
        self.binary = binary
        self.timeout = timeout

    def _run(self, args: list[str]) -> str:
        """Run the docker CLI and return stdout. RuntimeInfoError on any failure."""
        try:
            result = subprocess.run(
                [self.binary, *args],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RuntimeInfoError(f"{self.binary} not found") from e
        except subprocess.TimeoutExpired as e:
            raise RuntimeInfoError(f"{self.binary} {args[0]} timed out after {self.timeout}s") from e
        except (OSError, ValueError) as e:
            # Not executable, a directory, or output that isn't valid text
            raise RuntimeInfoError(f"could not run {self.binary} {args[0]}: {e}") from e
        if result.returncode != 0:
            err = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise RuntimeInfoError(f"{self.binary} {args[0]} failed: {err}")
        return result.stdout.strip()

    def info(self) -> dict:
        """Raw `docker info` as a dict."""
        out = self._run(["info", "--format", "{{json .}}"])
        try:
            data = json.loads(out)
        except json.JSONDecodeError as e:
            raise RuntimeInfoError(f"could not decode docker info: {e}") from e
        if not isinstance(data, dict):
            raise RuntimeInfoError("docker info is not an object")
        return data

    def server_version(self) -> str:
        out = self._run(["version", "--format", "{{.Server.Version}}"])
        if not out:
            raise RuntimeInfoError("docker version reported no server version")
        return out

    def version_string(self) -> str:
        """Server version, or "Unknown" when the daemon can't be queried."""
        try:
            return self.server_version()
        except RuntimeInfoError as e:
            logger.warning("Could not get docker version: %s", e)
            return UNKNOWN_VERSION

    def validate_info(self) -> RuntimeInfo:
        """Fetch docker info and check it is usable: version >= 1.0 and a storage driver."""
        data = self.info()
        version = data.get("ServerVersion") or ""
        if not version:
            version = self.server_version()
        try:
            major, _ = parse_major_minor(version)
        except ParseError as e:
            raise RuntimeInfoError(f"could not parse docker version {version!r}") from e
        if major < 1:
            raise RuntimeInfoError(f"docker version >= 1.0 is required but we have version {version!r}")
        driver = data.get("Driver") or ""
        if not driver:
            raise RuntimeInfoError("failed to find docker storage driver")
        return RuntimeInfo(
            storage_driver=driver,
            server_version=version,
            cgroup_driver=data.get("CgroupDriver"),
            cgroup_version=data.get("CgroupVersion"),
        )

    def debug_lines(self) -> list[str]:
        return [f"{self.name} binary: {shutil.which(self.binary) or 'not found'}"]
