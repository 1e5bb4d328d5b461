"""cgvalidate — Container host capability validation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cgvalidate")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
