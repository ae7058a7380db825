"""goscaffold: project scaffolding for Go services."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("goscaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"
