"""ipmonitor - host IPv4 address listing and screen-edge snapping."""

from ipmonitor.version.ipmonitor_version import IPMONITOR_VERSION, Version

__version__ = str(IPMONITOR_VERSION)
__version_info__ = IPMONITOR_VERSION

__all__ = [
    "IPMONITOR_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
