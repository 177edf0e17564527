from ipmonitor.version.ipmonitor_version import IPMONITOR_VERSION, Version

__all__ = ["IPMONITOR_VERSION", "Version"]
