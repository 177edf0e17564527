"""
Version command - displays ipmonitor version information
"""

from ipmonitor.version import IPMONITOR_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display ipmonitor version information.

    Args:
        verbose: If True, also show the package hash and build date
    """
    if not verbose:
        print(f"ipmonitor {IPMONITOR_VERSION}")
        return

    print(f"ipmonitor version {IPMONITOR_VERSION.full_version()}")
    print("\nDetailed version information:")
    print(f"  Semantic Version: {IPMONITOR_VERSION}")
    print(f"  Build Date:       {IPMONITOR_VERSION.date_string()}")
    print(f"  Package Hash:     {IPMONITOR_VERSION.hash}")
