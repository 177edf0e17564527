"""Tests for the ipmonitor version information."""

from datetime import datetime

from ipmonitor.version.ipmonitor_version import Version


def test_version_methods():
    """Test Version class methods."""
    v = Version(
        major=1,
        minor=2,
        patch=3,
        hash="abcdef123456",
        date=datetime(2023, 1, 1),
    )

    assert str(v) == "1.2.3"
    assert v.semver() == (1, 2, 3)
    assert v.hash_short(4) == "abcd"
    assert v.date_string("%Y") == "2023"
    assert "1.2.3" in v.full_version()
    assert "abcdef12" in v.full_version()


def test_ipmonitor_version_instance():
    """Test the global IPMONITOR_VERSION instance."""
    import ipmonitor
    from ipmonitor.version.ipmonitor_version import IPMONITOR_VERSION

    assert isinstance(IPMONITOR_VERSION, Version)
    assert len(IPMONITOR_VERSION.hash) == 64
    assert ipmonitor.__version__ == str(IPMONITOR_VERSION)
