"""Tests for record ordering and display formatting."""

from ipaddress import ip_address

from conftest import FakeAdapterSource, unicast
from ipmonitor.backends.base import Adapter
from ipmonitor.backends.network import (
    InterfaceAddressCatalog,
    available_ipv4_records,
    format_record,
    sort_records,
)
from ipmonitor.models.constants import InterfaceType, OperationalStatus


def _multi_address_catalog() -> InterfaceAddressCatalog:
    adapter = Adapter(
        name="eth0",
        description="eth0",
        interface_type=InterfaceType.ETHERNET,
        status=OperationalStatus.UP,
        ipv4_index=2,
        ipv6_index=2,
        unicast_addresses=(
            unicast("192.168.10.2", 24),
            unicast("2001:db8::1", 64),
            unicast("192.168.9.200", 24),
            unicast("10.0.0.1", 8),
        ),
    )
    return InterfaceAddressCatalog(FakeAdapterSource([adapter]))


def test_sort_is_numeric_not_lexical():
    """192.168.9.200 sorts before 192.168.10.2."""
    records = _multi_address_catalog().enumerate(exclude_ipv6=True)
    ordered = [str(r.ip_address) for r in sort_records(records)]

    assert ordered == ["10.0.0.1", "192.168.9.200", "192.168.10.2"]


def test_sort_puts_ipv4_before_ipv6():
    """Mixed families sort by family first."""
    ordered = sort_records(_multi_address_catalog().enumerate())
    assert ordered[-1].ip_address == ip_address("2001:db8::1")


def test_available_ipv4_records(catalog):
    """The display query filters and sorts in one call."""
    records = available_ipv4_records(catalog)
    assert [str(r.ip_address) for r in records] == ["192.168.1.20"]


def test_format_record(catalog):
    """Display line is '<address>/<prefix> <type>'."""
    record = available_ipv4_records(catalog)[0]
    assert format_record(record) == "192.168.1.20/24 Ethernet"
