"""
Pytest configuration and shared fixtures
"""

from io import StringIO
from ipaddress import ip_address

import pytest

from ipmonitor.backends.base import Adapter, AdapterSource, UnicastAddress
from ipmonitor.backends.network import InterfaceAddressCatalog
from ipmonitor.models.constants import InterfaceType, OperationalStatus
from ipmonitor.utils.logger import Logger


class FakeAdapterSource(AdapterSource):
    """Adapter source returning a fixed, mutable adapter list."""

    def __init__(self, adapters=None, error=None):
        self.adapters = list(adapters or [])
        self.error = error
        self.calls = 0

    def list_adapters(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.adapters)


def unicast(text: str, prefix: int) -> UnicastAddress:
    return UnicastAddress(address=ip_address(text), prefix_length=prefix)


@pytest.fixture
def ethernet_adapter() -> Adapter:
    """Up Ethernet adapter with one IPv4 and one link-local IPv6 address"""
    return Adapter(
        name="eth0",
        description="Intel(R) Ethernet Connection",
        interface_type=InterfaceType.ETHERNET,
        status=OperationalStatus.UP,
        link_speed=1_000_000_000,
        mac_address=bytes.fromhex("001122334455"),
        ipv4_index=2,
        ipv6_index=2,
        unicast_addresses=(
            unicast("192.168.1.20", 24),
            unicast("fe80::1", 64),
        ),
    )


@pytest.fixture
def loopback_adapter() -> Adapter:
    """Up loopback adapter"""
    return Adapter(
        name="lo",
        description="Loopback",
        interface_type=InterfaceType.LOOPBACK,
        status=OperationalStatus.UP,
        ipv4_index=1,
        ipv6_index=1,
        unicast_addresses=(unicast("127.0.0.1", 8), unicast("::1", 128)),
    )


@pytest.fixture
def wifi_adapter_down() -> Adapter:
    """Wireless adapter that is down but still holds an address"""
    return Adapter(
        name="wlan0",
        description="Wireless LAN",
        interface_type=InterfaceType.WIRELESS80211,
        status=OperationalStatus.DOWN,
        mac_address=bytes.fromhex("aabbccddeeff"),
        ipv4_index=3,
        unicast_addresses=(unicast("10.0.0.5", 8),),
    )


@pytest.fixture
def ipv6_only_tunnel() -> Adapter:
    """Tunnel reporting an IPv4 address but only an IPv6 index"""
    return Adapter(
        name="tun0",
        description="VPN tunnel",
        interface_type=InterfaceType.TUNNEL,
        status=OperationalStatus.UP,
        ipv4_index=None,
        ipv6_index=7,
        unicast_addresses=(unicast("10.8.0.2", 24), unicast("fd00::2", 64)),
    )


@pytest.fixture
def all_adapters(
    ethernet_adapter, loopback_adapter, wifi_adapter_down, ipv6_only_tunnel
) -> list[Adapter]:
    return [loopback_adapter, ethernet_adapter, wifi_adapter_down, ipv6_only_tunnel]


@pytest.fixture
def fake_source(all_adapters) -> FakeAdapterSource:
    return FakeAdapterSource(all_adapters)


@pytest.fixture
def catalog(fake_source) -> InterfaceAddressCatalog:
    return InterfaceAddressCatalog(fake_source)


@pytest.fixture
def quiet_logger() -> StringIO:
    """Configure the ipmonitor logger to write into a buffer"""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output, timestamps=False)
    return output
