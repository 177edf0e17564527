"""Abstract adapter source and the raw OS view of network adapters.

An ``AdapterSource`` reports every adapter the operating system exposes,
regardless of state, together with its unicast addresses and the interface
index it holds in each address family's routing table. The catalog turns
that view into ``InterfaceAddressRecord`` values.

Platform support:
- psutil (Linux, macOS, Windows, BSD): see ``PsutilAdapterSource``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from ipaddress import IPv4Address, IPv6Address

from ipmonitor.models.constants import InterfaceType, OperationalStatus


class EnumerationError(Exception):
    """Raised when the OS adapter table cannot be read.

    Distinct from an empty result: an empty list means the host has no
    adapters, this means the host could not be asked.
    """


@dataclass(frozen=True)
class UnicastAddress:
    """One IP address bound to an adapter."""

    address: IPv4Address | IPv6Address
    prefix_length: int


@dataclass(frozen=True)
class Adapter:
    """A network adapter as reported by the OS.

    ``ipv4_index`` / ``ipv6_index`` are None when the adapter does not
    support that family or its index could not be retrieved.
    """

    name: str
    description: str
    interface_type: InterfaceType = InterfaceType.UNKNOWN
    status: OperationalStatus = OperationalStatus.UNKNOWN
    link_speed: int = 0
    mac_address: bytes = b""
    ipv4_index: int | None = None
    ipv6_index: int | None = None
    unicast_addresses: tuple[UnicastAddress, ...] = field(default_factory=tuple)

    def index_for(self, address: IPv4Address | IPv6Address) -> int | None:
        """Return the interface index matching the address's own family."""
        if address.version == 4:
            return self.ipv4_index
        if address.version == 6:
            return self.ipv6_index
        return None


class AdapterSource(ABC):
    """Read-only access to the host's network adapter table."""

    @abstractmethod
    def list_adapters(self) -> list[Adapter]:
        """List every adapter the OS exposes, up or down.

        Returns
        -------
            list[Adapter]: adapters in OS enumeration order

        Raises
        ------
            EnumerationError: if the adapter table cannot be read
        """
        pass
