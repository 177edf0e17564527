"""Network backend - enumerates interface addresses using psutil, ifaddr and socket."""

from __future__ import annotations

import ipaddress
import logging
import re
import socket
from collections.abc import Iterable, Iterator
from pathlib import Path

import ifaddr
import psutil

from ipmonitor.backends.base import (
    Adapter,
    AdapterSource,
    EnumerationError,
    UnicastAddress,
)
from ipmonitor.backends.filters import apply_filters, build_filter_pipeline
from ipmonitor.models.constants import InterfaceType, OperationalStatus
from ipmonitor.models.network_models import InterfaceAddressRecord

logger = logging.getLogger(__name__)

_SYSFS_NET = Path("/sys/class/net")

# First match wins; matched against the lowercased adapter name.
_TYPE_PATTERNS: tuple[tuple[re.Pattern[str], InterfaceType], ...] = (
    (re.compile(r"^(lo\d*|loopback.*)$"), InterfaceType.LOOPBACK),
    (re.compile(r"^(wl|wi-?fi|wireless|airport)"), InterfaceType.WIRELESS80211),
    (
        re.compile(r"^(tun|tap|utun|wg|ipsec|gif|stf|tailscale)"),
        InterfaceType.TUNNEL,
    ),
    (re.compile(r"^ppp"), InterfaceType.PPP),
    (
        re.compile(r"^(eth|en|em|ethernet|local area connection)"),
        InterfaceType.ETHERNET,
    ),
)


def _parse_mac(text: str | None) -> bytes:
    """Parse 'aa:bb:cc:dd:ee:ff' (also '-' or '.' separated) into bytes."""
    if not text:
        return b""
    digits = re.sub(r"[:\-.]", "", text)
    try:
        return bytes.fromhex(digits)
    except ValueError:
        logger.debug("Unparsable physical address %r", text)
        return b""


def _prefix_length(
    address: ipaddress.IPv4Address | ipaddress.IPv6Address, netmask: str | None
) -> int:
    """Count the set bits of a netmask; a missing mask means a host route."""
    if not netmask:
        logger.debug(
            "No netmask for %s, assuming /%d", address, address.max_prefixlen
        )
        return address.max_prefixlen
    try:
        mask = ipaddress.ip_address(netmask.split("%", 1)[0])
    except ValueError:
        return address.max_prefixlen
    if mask.version != address.version:
        return address.max_prefixlen
    return bin(int(mask)).count("1")


def _index_table() -> dict[str, int]:
    """Map adapter names to OS interface indices using ifaddr.

    On Windows psutil reports the friendly name ("Ethernet", "Wi-Fi") while
    the OS knows the adapter by its GUID, so both ifaddr names are keyed.
    """
    try:
        adapters = ifaddr.get_adapters()
    except OSError as e:
        logger.debug("ifaddr could not list adapters: %s", e)
        return {}

    table: dict[str, int] = {}
    for adapter in adapters:
        if adapter.index is None:
            continue
        table.setdefault(adapter.nice_name, adapter.index)
        table.setdefault(adapter.name, adapter.index)
    return table


def _interface_index(name: str, table: dict[str, int]) -> int | None:
    if name in table:
        return table[name]
    try:
        return socket.if_nametoindex(name)
    except OSError:
        logger.warning("No interface index for %s, its addresses are skipped", name)
        return None


def classify_interface(name: str, flags: str = "") -> InterfaceType:
    """Guess an adapter's type from its psutil flags and its name.

    Args:
        name: Adapter name (e.g., 'eth0', 'wlp3s0', 'Wi-Fi')
        flags: Comma separated psutil flags (e.g., 'up,loopback,running')

    Returns
    -------
        InterfaceType, UNKNOWN when nothing matches.
    """
    if "loopback" in flags.split(","):
        return InterfaceType.LOOPBACK

    # Linux marks 802.11 adapters with a sysfs directory
    if (_SYSFS_NET / name / "wireless").exists():
        return InterfaceType.WIRELESS80211

    lowered = name.lower()
    for pattern, interface_type in _TYPE_PATTERNS:
        if pattern.match(lowered):
            return interface_type
    return InterfaceType.UNKNOWN


class PsutilAdapterSource(AdapterSource):
    """Adapter source backed by psutil.net_if_addrs() and net_if_stats().

    psutil exposes no adapter description, so the adapter name is used for
    both. A family is supported when the adapter carries at least one address
    of that family. Its index is looked up by name in ifaddr's adapter list,
    then with socket.if_nametoindex().
    """

    def list_adapters(self) -> list[Adapter]:
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except (psutil.Error, OSError) as e:
            raise EnumerationError(f"Failed to list network adapters: {e}") from e

        indices = _index_table()
        adapters = [
            self._build_adapter(name, entries, stats.get(name), indices)
            for name, entries in addrs.items()
        ]
        logger.debug("psutil reported %d adapters", len(adapters))
        return adapters

    @staticmethod
    def _build_adapter(
        name: str, entries: Iterable, if_stats, indices: dict[str, int]
    ) -> Adapter:
        mac_address = b""
        unicast: list[UnicastAddress] = []

        for entry in entries:
            if entry.family == psutil.AF_LINK:
                mac_address = _parse_mac(entry.address)
                continue
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                address = ipaddress.ip_address(entry.address)
            except ValueError:
                logger.debug("Skipping unparsable address %r on %s", entry.address, name)
                continue
            unicast.append(
                UnicastAddress(
                    address=address,
                    prefix_length=_prefix_length(address, entry.netmask),
                )
            )

        has_ipv4 = any(u.address.version == 4 for u in unicast)
        has_ipv6 = any(u.address.version == 6 for u in unicast)
        index = _interface_index(name, indices) if unicast else None

        if if_stats is None:
            status = OperationalStatus.UNKNOWN
            link_speed = 0
            flags = ""
        else:
            status = OperationalStatus.UP if if_stats.isup else OperationalStatus.DOWN
            link_speed = max(if_stats.speed, 0) * 1_000_000
            flags = getattr(if_stats, "flags", "")

        return Adapter(
            name=name,
            description=name,
            interface_type=classify_interface(name, flags),
            status=status,
            link_speed=link_speed,
            mac_address=mac_address,
            ipv4_index=index if has_ipv4 else None,
            ipv6_index=index if has_ipv6 else None,
            unicast_addresses=tuple(unicast),
        )


class InterfaceAddressCatalog:
    """Enumerates the host's unicast addresses as InterfaceAddressRecords.

    Every call re-reads the adapter source; nothing is cached, so a call made
    after a network change notification sees the new state.
    """

    def __init__(self, source: AdapterSource | None = None) -> None:
        self._source = source if source is not None else PsutilAdapterSource()

    def enumerate(
        self,
        exclude_loopback: bool = False,
        exclude_ipv6: bool = False,
        only_status_up: bool = False,
    ) -> list[InterfaceAddressRecord]:
        """Enumerate interface addresses, optionally filtered.

        Args:
            exclude_loopback: Drop records on loopback adapters.
            exclude_ipv6: Drop IPv6 addresses.
            only_status_up: Keep only records whose adapter is Up.

        Returns
        -------
            Records in OS enumeration order. Use sort_records() for a stable
            display order.

        Raises
        ------
            EnumerationError: If the adapter table cannot be read.
        """
        try:
            adapters = self._source.list_adapters()
        except OSError as e:
            raise EnumerationError(f"Failed to list network adapters: {e}") from e

        records = list(self._iter_records(adapters))
        pipeline = build_filter_pipeline(
            exclude_loopback=exclude_loopback,
            exclude_ipv6=exclude_ipv6,
            only_status_up=only_status_up,
        )
        return apply_filters(records, pipeline)

    @staticmethod
    def _iter_records(adapters: Iterable[Adapter]) -> Iterator[InterfaceAddressRecord]:
        for adapter in adapters:
            for unicast in adapter.unicast_addresses:
                index = adapter.index_for(unicast.address)
                if index is None:
                    logger.debug(
                        "Dropping %s on %s: no IPv%d interface index",
                        unicast.address,
                        adapter.name,
                        unicast.address.version,
                    )
                    continue

                yield InterfaceAddressRecord(
                    interface_index=index,
                    interface_description=adapter.description,
                    interface_name=adapter.name,
                    interface_link_speed=adapter.link_speed,
                    interface_type=adapter.interface_type,
                    ip_address=unicast.address,
                    mac_address=adapter.mac_address,
                    status=adapter.status,
                    prefix_length=unicast.prefix_length,
                )


def sort_records(
    records: Iterable[InterfaceAddressRecord],
) -> list[InterfaceAddressRecord]:
    """Sort records by numeric address value, IPv4 before IPv6."""
    return sorted(
        records, key=lambda r: (r.ip_address.version, int(r.ip_address))
    )


def available_ipv4_records(
    catalog: InterfaceAddressCatalog | None = None,
) -> list[InterfaceAddressRecord]:
    """Return the Up, non-loopback IPv4 records in display order."""
    catalog = catalog if catalog is not None else InterfaceAddressCatalog()
    return sort_records(
        catalog.enumerate(
            exclude_loopback=True,
            exclude_ipv6=True,
            only_status_up=True,
        )
    )


def format_record(record: InterfaceAddressRecord) -> str:
    """Render a record as '<address>/<prefix> <type>'.

    When the OS reported no netmask the prefix is the family's full length
    (/32 or /128), so such a line shows a host route rather than the real
    subnet.
    """
    return f"{record.ip_address}/{record.prefix_length} {record.interface_type}"
