"""Enumerations shared by the address catalog and its consumers."""

import sys

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class InterfaceType(StrEnum):
    """Kind of network adapter an address belongs to."""

    ETHERNET = "Ethernet"
    WIRELESS80211 = "Wireless80211"
    LOOPBACK = "Loopback"
    TUNNEL = "Tunnel"
    PPP = "Ppp"
    UNKNOWN = "Unknown"


class OperationalStatus(StrEnum):
    """Current operational state of an adapter."""

    UP = "Up"
    DOWN = "Down"
    UNKNOWN = "Unknown"


class ChangeKind(StrEnum):
    """Network change notifications delivered by the change monitor."""

    ADDRESS_CHANGED = "address_changed"
    AVAILABILITY_CHANGED = "availability_changed"
