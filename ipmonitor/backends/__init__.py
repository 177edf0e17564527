"""Backends that read network state from the operating system."""

from ipmonitor.backends.base import (
    Adapter,
    AdapterSource,
    EnumerationError,
    UnicastAddress,
)
from ipmonitor.backends.network import (
    InterfaceAddressCatalog,
    PsutilAdapterSource,
    available_ipv4_records,
    format_record,
    sort_records,
)

__all__ = [
    "Adapter",
    "AdapterSource",
    "EnumerationError",
    "InterfaceAddressCatalog",
    "PsutilAdapterSource",
    "UnicastAddress",
    "available_ipv4_records",
    "format_record",
    "sort_records",
]
