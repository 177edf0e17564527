"""Pydantic models and enumerations."""

from ipmonitor.models.constants import ChangeKind, InterfaceType, OperationalStatus
from ipmonitor.models.geometry_models import Point, Rect
from ipmonitor.models.network_models import (
    AddressListing,
    InterfaceAddressRecord,
    format_mac,
)

__all__ = [
    "AddressListing",
    "ChangeKind",
    "InterfaceAddressRecord",
    "InterfaceType",
    "OperationalStatus",
    "Point",
    "Rect",
    "format_mac",
]
