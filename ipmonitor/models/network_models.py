"""Pydantic models for interface address records and their export."""

from __future__ import annotations

from datetime import datetime
from ipaddress import IPv4Address, IPv6Address

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from ipmonitor.models.constants import InterfaceType, OperationalStatus


class InterfaceAddressRecord(BaseModel):
    """One unicast address bound to one adapter at query time."""

    model_config = ConfigDict(frozen=True)

    interface_index: int = Field(
        ..., description="OS interface index for this address's family", ge=0
    )
    interface_description: str = Field(..., description="Adapter description")
    interface_name: str = Field(..., description="Adapter name (e.g., 'eth0')")
    interface_link_speed: int = Field(
        0, description="Link speed in bits/sec, 0 when unknown", ge=0
    )
    interface_type: InterfaceType = Field(
        InterfaceType.UNKNOWN, description="Adapter type"
    )
    ip_address: IPv4Address | IPv6Address = Field(..., description="Unicast address")
    mac_address: bytes = Field(
        b"", description="Adapter physical address, empty if the adapter has none"
    )
    status: OperationalStatus = Field(
        OperationalStatus.UNKNOWN, description="Adapter operational status"
    )
    prefix_length: int = Field(..., description="Network prefix length in bits", ge=0)

    @model_validator(mode="after")
    def _check_prefix_length(self) -> InterfaceAddressRecord:
        if self.prefix_length > self.ip_address.max_prefixlen:
            raise ValueError(
                f"prefix_length {self.prefix_length} exceeds "
                f"{self.ip_address.max_prefixlen} for IPv{self.ip_address.version}"
            )
        return self

    @field_serializer("mac_address")
    def _serialize_mac(self, value: bytes) -> str:
        return format_mac(value)

    @property
    def is_ipv6(self) -> bool:
        return self.ip_address.version == 6

    @property
    def mac_address_text(self) -> str:
        return format_mac(self.mac_address)


class AddressListing(BaseModel):
    """JSON export envelope for one catalog query."""

    hostname: str = Field(..., description="Host the addresses were read from")
    captured_at: datetime = Field(..., description="Local time of the query")
    exclude_loopback: bool = False
    exclude_ipv6: bool = False
    only_status_up: bool = False
    records: list[InterfaceAddressRecord] = Field(default_factory=list)


def format_mac(value: bytes) -> str:
    """Render physical address bytes as colon separated hex, '' when empty."""
    return ":".join(f"{octet:02x}" for octet in value)
