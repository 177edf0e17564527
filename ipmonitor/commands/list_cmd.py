"""List command - displays the host's interface addresses."""

import socket
import sys
from datetime import datetime
from pathlib import Path

from ipmonitor.backends.base import EnumerationError
from ipmonitor.backends.network import (
    InterfaceAddressCatalog,
    format_record,
    sort_records,
)
from ipmonitor.models.network_models import AddressListing, InterfaceAddressRecord
from ipmonitor.utils.logger import Logger

NO_INFORMATION = "No network information available"


def print_records(records: list[InterfaceAddressRecord]) -> None:
    """Print one '<address>/<prefix> <type>' line per record."""
    if not records:
        print("No addresses found")
        return
    for record in records:
        print(format_record(record))


def run_list(
    exclude_loopback: bool = True,
    exclude_ipv6: bool = True,
    only_status_up: bool = True,
    export_format: str | None = None,
    export_filename: str | None = None,
    catalog: InterfaceAddressCatalog | None = None,
) -> None:
    """Print filtered, sorted addresses and optionally export them as JSON."""
    log = Logger.get("list")
    catalog = catalog if catalog is not None else InterfaceAddressCatalog()

    try:
        records = sort_records(
            catalog.enumerate(
                exclude_loopback=exclude_loopback,
                exclude_ipv6=exclude_ipv6,
                only_status_up=only_status_up,
            )
        )
    except EnumerationError as e:
        log.error(str(e))
        print(NO_INFORMATION)
        sys.exit(1)

    log.debug(f"{len(records)} records after filtering")
    print_records(records)

    if not export_format:
        return

    listing = AddressListing(
        hostname=socket.gethostname(),
        captured_at=datetime.now(),
        exclude_loopback=exclude_loopback,
        exclude_ipv6=exclude_ipv6,
        only_status_up=only_status_up,
        records=records,
    )

    if not export_filename:
        timestamp = listing.captured_at.strftime("%Y%m%d_%H%M%S")
        export_filename = f"ipmonitor_list_{timestamp}.json"

    output_path = Path(export_filename)
    output_path.write_text(listing.model_dump_json(indent=2))

    print(f"\n✓ JSON exported to: {export_filename}")
