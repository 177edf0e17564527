"""Record filters for the address catalog.

Each filter is a predicate that keeps a record when it returns True. A
pipeline is an ordered list of predicates; a record survives only if every
predicate keeps it, so predicates compose in any order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ipmonitor.models.constants import InterfaceType, OperationalStatus
from ipmonitor.models.network_models import InterfaceAddressRecord

RecordPredicate = Callable[[InterfaceAddressRecord], bool]


def is_not_loopback(record: InterfaceAddressRecord) -> bool:
    return record.interface_type != InterfaceType.LOOPBACK


def is_not_ipv6(record: InterfaceAddressRecord) -> bool:
    return not record.is_ipv6


def is_status_up(record: InterfaceAddressRecord) -> bool:
    return record.status == OperationalStatus.UP


def build_filter_pipeline(
    exclude_loopback: bool = False,
    exclude_ipv6: bool = False,
    only_status_up: bool = False,
) -> list[RecordPredicate]:
    """Translate the catalog's boolean flags into a predicate pipeline.

    Args:
        exclude_loopback: Drop records on loopback adapters.
        exclude_ipv6: Drop IPv6 addresses.
        only_status_up: Drop records whose adapter is not Up.

    Returns:
        list of predicates, empty when no flag is set
    """
    pipeline: list[RecordPredicate] = []
    if exclude_loopback:
        pipeline.append(is_not_loopback)
    if exclude_ipv6:
        pipeline.append(is_not_ipv6)
    if only_status_up:
        pipeline.append(is_status_up)
    return pipeline


def apply_filters(
    records: Iterable[InterfaceAddressRecord],
    pipeline: Sequence[RecordPredicate],
) -> list[InterfaceAddressRecord]:
    """Return the records every predicate keeps, preserving input order."""
    survivors = list(records)
    for predicate in pipeline:
        survivors = [record for record in survivors if predicate(record)]
    return survivors
