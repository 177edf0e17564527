"""Network change notifications for address and availability changes.

psutil has no push notification for interface changes, so the monitor polls
the address catalog on a daemon thread and reports differences between
consecutive snapshots. Subscribers register a callback and get back a
``Subscription`` handle; calling ``unsubscribe()`` on it stops delivery.
"""

from __future__ import annotations

import itertools
import logging
import threading
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ipmonitor.backends.base import EnumerationError
from ipmonitor.backends.network import InterfaceAddressCatalog
from ipmonitor.models.constants import ChangeKind, InterfaceType, OperationalStatus
from ipmonitor.models.network_models import InterfaceAddressRecord

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 2.0

_AddressKey = tuple[str, int, str, int]


@dataclass(frozen=True)
class NetworkChange:
    """A single change notification."""

    kind: ChangeKind
    timestamp: float
    is_available: bool | None = None


ChangeListener = Callable[[NetworkChange], None]


@dataclass(eq=False)
class Subscription:
    """Registration handle returned by NetworkChangeMonitor.subscribe()."""

    id: int
    callback: ChangeListener
    kinds: frozenset[ChangeKind]
    _monitor: NetworkChangeMonitor | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        return self._monitor is not None

    def unsubscribe(self) -> None:
        """Deregister the callback. Safe to call more than once."""
        if self._monitor is not None:
            self._monitor.unsubscribe(self)


def _address_key(record: InterfaceAddressRecord) -> _AddressKey:
    return (
        record.interface_name,
        record.interface_index,
        str(record.ip_address),
        record.prefix_length,
    )


def _is_available(records: Iterable[InterfaceAddressRecord]) -> bool:
    """True when any Up adapter other than loopback or tunnel has an address."""
    return any(
        record.status == OperationalStatus.UP
        and record.interface_type
        not in (InterfaceType.LOOPBACK, InterfaceType.TUNNEL)
        for record in records
    )


class NetworkChangeMonitor:
    """Daemon that polls the address catalog and notifies subscribers."""

    def __init__(
        self,
        catalog: InterfaceAddressCatalog | None = None,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
    ):
        """Create a monitor daemon thread.

        Args:
            catalog: Catalog to poll. Defaults to the psutil-backed catalog.
            interval_seconds: Polling interval in seconds. Must be positive.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than zero")

        self.interval_seconds = interval_seconds
        self._catalog = catalog if catalog is not None else InterfaceAddressCatalog()

        self._ids = itertools.count(1)
        self._subscriptions: dict[int, Subscription] = {}
        self._subscriptions_lock = threading.Lock()

        self._addresses: frozenset[_AddressKey] | None = None
        self._available: bool | None = None
        self._baseline_taken = False

        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def __enter__(self) -> NetworkChangeMonitor:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def subscribe(
        self,
        callback: ChangeListener,
        kinds: Iterable[ChangeKind] | None = None,
    ) -> Subscription:
        """Register ``callback`` for the given change kinds (default: all).

        The callback runs on the monitor thread. Marshal to a UI thread
        yourself if needed.
        """
        selected = frozenset(kinds) if kinds is not None else frozenset(ChangeKind)
        with self._subscriptions_lock:
            subscription = Subscription(
                id=next(self._ids),
                callback=callback,
                kinds=selected,
                _monitor=self,
            )
            self._subscriptions[subscription.id] = subscription
        logger.debug("Subscription %d registered for %s", subscription.id, sorted(selected))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Deregister a subscription. Unknown or inactive handles are ignored."""
        with self._subscriptions_lock:
            self._subscriptions.pop(subscription.id, None)
            subscription._monitor = None

    @property
    def subscriber_count(self) -> int:
        with self._subscriptions_lock:
            return len(self._subscriptions)

    @property
    def is_available(self) -> bool | None:
        """Availability seen at the last poll, None before the first one."""
        return self._available

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Take a baseline snapshot and start the polling thread.

        A stopped monitor can be started again; it takes a fresh baseline.
        """
        if self.running:
            return
        self._stop_event.clear()
        self._baseline_taken = False
        self.poll()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the polling thread and wait for it to exit."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    def poll(self) -> list[NetworkChange]:
        """Take one snapshot, notify subscribers of differences, return them.

        The first poll only records a baseline. A failed enumeration counts as
        "network unavailable" and leaves the last known addresses in place.
        """
        addresses: frozenset[_AddressKey] | None
        try:
            records = self._catalog.enumerate()
        except EnumerationError as e:
            logger.warning("Network enumeration failed: %s", e)
            addresses = None
            available = False
        else:
            addresses = frozenset(_address_key(record) for record in records)
            available = _is_available(records)

        changes: list[NetworkChange] = []
        now = time.time()
        if self._baseline_taken:
            if addresses is not None and addresses != self._addresses:
                changes.append(NetworkChange(ChangeKind.ADDRESS_CHANGED, now))
            if available != self._available:
                changes.append(
                    NetworkChange(
                        ChangeKind.AVAILABILITY_CHANGED, now, is_available=available
                    )
                )

        if addresses is not None:
            self._addresses = addresses
        self._available = available
        self._baseline_taken = True

        for change in changes:
            logger.info("Network change: %s", change.kind)
            self._dispatch(change)
        return changes

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            self.poll()

    def _dispatch(self, change: NetworkChange) -> None:
        with self._subscriptions_lock:
            targets = [
                s for s in self._subscriptions.values() if change.kind in s.kinds
            ]
        for subscription in targets:
            try:
                subscription.callback(change)
            except Exception:
                logger.exception(
                    "Subscriber %d failed handling %s", subscription.id, change.kind
                )
