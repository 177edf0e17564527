"""Watch command - reprints addresses whenever the network changes."""

import threading

from ipmonitor.backends.base import EnumerationError
from ipmonitor.backends.network import InterfaceAddressCatalog, available_ipv4_records
from ipmonitor.commands.list_cmd import NO_INFORMATION, print_records
from ipmonitor.models.constants import ChangeKind
from ipmonitor.monitoring import NetworkChange, NetworkChangeMonitor
from ipmonitor.utils.logger import Logger


def _print_current(catalog: InterfaceAddressCatalog) -> None:
    try:
        records = available_ipv4_records(catalog)
    except EnumerationError as e:
        Logger.get("watch").error(str(e))
        print(NO_INFORMATION)
        return
    print_records(records)


def run_watch(
    interval_seconds: float,
    duration_seconds: float | None = None,
    catalog: InterfaceAddressCatalog | None = None,
) -> None:
    """Print the current addresses, then again after every change.

    Args:
        interval_seconds: Polling interval for the change monitor.
        duration_seconds: Stop after this many seconds; None runs until Ctrl-C.
        catalog: Catalog to read; defaults to the psutil-backed catalog.
    """
    log = Logger.get("watch")
    catalog = catalog if catalog is not None else InterfaceAddressCatalog()
    print_lock = threading.Lock()

    def on_change(change: NetworkChange) -> None:
        with print_lock:
            if change.kind == ChangeKind.AVAILABILITY_CHANGED:
                state = "available" if change.is_available else "unavailable"
                print(f"-- network {state}")
            else:
                print("-- addresses changed")
                _print_current(catalog)

    _print_current(catalog)

    monitor = NetworkChangeMonitor(catalog=catalog, interval_seconds=interval_seconds)
    subscription = monitor.subscribe(on_change)
    done = threading.Event()
    monitor.start()
    log.info(f"Watching for network changes every {interval_seconds}s")

    try:
        done.wait(duration_seconds)
    except KeyboardInterrupt:
        print("\nStopped")
    finally:
        subscription.unsubscribe()
        monitor.stop()
