"""
Per-material locks.

Serializes ledger writes on the same material inside this process, while
writes on different materials run in parallel. Database row locks
(select_for_update on StockLevel) cover writers in other processes.

Locks are reentrant: a signal receiver that records another movement on
the same material from the same thread joins the open transaction.

Usage:
    with material_lock(material_id):
        ...
"""

import logging
import threading
from contextlib import contextmanager

from stockledger.conf import stockledger_settings
from stockledger.exceptions import StorageUnavailable

logger = logging.getLogger('stockledger')

_registry_lock = threading.Lock()
_locks: dict[int, threading.RLock] = {}


def get_material_lock(material_id: int) -> threading.RLock:
    """Return the lock for a material, creating it on first use."""
    lock = _locks.get(material_id)
    if lock is None:
        with _registry_lock:
            lock = _locks.get(material_id)
            if lock is None:  # double-checked
                lock = _locks[material_id] = threading.RLock()
    return lock


@contextmanager
def material_lock(material_id: int, timeout: float | None = None):
    """
    Hold the material's lock for the duration of the block.

    Raises:
        StorageUnavailable('LOCK_TIMEOUT'): If not acquired within timeout
    """
    if timeout is None:
        timeout = stockledger_settings.LOCK_TIMEOUT_SECONDS
    lock = get_material_lock(material_id)

    if not lock.acquire(timeout=timeout):
        logger.warning(
            "inventory.lock_timeout",
            extra={"material_id": material_id, "timeout": timeout},
        )
        raise StorageUnavailable('LOCK_TIMEOUT', material_id=material_id, timeout=timeout)
    try:
        yield
    finally:
        lock.release()


def reset_material_locks() -> None:
    """Drop all locks. Useful for testing."""
    with _registry_lock:
        _locks.clear()
