"""
Exceptions for Stockledger.

All errors are InventoryError subclasses with a structured code for
programmatic handling. The subclass tells the caller which family the
failure belongs to (bad input, missing record, transient storage failure),
the code tells it exactly what happened.
"""

from contextlib import contextmanager
from typing import Any

from django.db import InterfaceError, OperationalError


class InventoryError(Exception):
    """
    Structured exception for inventory operations.

    Usage:
        try:
            inventory.stock_out(material_id, 5, actor_id=7)
        except NotFound as e:
            if e.code == 'MATERIAL_NOT_FOUND':
                print(f"No material {e.data['material_id']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, data={self.data!r})"

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: v if isinstance(v, (int, str, bool, type(None))) else str(v)
                for k, v in self.data.items()
            }
        }


class NotFound(InventoryError):
    """Referenced material, supplier or alert does not exist."""

    _default_messages = {
        'MATERIAL_NOT_FOUND': 'Material not found',
        'SUPPLIER_NOT_FOUND': 'Supplier not found',
        'ALERT_NOT_FOUND': 'Alert not found',
    }


class ValidationError(InventoryError):
    """Missing required field or malformed value."""

    _default_messages = {
        'NAME_REQUIRED': 'Name is required',
        'INVALID_QUANTITY': 'Quantity must be an integer',
        'INVALID_MIN_STOCK': 'Minimum stock must be a non-negative integer',
        'INVALID_CHANGE_TYPE': 'Change type must be IN or OUT',
    }


class AlreadyResolved(InventoryError):
    """
    Alert was already resolved. Nothing was changed.

    This is a signal, not a failure: resolving is idempotent and the
    resolved alert is available as ``e.alert``.
    """

    _default_messages = {
        'ALREADY_RESOLVED': 'Alert already resolved',
    }

    def __init__(self, alert, **data: Any):
        self.alert = alert
        super().__init__('ALREADY_RESOLVED', alert_id=alert.pk, **data)


class StorageUnavailable(InventoryError):
    """Backing store failed or did not answer in time. Safe to retry."""

    _default_messages = {
        'STORAGE_UNAVAILABLE': 'Storage unavailable',
        'LOCK_TIMEOUT': 'Timed out waiting for material lock',
    }


@contextmanager
def storage_errors(**data: Any):
    """Re-raise driver-level database failures as StorageUnavailable."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        raise StorageUnavailable('STORAGE_UNAVAILABLE', error=str(exc), **data) from exc
