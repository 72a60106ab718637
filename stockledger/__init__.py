"""
Django Stockledger — Material stock ledger with low-stock alerts.

Usage:
    from stockledger import inventory, NotFound

    inventory.stock_in(material_id, 12, actor_id=7)
    inventory.stock_out(material_id, 5, actor_id=7)
    inventory.current_stock(material_id)  # 7
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'inventory':
        from stockledger.service import Inventory
        return Inventory
    elif name in ('InventoryError', 'NotFound', 'ValidationError',
                  'AlreadyResolved', 'StorageUnavailable'):
        from stockledger import exceptions
        return getattr(exceptions, name)
    elif name in ('Supplier', 'Material', 'StockMovement', 'StockLevel',
                  'AuditRecord', 'Alert', 'ChangeType', 'AlertType'):
        from stockledger import models
        return getattr(models, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'InventoryError',
    'NotFound',
    'ValidationError',
    'AlreadyResolved',
    'StorageUnavailable',
    'Supplier',
    'Material',
    'StockMovement',
    'StockLevel',
    'AuditRecord',
    'Alert',
    'ChangeType',
    'AlertType',
]

__version__ = '0.1.0'
