"""
Inventory services — modular organization of inventory operations.

Re-exports all public classes:
    from stockledger.services import MaterialRegistry, StockLedger, StockQueries, AuditTrail, AlertEngine
"""

from stockledger.services.alerts import AlertEngine
from stockledger.services.audit import AuditTrail
from stockledger.services.movements import StockLedger
from stockledger.services.queries import StockQueries
from stockledger.services.registry import MaterialRegistry

__all__ = [
    'MaterialRegistry',
    'StockLedger',
    'StockQueries',
    'AuditTrail',
    'AlertEngine',
]
