"""
Stockledger Models.

Core models for material inventory:
- Supplier: Who delivers
- Material: What is tracked (with optional min stock)
- StockMovement: Immutable ledger of changes
- StockLevel: Running total per material
- AuditRecord: Who/what/when of every change
- Alert: Low-stock alerts (open/resolved)
"""

from stockledger.models.alert import Alert
from stockledger.models.audit import AuditRecord
from stockledger.models.enums import AlertType, ChangeType
from stockledger.models.level import StockLevel
from stockledger.models.material import Material
from stockledger.models.movement import StockMovement
from stockledger.models.supplier import Supplier

__all__ = [
    'ChangeType',
    'AlertType',
    'Supplier',
    'Material',
    'StockMovement',
    'StockLevel',
    'AuditRecord',
    'Alert',
]
