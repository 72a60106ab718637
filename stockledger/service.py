"""
Inventory Service — The single public interface for all inventory operations.

Usage:
    from stockledger import inventory, NotFound

    steel = inventory.register_material("Steel plate 6mm", unit="pcs", min_stock=10)
    inventory.stock_in(steel.pk, 12, batch_no="B-001", actor_id=7)
    inventory.stock_out(steel.pk, 5, actor_id=7)
    inventory.current_stock(steel.pk)             # 7
    inventory.list_alerts(open_only=True)         # [<Alert LOW_STOCK>]
"""

from stockledger.models.audit import AuditRecord
from stockledger.services.alerts import AlertEngine
from stockledger.services.audit import AuditTrail
from stockledger.services.movements import StockLedger
from stockledger.services.queries import StockQueries
from stockledger.services.registry import MaterialRegistry


class Inventory(MaterialRegistry, StockLedger, StockQueries, AuditTrail, AlertEngine):
    """
    Single interface for all inventory operations.

    Parameter convention: (material_id, quantity, ..., actor_id)
    Follows natural language: "Take 5 of material 3 out, done by user 7"

    IMPORTANT: stock_in/stock_out serialize per material and run in one
    transaction each. See StockLedger._record().
    """

    @classmethod
    def list_audit(cls, material_id):
        """Audit history of a material, oldest first."""
        return cls.list_by_material(material_id)

    @classmethod
    def annotate(cls, material_id, change_type, quantity, actor_id=None, note='') -> AuditRecord:
        """Add a manual audit record, not tied to any movement."""
        return cls.record(material_id, change_type, quantity, actor_id=actor_id, note=note)
