"""
Receivers for movement_recorded.

Connected in StockledgerConfig.ready(). They run in connection order,
audit first, inside the ledger's transaction.
"""

from django.dispatch import receiver

from stockledger.conf import stockledger_settings
from stockledger.models.enums import ChangeType
from stockledger.models.movement import StockMovement
from stockledger.services.alerts import AlertEngine
from stockledger.services.audit import AuditTrail
from stockledger.signals import movement_recorded


@receiver(movement_recorded, sender=StockMovement, dispatch_uid='stockledger.audit_movement')
def audit_movement(sender, movement, material, change_type, actor_id=None, note=None, **kwargs):
    AuditTrail.record(
        material.pk,
        change_type,
        movement.quantity,
        actor_id=actor_id,
        note=note,
        movement=movement,
    )


@receiver(movement_recorded, sender=StockMovement, dispatch_uid='stockledger.check_low_stock')
def check_low_stock(sender, material, change_type, balance, **kwargs):
    if change_type != ChangeType.OUT or not stockledger_settings.LOW_STOCK_ALERTS:
        return
    AlertEngine.on_stock_out(material, balance)
