"""
Stock ledger — state-changing operations (stock in, stock out).

Every movement runs under the material's lock and a single
transaction.atomic(): the movement, its audit record and the alert
decision are committed together or not at all.
"""

import logging

from django.db import transaction

from stockledger.conf import stockledger_settings
from stockledger.exceptions import ValidationError, storage_errors
from stockledger.locks import material_lock
from stockledger.models.enums import ChangeType
from stockledger.models.level import StockLevel
from stockledger.models.movement import StockMovement
from stockledger.services.registry import MaterialRegistry
from stockledger.signals import movement_recorded

logger = logging.getLogger('stockledger')


def _validate_quantity(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError('INVALID_QUANTITY', requested=quantity)


class StockLedger:
    """Append-only stock movement methods."""

    @classmethod
    def stock_in(cls, material_id, quantity, batch_no='', received_at=None,
                 expiry_date=None, location='', actor_id=None, note=None) -> StockMovement:
        """
        Stock entry.

        The stored quantity is always +abs(quantity): a negative request is
        recorded as an entry of the same magnitude, not rejected. Zero is
        accepted and audited.

        Raises:
            NotFound('MATERIAL_NOT_FOUND'): If the material doesn't exist
            ValidationError('INVALID_QUANTITY'): If quantity is not an int
            StorageUnavailable: On lock timeout or database failure
        """
        return cls._record(
            ChangeType.IN, material_id, quantity,
            batch_no=batch_no, received_at=received_at, expiry_date=expiry_date,
            location=location, actor_id=actor_id, note=note,
        )

    @classmethod
    def stock_out(cls, material_id, quantity, batch_no='', received_at=None,
                  expiry_date=None, location='', actor_id=None, note=None) -> StockMovement:
        """
        Stock exit.

        The stored quantity is always -abs(quantity), whatever sign the
        caller used. Stock may go negative: min_stock drives alerts, it
        never blocks a withdrawal.

        Raises:
            NotFound('MATERIAL_NOT_FOUND'): If the material doesn't exist
            ValidationError('INVALID_QUANTITY'): If quantity is not an int
            StorageUnavailable: On lock timeout or database failure
        """
        return cls._record(
            ChangeType.OUT, material_id, quantity,
            batch_no=batch_no, received_at=received_at, expiry_date=expiry_date,
            location=location, actor_id=actor_id, note=note,
        )

    @classmethod
    def _record(cls, change_type, material_id, quantity, *, batch_no, received_at,
                expiry_date, location, actor_id, note) -> StockMovement:
        """
        Append one movement.

        Concurrency:
            - Holds the material's process lock for the whole sequence
            - Runs under transaction.atomic()
            - Uses select_for_update() on the material's StockLevel
            - Receivers of movement_recorded (audit, alerts) run inside the
              transaction and see the post-movement balance
        """
        _validate_quantity(quantity)
        delta = abs(quantity) if change_type == ChangeType.IN else -abs(quantity)

        material = MaterialRegistry.get_material(material_id)

        with material_lock(material.pk), storage_errors(material_id=material.pk):
            with transaction.atomic():
                # min_stock may have changed since the lookup
                material.refresh_from_db(fields=['min_stock'])
                level, _ = StockLevel.objects.select_for_update().get_or_create(material=material)

                movement = StockMovement.objects.create(
                    material=material,
                    quantity=delta,
                    batch_no=batch_no or '',
                    received_at=received_at,
                    expiry_date=expiry_date,
                    location=location or '',
                )

                level.refresh_from_db(fields=['_quantity', 'movement_count'])

                # Before the signal, so alerts see the corrected balance
                every = stockledger_settings.DRIFT_CHECK_EVERY
                if every and level.movement_count % every == 0:
                    level.recalculate()

                movement_recorded.send(
                    sender=StockMovement,
                    movement=movement,
                    material=material,
                    change_type=change_type,
                    balance=level.quantity,
                    actor_id=actor_id,
                    note=note,
                )

        logger.info(
            f"inventory.stock_{change_type.lower()}",
            extra={
                "material_id": material.pk,
                "movement_id": movement.pk,
                "qty": delta,
                "balance": level.quantity,
                "actor_id": actor_id,
            },
        )
        return movement
