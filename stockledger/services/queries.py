"""
Stock queries — read-only operations, plus reconciliation.

Reads take no locks and see committed movements only. reconcile() writes,
so it takes the material lock and a row lock like the ledger does.
"""

import logging

from django.db import transaction

from stockledger.exceptions import storage_errors
from stockledger.locks import material_lock
from stockledger.models.level import StockLevel
from stockledger.models.movement import StockMovement
from stockledger.services.registry import MaterialRegistry

logger = logging.getLogger('stockledger')


class StockQueries:
    """Read-only stock query methods."""

    @classmethod
    def current_stock(cls, material_id) -> int:
        """
        Current stock of a material — O(1) read of its running total.

        Returns:
            Sum of all movement quantities (0 if there are none)

        Raises:
            NotFound('MATERIAL_NOT_FOUND')
        """
        material = MaterialRegistry.get_material(material_id)
        with storage_errors(material_id=material.pk):
            quantity = StockLevel.objects.filter(material=material).values_list(
                '_quantity', flat=True
            ).first()
        return quantity or 0

    @classmethod
    def list_movements(cls, material_id):
        """Movements of a material, oldest first (lazy queryset)."""
        material = MaterialRegistry.get_material(material_id)
        return StockMovement.objects.filter(material=material).order_by('recorded_at', 'id')

    @classmethod
    def reconcile(cls, material_id=None, commit: bool = True) -> list[dict]:
        """
        Compare running totals against a full recompute from the movements.

        Args:
            material_id: Only this material (None = all)
            commit: Correct drifted totals (False = report only)

        Returns:
            One {'material_id', 'cached', 'actual'} dict per drifted material
        """
        if material_id is not None:
            material_ids = [MaterialRegistry.get_material(material_id).pk]
        else:
            material_ids = list(StockLevel.objects.values_list('material_id', flat=True))

        drifted = []
        for mid in material_ids:
            with material_lock(mid), storage_errors(material_id=mid):
                with transaction.atomic():
                    level = StockLevel.objects.select_for_update().filter(material_id=mid).first()
                    if level is None:
                        continue
                    cached = level.quantity
                    actual = level.recalculate(commit=commit)

            if actual != cached:
                drifted.append({'material_id': mid, 'cached': cached, 'actual': actual})

        logger.info(
            "inventory.reconcile",
            extra={"checked": len(material_ids), "drifted": len(drifted), "commit": commit},
        )
        return drifted
