"""
StockLevel model — Running total of a material's movements.
"""

import logging

from django.db import models
from django.db.models import Sum
from django.db.models.functions import Coalesce
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger('stockledger')


class StockLevel(models.Model):
    """
    Current stock of one material.

    Performance:
    - _quantity is a cache updated atomically by StockMovement.save()
    - Read is O(1), not O(N)
    - Use recalculate() for audit/correction

    Created on the material's first movement, never deleted. The row also
    serves as the database lock target for writes on that material.
    """

    material = models.OneToOneField(
        'stockledger.Material',
        on_delete=models.PROTECT,
        related_name='stock_level',
        verbose_name=_('Material'),
    )

    # Quantity cache (updated atomically by StockMovement)
    _quantity = models.IntegerField(default=0, verbose_name=_('Quantity'))

    # Movements folded into _quantity so far
    movement_count = models.PositiveIntegerField(default=0, verbose_name=_('Movements'))

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Stock level')
        verbose_name_plural = _('Stock levels')
        ordering = ['material_id']

    @property
    def quantity(self) -> int:
        """Total quantity — O(1) cache read."""
        return self._quantity

    def recalculate(self, commit: bool = True) -> int:
        """
        Recalculate quantity from movements.

        Use for:
        - Drift detection
        - Correction after detected inconsistency
        - Debug

        Args:
            commit: Write the corrected total back (False = only report)

        Returns:
            New calculated quantity
        """
        from stockledger.models.movement import StockMovement

        totals = StockMovement.objects.filter(material_id=self.material_id).aggregate(
            t=Coalesce(Sum('quantity'), 0),
            n=models.Count('id'),
        )
        total, count = totals['t'], totals['n']

        if commit and (total != self._quantity or count != self.movement_count):
            old = self._quantity
            self._quantity = total
            self.movement_count = count
            self.save(update_fields=['_quantity', 'movement_count', 'updated_at'])

            logger.warning(
                f"StockLevel {self.pk} recalculated: {old} → {total} "
                f"(diff: {total - old})",
                extra={"material_id": self.material_id, "old": old, "new": total},
            )

        return total

    def __str__(self) -> str:
        return f"{self.material}: {self._quantity}"
