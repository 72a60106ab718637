"""
StockMovement model — Immutable ledger of quantity changes.
"""

from django.db import models, transaction
from django.db.models import F
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class StockMovement(models.Model):
    """
    Immutable record of quantity change for one material.

    Rules:
    - NEVER update() or delete()
    - Corrections are new movements with inverse quantity
    - Updates StockLevel._quantity atomically on save()

    This is the ONLY model that changes stock.
    """

    material = models.ForeignKey(
        'stockledger.Material',
        on_delete=models.PROTECT,
        related_name='movements',
        verbose_name=_('Material'),
    )

    quantity = models.IntegerField(
        verbose_name=_('Quantity'),
        help_text=_('Positive = stock in, Negative = stock out'),
    )

    batch_no = models.CharField(max_length=50, blank=True, default='', verbose_name=_('Batch'))
    received_at = models.DateField(null=True, blank=True, verbose_name=_('Received on'))
    expiry_date = models.DateField(null=True, blank=True, verbose_name=_('Expires on'))
    location = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Location'))

    recorded_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Recorded at'))

    class Meta:
        verbose_name = _('Stock movement')
        verbose_name_plural = _('Stock movements')
        ordering = ['recorded_at', 'id']
        indexes = [
            models.Index(fields=['material', 'recorded_at'], name='stockledger_mv_mat_rec_idx'),
        ]

    def save(self, *args, **kwargs):
        """Save movement and update the material's running total atomically."""
        if self.pk:
            raise ValueError(
                "Stock movements are immutable. "
                "To correct one, record a new movement with the inverse quantity."
            )

        with transaction.atomic():
            super().save(*args, **kwargs)

            # Import here to avoid circular import
            from stockledger.models.level import StockLevel

            updated = StockLevel.objects.filter(material_id=self.material_id).update(
                _quantity=F('_quantity') + self.quantity,
                movement_count=F('movement_count') + 1,
                updated_at=timezone.now(),
            )
            if not updated:
                StockLevel.objects.create(
                    material_id=self.material_id,
                    _quantity=self.quantity,
                    movement_count=1,
                )

    def delete(self, *args, **kwargs):
        """Prevent deletion — movements are immutable."""
        raise ValueError(
            "Stock movements are immutable. "
            "To reverse one, record a new movement with the inverse quantity."
        )

    def __str__(self) -> str:
        signal = '+' if self.quantity > 0 else ''
        return f"{signal}{self.quantity} | {self.material_id}"
