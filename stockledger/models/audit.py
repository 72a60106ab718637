"""
AuditRecord model — Who changed what, when and why.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockledger.models.enums import ChangeType


class AuditRecord(models.Model):
    """
    Immutable audit entry.

    Every StockMovement gets exactly one record, linked through ``movement``
    and written in the same transaction. Manual annotations have no
    movement.
    """

    material = models.ForeignKey(
        'stockledger.Material',
        on_delete=models.PROTECT,
        related_name='audit_records',
        verbose_name=_('Material'),
    )
    movement = models.OneToOneField(
        'stockledger.StockMovement',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='audit_record',
        verbose_name=_('Movement'),
        help_text=_('Empty = manual annotation'),
    )
    change_type = models.CharField(
        max_length=3,
        choices=ChangeType.choices,
        verbose_name=_('Change'),
    )
    quantity = models.IntegerField(verbose_name=_('Quantity'))
    actor_id = models.PositiveBigIntegerField(null=True, blank=True, verbose_name=_('User ID'))
    timestamp = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Timestamp'))
    note = models.TextField(blank=True, default='', verbose_name=_('Note'))

    class Meta:
        verbose_name = _('Audit record')
        verbose_name_plural = _('Audit records')
        ordering = ['timestamp', 'id']
        indexes = [
            models.Index(fields=['material', 'timestamp'], name='stockledger_au_mat_ts_idx'),
        ]

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValueError("Audit records are immutable.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Audit records are immutable.")

    def __str__(self) -> str:
        return f"{self.change_type} {self.quantity} | {self.note}"
