"""
Material model — What is tracked.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Material(models.Model):
    """
    A trackable material.

    Purely descriptive: quantities live in the ledger (StockMovement) and
    its running total (StockLevel), never here.

    Only min_stock may change after creation.
    """

    name = models.CharField(max_length=200, verbose_name=_('Name'))
    material_type = models.CharField(max_length=100, blank=True, default='', verbose_name=_('Type'))
    specification = models.CharField(max_length=255, blank=True, default='', verbose_name=_('Specification'))
    unit = models.CharField(
        max_length=20,
        blank=True,
        default='',
        verbose_name=_('Unit'),
        help_text=_('Unit of measure, e.g. "kg", "pcs", "m"'),
    )
    supplier = models.ForeignKey(
        'stockledger.Supplier',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='materials',
        verbose_name=_('Supplier'),
    )
    min_stock = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name=_('Minimum stock'),
        help_text=_('Empty = no low-stock alerts. Alert fires when stock < this value.'),
    )
    created_at = models.DateTimeField(default=timezone.now, verbose_name=_('Created at'))

    class Meta:
        verbose_name = _('Material')
        verbose_name_plural = _('Materials')
        ordering = ['id']

    def __str__(self) -> str:
        return self.name
