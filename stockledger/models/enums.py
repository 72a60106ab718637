"""
Enums for Stockledger models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class ChangeType(models.TextChoices):
    """Direction of a stock movement, as recorded in the audit trail."""
    IN = 'IN', _('Stock in')
    OUT = 'OUT', _('Stock out')


class AlertType(models.TextChoices):
    """Kinds of inventory alert."""
    LOW_STOCK = 'LOW_STOCK', _('Low stock')   # Stock fell below Material.min_stock
