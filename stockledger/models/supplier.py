"""
Supplier model — Who delivers materials.
"""

from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class Supplier(models.Model):
    """Supplier of materials. Descriptive only."""

    name = models.CharField(max_length=200, verbose_name=_('Name'))
    contact_info = models.CharField(max_length=255, blank=True, default='', verbose_name=_('Contact'))
    address = models.TextField(blank=True, default='', verbose_name=_('Address'))
    created_at = models.DateTimeField(default=timezone.now, verbose_name=_('Created at'))

    class Meta:
        verbose_name = _('Supplier')
        verbose_name_plural = _('Suppliers')
        ordering = ['id']

    def __str__(self) -> str:
        return self.name
