"""
Alert model — low-stock condition raised by the alert engine.

Lifecycle:
    OPEN (resolved_at is NULL) -> RESOLVED (terminal)

While a material has an OPEN alert of a given type, no other alert of that
type is raised for it. Once resolved, the next stock-out below threshold
raises a fresh one.

Usage:
    Alert.objects.open()                    # all open alerts
    Alert.objects.for_material(m).open()    # open alerts of one material
"""

from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from stockledger.models.enums import AlertType


class AlertQuerySet(models.QuerySet):
    """Custom QuerySet for Alert with lifecycle filters."""

    def open(self):
        return self.filter(resolved_at__isnull=True)

    def resolved(self):
        return self.filter(resolved_at__isnull=False)

    def for_material(self, material):
        material_id = getattr(material, 'pk', material)
        return self.filter(material_id=material_id)


class Alert(models.Model):
    """Inventory alert for one material."""

    material = models.ForeignKey(
        'stockledger.Material',
        on_delete=models.PROTECT,
        related_name='alerts',
        verbose_name=_('Material'),
    )
    alert_type = models.CharField(
        max_length=20,
        choices=AlertType.choices,
        default=AlertType.LOW_STOCK,
        verbose_name=_('Type'),
    )

    # Stock observed when the alert fired
    quantity_at_trigger = models.IntegerField(null=True, blank=True, verbose_name=_('Stock at trigger'))

    triggered_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Triggered at'))
    resolved_at = models.DateTimeField(null=True, blank=True, verbose_name=_('Resolved at'))
    resolved_by = models.PositiveBigIntegerField(null=True, blank=True, verbose_name=_('Resolved by'))

    objects = AlertQuerySet.as_manager()

    class Meta:
        verbose_name = _('Alert')
        verbose_name_plural = _('Alerts')
        ordering = ['triggered_at', 'id']
        constraints = [
            models.UniqueConstraint(
                fields=['material', 'alert_type'],
                condition=Q(resolved_at__isnull=True),
                name='unique_open_alert_per_material',
            ),
        ]
        indexes = [
            models.Index(fields=['material', 'resolved_at'], name='stockledger_al_mat_res_idx'),
        ]

    @property
    def is_open(self) -> bool:
        return self.resolved_at is None

    def __str__(self) -> str:
        state = 'open' if self.is_open else 'resolved'
        return f"{self.alert_type}: {self.material} ({state})"
