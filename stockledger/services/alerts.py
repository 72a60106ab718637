"""
Stock alerts — raise, resolve and list low-stock alerts.

Usage:
    from stockledger.services.alerts import AlertEngine

    AlertEngine.list_alerts(open_only=True)
    AlertEngine.resolve_alert(alert.pk, actor_id=7)

on_stock_out() is called by the ledger (through movement_recorded) with
the material's lock held, so the open-alert check and the insert cannot
interleave with another stock-out of the same material.
"""

import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from stockledger.exceptions import AlreadyResolved, NotFound, storage_errors
from stockledger.models.alert import Alert
from stockledger.models.enums import AlertType
from stockledger.signals import alert_raised, alert_resolved

logger = logging.getLogger('stockledger')


class AlertEngine:
    """Low-stock alert lifecycle methods."""

    @classmethod
    def on_stock_out(cls, material, balance: int) -> Alert | None:
        """
        Decide whether a stock-out raises a LOW_STOCK alert.

        An alert is raised when balance < material.min_stock and the
        material has no open LOW_STOCK alert yet.

        Args:
            material: Material just withdrawn from
            balance: Stock after the movement

        Returns:
            The new alert, or None
        """
        if material.min_stock is None or balance >= material.min_stock:
            return None

        if Alert.objects.for_material(material).open().filter(alert_type=AlertType.LOW_STOCK).exists():
            logger.debug(
                "inventory.alert.already_open",
                extra={"material_id": material.pk, "balance": balance},
            )
            return None

        try:
            with transaction.atomic():
                alert = Alert.objects.create(
                    material=material,
                    alert_type=AlertType.LOW_STOCK,
                    quantity_at_trigger=balance,
                )
        except IntegrityError:
            # Another process opened one first (unique_open_alert_per_material)
            return None

        logger.warning(
            "inventory.alert.triggered",
            extra={
                "alert_id": alert.pk,
                "material_id": material.pk,
                "min_stock": material.min_stock,
                "balance": balance,
            },
        )
        alert_raised.send(sender=Alert, alert=alert, material=material, balance=balance)
        return alert

    @classmethod
    def resolve_alert(cls, alert_id, actor_id=None) -> Alert:
        """
        Close an open alert.

        Raises:
            NotFound('ALERT_NOT_FOUND'): If the alert doesn't exist
            AlreadyResolved: If it was resolved before (nothing changes;
                the alert is on the exception as ``.alert``)

        Concurrency:
            - Runs under transaction.atomic()
            - Uses select_for_update() on the Alert
        """
        with storage_errors(alert_id=alert_id), transaction.atomic():
            try:
                alert = Alert.objects.select_for_update().get(pk=alert_id)
            except (Alert.DoesNotExist, ValueError, TypeError):
                raise NotFound('ALERT_NOT_FOUND', alert_id=alert_id) from None

            if not alert.is_open:
                raise AlreadyResolved(alert)

            alert.resolved_at = timezone.now()
            alert.resolved_by = actor_id
            alert.save(update_fields=['resolved_at', 'resolved_by'])
            alert_resolved.send(sender=Alert, alert=alert, actor_id=actor_id)

        logger.info(
            "inventory.alert.resolved",
            extra={"alert_id": alert.pk, "material_id": alert.material_id, "actor_id": actor_id},
        )
        return alert

    @classmethod
    def list_alerts(cls, material_id=None, open_only: bool = False):
        """Alerts, oldest first, optionally for one material and/or only open ones."""
        qs = Alert.objects.select_related('material')
        if material_id is not None:
            qs = qs.for_material(material_id)
        if open_only:
            qs = qs.open()
        return qs.order_by('triggered_at', 'id')
