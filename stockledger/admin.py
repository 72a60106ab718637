"""
Stockledger Admin.

Provides views for production debugging:
- Supplier: list + edit
- Material: list + edit (only min_stock after creation)
- StockLevel: read-only (material, quantity, movements)
- StockMovement: read-only ledger
- AuditRecord: read-only audit trail
- Alert: read-only with "resolve" action
"""

import logging

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from stockledger.exceptions import InventoryError
from stockledger.models import Alert, AuditRecord, Material, StockLevel, StockMovement, Supplier

logger = logging.getLogger(__name__)


class ReadOnlyAdmin(admin.ModelAdmin):
    """Nothing here changes through the admin. Stock only changes via the Inventory service."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


# =========================================================================
# REGISTRY
# =========================================================================

@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['name', 'contact_info', 'created_at']
    search_fields = ['name']
    readonly_fields = ['created_at']


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ['name', 'material_type', 'unit', 'min_stock', 'stock_display', 'supplier']
    list_filter = ['material_type', 'supplier']
    search_fields = ['name', 'specification']
    readonly_fields = ['created_at']

    def get_readonly_fields(self, request, obj=None):
        """Once created, only min_stock stays editable."""
        if obj is None:
            return self.readonly_fields
        return [f.name for f in self.model._meta.concrete_fields
                if f.name not in ('id', 'min_stock')]

    @admin.display(description=_('Stock'))
    def stock_display(self, obj):
        level = getattr(obj, 'stock_level', None)
        return level.quantity if level else 0


# =========================================================================
# LEDGER (read-only)
# =========================================================================

@admin.register(StockLevel)
class StockLevelAdmin(ReadOnlyAdmin):
    list_display = ['material', 'quantity_display', 'movement_count', 'updated_at']
    readonly_fields = ['material', '_quantity', 'movement_count', 'updated_at']

    @admin.display(description=_('Quantity'))
    def quantity_display(self, obj):
        return obj.quantity


@admin.register(StockMovement)
class StockMovementAdmin(ReadOnlyAdmin):
    list_display = ['recorded_at', 'material', 'quantity', 'batch_no', 'location']
    list_filter = ['recorded_at', 'material']
    search_fields = ['batch_no', 'location']
    readonly_fields = ['material', 'quantity', 'batch_no', 'received_at',
                       'expiry_date', 'location', 'recorded_at']
    date_hierarchy = 'recorded_at'


@admin.register(AuditRecord)
class AuditRecordAdmin(ReadOnlyAdmin):
    list_display = ['timestamp', 'material', 'change_type', 'quantity', 'actor_id', 'note']
    list_filter = ['change_type', 'timestamp']
    search_fields = ['note']
    readonly_fields = ['material', 'movement', 'change_type', 'quantity',
                       'actor_id', 'timestamp', 'note']
    date_hierarchy = 'timestamp'


# =========================================================================
# ALERTS (read-only with resolve action)
# =========================================================================

@admin.register(Alert)
class AlertAdmin(ReadOnlyAdmin):
    list_display = ['triggered_at', 'material', 'alert_type', 'quantity_at_trigger',
                    'is_open_display', 'resolved_at', 'resolved_by']
    list_filter = ['alert_type', 'triggered_at']
    readonly_fields = ['material', 'alert_type', 'quantity_at_trigger',
                       'triggered_at', 'resolved_at', 'resolved_by']
    actions = ['resolve_alerts']

    @admin.display(description=_('Open?'), boolean=True)
    def is_open_display(self, obj):
        return obj.is_open

    @admin.action(description=_('Resolve selected alerts'))
    def resolve_alerts(self, request, queryset):
        from stockledger import inventory

        count = 0
        for alert in queryset.open():
            try:
                inventory.resolve_alert(alert.pk, actor_id=request.user.pk)
                count += 1
            except InventoryError as exc:
                logger.warning("resolve_alerts: failed to resolve %s: %s", alert.pk, exc)

        self.message_user(request, _('{count} alert(s) resolved.').format(count=count))
