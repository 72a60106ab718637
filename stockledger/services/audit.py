"""
Audit trail — append-only log of stock changes.

Records are written automatically for every movement (see receivers.py);
record() is also public for manual annotations.
"""

from stockledger.conf import stockledger_settings
from stockledger.exceptions import ValidationError, storage_errors
from stockledger.models.audit import AuditRecord
from stockledger.models.enums import ChangeType
from stockledger.services.registry import MaterialRegistry

DEFAULT_NOTES = {
    ChangeType.IN: 'Stock in',
    ChangeType.OUT: 'Stock out',
}


class AuditTrail:
    """Audit record methods."""

    @classmethod
    def record(cls, material_id, change_type, quantity, actor_id=None,
               note=None, movement=None) -> AuditRecord:
        """
        Append one audit record.

        Args:
            material_id: Material the change applies to
            change_type: ChangeType.IN or ChangeType.OUT
            quantity: Quantity as recorded (signed for ledger movements)
            actor_id: Id of the acting user, supplied by the caller
            note: Free text (None = default note for the change type)
            movement: The StockMovement described (None = manual annotation)

        Raises:
            ValidationError('INVALID_CHANGE_TYPE' | 'INVALID_QUANTITY')
            NotFound('MATERIAL_NOT_FOUND'): Manual annotation of unknown material
            StorageUnavailable: On database failure
        """
        if change_type not in ChangeType.values:
            raise ValidationError('INVALID_CHANGE_TYPE', change_type=change_type)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError('INVALID_QUANTITY', requested=quantity)
        change_type = ChangeType(change_type)

        if movement is None:
            material_id = MaterialRegistry.get_material(material_id).pk

        with storage_errors(material_id=material_id):
            return AuditRecord.objects.create(
                material_id=material_id,
                movement=movement,
                change_type=change_type,
                quantity=quantity,
                actor_id=actor_id,
                note=DEFAULT_NOTES[change_type] if note is None else note,
            )

    @classmethod
    def list_by_material(cls, material_id):
        """Audit records of a material, oldest first (lazy, re-iterable queryset)."""
        material = MaterialRegistry.get_material(material_id)
        return AuditRecord.objects.filter(material=material).order_by('timestamp', 'id')

    @classmethod
    def iter_by_material(cls, material_id):
        """Stream a material's audit history in chunks, for long histories."""
        return cls.list_by_material(material_id).iterator(
            chunk_size=stockledger_settings.AUDIT_CHUNK_SIZE
        )
