"""
Tests for the audit trail.
"""

import pytest

from stockledger import inventory, NotFound, ValidationError
from stockledger.models import AuditRecord, ChangeType, StockMovement


pytestmark = pytest.mark.django_db


class TestAutomaticAudit:
    """Every movement gets exactly one audit record."""

    def test_one_record_per_movement(self, material, actor_id):
        """Audit record matches its movement's material, type and quantity."""
        inventory.stock_in(material.pk, 30, actor_id=actor_id)
        inventory.stock_out(material.pk, 8, actor_id=actor_id)
        inventory.stock_out(material.pk, -2, actor_id=actor_id)
        inventory.stock_in(material.pk, 0, actor_id=actor_id)

        movements = StockMovement.objects.filter(material=material)
        assert movements.count() == 4
        assert AuditRecord.objects.filter(movement__isnull=False).count() == 4

        for movement in movements:
            record = movement.audit_record
            assert record.material_id == material.pk
            assert record.quantity == movement.quantity
            assert record.actor_id == actor_id
            expected = ChangeType.IN if movement.quantity >= 0 else ChangeType.OUT
            assert record.change_type == expected

    def test_default_notes(self, material):
        inventory.stock_in(material.pk, 5)
        inventory.stock_out(material.pk, 1)

        assert [r.note for r in inventory.list_audit(material.pk)] == ['Stock in', 'Stock out']

    def test_custom_note(self, material, actor_id):
        movement = inventory.stock_out(material.pk, 2, actor_id=actor_id, note='Cut for job #42')

        assert movement.audit_record.note == 'Cut for job #42'

    def test_audit_record_is_immutable(self, material):
        movement = inventory.stock_in(material.pk, 5)
        record = movement.audit_record
        record.note = 'tampered'

        with pytest.raises(ValueError):
            record.save()
        with pytest.raises(ValueError):
            record.delete()


class TestManualAnnotation:
    """Tests for inventory.annotate()."""

    def test_annotate_adds_record_without_movement(self, material, actor_id):
        record = inventory.annotate(
            material.pk, ChangeType.OUT, 3, actor_id=actor_id, note='Scrap found during count',
        )

        assert record.movement is None
        assert record.change_type == ChangeType.OUT
        assert StockMovement.objects.count() == 0
        assert inventory.current_stock(material.pk) == 0

    def test_annotate_accepts_plain_strings(self, material):
        record = inventory.annotate(material.pk, 'IN', 1)

        assert record.change_type == ChangeType.IN

    def test_annotate_invalid_change_type(self, material):
        with pytest.raises(ValidationError) as exc:
            inventory.annotate(material.pk, 'MOVE', 1)

        assert exc.value.code == 'INVALID_CHANGE_TYPE'

    def test_annotate_unknown_material(self, db):
        with pytest.raises(NotFound):
            inventory.annotate(999, ChangeType.IN, 1)


class TestListByMaterial:
    """Tests for inventory.list_audit() / iter_by_material()."""

    def test_chronological_and_scoped(self, material, tracked_material):
        inventory.stock_in(material.pk, 10)
        inventory.stock_in(tracked_material.pk, 99)
        inventory.stock_out(material.pk, 4)

        records = inventory.list_audit(material.pk)

        assert [r.quantity for r in records] == [10, -4]
        # Lazy queryset: iterating again re-reads
        inventory.stock_in(material.pk, 1)
        assert [r.quantity for r in records.all()] == [10, -4, 1]

    def test_iter_streams_in_chunks(self, material, settings):
        settings.STOCKLEDGER = {'AUDIT_CHUNK_SIZE': 2}
        for qty in range(1, 6):
            inventory.stock_in(material.pk, qty)

        assert [r.quantity for r in inventory.iter_by_material(material.pk)] == [1, 2, 3, 4, 5]

    def test_unknown_material(self, db):
        with pytest.raises(NotFound):
            inventory.list_audit(999)
