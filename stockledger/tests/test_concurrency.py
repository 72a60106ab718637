"""
Concurrency tests: per-material serialization of stock movements.

Threads share one file-backed SQLite database (see tests/settings.py), so
these tests need transaction=True: each thread commits on its own
connection.
"""

import threading
from contextlib import contextmanager

import pytest
from django.db import connection

from stockledger import inventory, StorageUnavailable
from stockledger.locks import get_material_lock, material_lock
from stockledger.models import Alert, AuditRecord, ChangeType, StockMovement
from stockledger.signals import alert_raised


def run_concurrently(target, count):
    """Start `count` threads on `target` behind a barrier; return their errors."""
    barrier = threading.Barrier(count)
    errors = []

    def worker():
        try:
            barrier.wait()
            target()
        except Exception as exc:
            errors.append(exc)
        finally:
            connection.close()

    threads = [threading.Thread(target=worker) for _ in range(count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    return errors


@pytest.mark.django_db(transaction=True)
class TestConcurrentStockOut:
    """Stock-outs on the same material never interleave."""

    def test_two_withdrawals_raise_one_alert(self):
        """Stock 10, min 5, two threads take 6: stock -2 and exactly one open alert."""
        material = inventory.register_material('Rebar 10mm', unit='pcs', min_stock=5)
        inventory.stock_in(material.pk, 10)

        errors = run_concurrently(lambda: inventory.stock_out(material.pk, 6, actor_id=1), 2)

        assert errors == []
        assert inventory.current_stock(material.pk) == -2
        assert Alert.objects.for_material(material).open().count() == 1
        assert Alert.objects.get().quantity_at_trigger == 4

    def test_many_withdrawals_keep_ledger_consistent(self):
        """Eight threads: aggregate equals the ledger and every movement is audited."""
        material = inventory.register_material('Anchor bolt', min_stock=5)
        inventory.stock_in(material.pk, 10)

        errors = run_concurrently(lambda: inventory.stock_out(material.pk, 1, actor_id=2), 8)

        assert errors == []
        assert inventory.current_stock(material.pk) == 2
        assert StockMovement.objects.filter(material=material).count() == 9
        assert AuditRecord.objects.filter(material=material, change_type=ChangeType.OUT).count() == 8
        assert Alert.objects.count() == 1

        # Alert fired on the first withdrawal that went below 5
        assert Alert.objects.get().quantity_at_trigger == 4


@contextmanager
def held_by_other_thread(material_id):
    """Hold a material's lock from a second thread for the duration of the block."""
    acquired = threading.Event()
    release = threading.Event()

    def hold():
        with material_lock(material_id):
            acquired.set()
            release.wait(timeout=10)

    t = threading.Thread(target=hold)
    t.start()
    acquired.wait(timeout=5)
    try:
        yield
    finally:
        release.set()
        t.join(timeout=5)


class TestMaterialLocks:
    """Keyed locks: one per material, never shared."""

    def test_same_material_same_lock(self):
        assert get_material_lock(1) is get_material_lock(1)

    def test_different_materials_different_locks(self):
        assert get_material_lock(1) is not get_material_lock(2)

    def test_other_material_not_blocked(self):
        """Holding material 1's lock doesn't delay material 2."""
        acquired = threading.Event()

        def take_other():
            with material_lock(2, timeout=1):
                acquired.set()

        with material_lock(1):
            t = threading.Thread(target=take_other)
            t.start()
            t.join(timeout=5)

        assert acquired.is_set()

    def test_lock_timeout(self):
        with held_by_other_thread(1):
            with pytest.raises(StorageUnavailable) as exc:
                with material_lock(1, timeout=0.05):
                    pass

        assert exc.value.code == 'LOCK_TIMEOUT'

    def test_reentrant_in_same_thread(self):
        with material_lock(1):
            with material_lock(1, timeout=0.05):
                pass

    @pytest.mark.django_db
    def test_busy_material_times_out_without_writing(self, tracked_material, settings):
        """A stock-out that can't get the lock records nothing."""
        settings.STOCKLEDGER = {'LOCK_TIMEOUT_SECONDS': 0.05}

        with held_by_other_thread(tracked_material.pk):
            with pytest.raises(StorageUnavailable) as exc:
                inventory.stock_out(tracked_material.pk, 5)

        assert exc.value.code == 'LOCK_TIMEOUT'
        assert StockMovement.objects.count() == 0
        assert AuditRecord.objects.count() == 0


@pytest.mark.django_db
class TestReentrantReceivers:
    """Receivers may record movements on the material being written."""

    @pytest.fixture
    def auto_reorder(self):
        """An alert_raised receiver that restocks 20 units of the alerted material."""
        def reorder(sender, alert, material, **kwargs):
            inventory.stock_in(material.pk, 20, note='Auto reorder')

        alert_raised.connect(reorder, weak=False, dispatch_uid='test.auto_reorder')
        yield
        alert_raised.disconnect(dispatch_uid='test.auto_reorder')

    def test_restock_from_alert_receiver(self, stocked_material, auto_reorder, settings):
        """12 → 7 raises an alert; the receiver's stock-in lands in the same transaction."""
        settings.STOCKLEDGER = {'LOCK_TIMEOUT_SECONDS': 0.2}

        inventory.stock_out(stocked_material.pk, 5)

        assert inventory.current_stock(stocked_material.pk) == 27
        assert StockMovement.objects.filter(material=stocked_material).count() == 3
        assert AuditRecord.objects.filter(material=stocked_material, movement__isnull=False).count() == 3
        assert Alert.objects.get().quantity_at_trigger == 7
