"""
Pytest fixtures for Stockledger tests.
"""

import pytest

from stockledger import inventory
from stockledger.locks import reset_material_locks


@pytest.fixture(autouse=True)
def fresh_locks():
    """Lock registry is process-global; start each test with an empty one."""
    reset_material_locks()
    yield
    reset_material_locks()


@pytest.fixture
def actor_id():
    """Id of the acting user, as supplied by the surrounding service."""
    return 7


@pytest.fixture
def supplier(db):
    """Create a test supplier."""
    return inventory.register_supplier(
        'Aço Forte Ltda',
        contact_info='vendas@acoforte.example',
        address='Rua das Chapas, 100',
    )


@pytest.fixture
def material(db, supplier):
    """Create a material without a minimum stock (never alerts)."""
    return inventory.register_material(
        'Steel plate 6mm',
        material_type='plate',
        unit='pcs',
        specification='ASTM A36',
        supplier_id=supplier.pk,
    )


@pytest.fixture
def tracked_material(db, supplier):
    """Create a material with min_stock=10."""
    return inventory.register_material(
        'Welding rod E6013',
        material_type='consumable',
        unit='kg',
        min_stock=10,
        supplier_id=supplier.pk,
    )


@pytest.fixture
def stocked_material(tracked_material, actor_id):
    """tracked_material with 12 in stock (above its min_stock of 10)."""
    inventory.stock_in(tracked_material.pk, 12, batch_no='B-001', actor_id=actor_id)
    return tracked_material
