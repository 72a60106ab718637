"""
Material registry — catalog of materials and their suppliers.

Purely descriptive: nothing here touches quantities.
"""

import logging

from stockledger.exceptions import NotFound, ValidationError, storage_errors
from stockledger.models.material import Material
from stockledger.models.supplier import Supplier

logger = logging.getLogger('stockledger')


def _validate_min_stock(min_stock):
    if min_stock is None:
        return
    if isinstance(min_stock, bool) or not isinstance(min_stock, int) or min_stock < 0:
        raise ValidationError('INVALID_MIN_STOCK', min_stock=min_stock)


class MaterialRegistry:
    """Material and supplier catalog methods."""

    @classmethod
    def register_material(cls, name, material_type='', unit='',
                          specification='', min_stock=None, supplier_id=None) -> Material:
        """
        Add a material to the catalog.

        Raises:
            ValidationError('NAME_REQUIRED'): If name is missing or blank
            ValidationError('INVALID_MIN_STOCK'): If min_stock is not a non-negative int
            NotFound('SUPPLIER_NOT_FOUND'): If supplier_id doesn't exist
        """
        if not name or not str(name).strip():
            raise ValidationError('NAME_REQUIRED')
        _validate_min_stock(min_stock)

        with storage_errors():
            supplier = cls.get_supplier(supplier_id) if supplier_id is not None else None
            material = Material.objects.create(
                name=str(name).strip(),
                material_type=material_type,
                unit=unit,
                specification=specification,
                min_stock=min_stock,
                supplier=supplier,
            )

        logger.info(
            "inventory.material_registered",
            extra={"material_id": material.pk, "material": material.name, "min_stock": min_stock},
        )
        return material

    @classmethod
    def get_material(cls, material_id) -> Material:
        """
        Raises:
            NotFound('MATERIAL_NOT_FOUND')
        """
        with storage_errors():
            try:
                return Material.objects.select_related('supplier').get(pk=material_id)
            except (Material.DoesNotExist, ValueError, TypeError):
                raise NotFound('MATERIAL_NOT_FOUND', material_id=material_id) from None

    @classmethod
    def list_materials(cls):
        """All materials, in registration order."""
        return Material.objects.select_related('supplier').order_by('id')

    @classmethod
    def set_min_stock(cls, material_id, min_stock) -> Material:
        """
        Change a material's low-stock threshold (None disables alerts).

        Single-column update, so it never races with ledger writes.
        """
        _validate_min_stock(min_stock)
        material = cls.get_material(material_id)

        with storage_errors():
            Material.objects.filter(pk=material.pk).update(min_stock=min_stock)
        material.min_stock = min_stock

        logger.info(
            "inventory.min_stock_changed",
            extra={"material_id": material.pk, "min_stock": min_stock},
        )
        return material

    @classmethod
    def register_supplier(cls, name, contact_info='', address='') -> Supplier:
        """
        Raises:
            ValidationError('NAME_REQUIRED'): If name is missing or blank
        """
        if not name or not str(name).strip():
            raise ValidationError('NAME_REQUIRED')

        with storage_errors():
            return Supplier.objects.create(
                name=str(name).strip(),
                contact_info=contact_info,
                address=address,
            )

    @classmethod
    def get_supplier(cls, supplier_id) -> Supplier:
        """
        Raises:
            NotFound('SUPPLIER_NOT_FOUND')
        """
        with storage_errors():
            try:
                return Supplier.objects.get(pk=supplier_id)
            except (Supplier.DoesNotExist, ValueError, TypeError):
                raise NotFound('SUPPLIER_NOT_FOUND', supplier_id=supplier_id) from None

    @classmethod
    def list_suppliers(cls):
        return Supplier.objects.order_by('id')
