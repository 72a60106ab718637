"""
Management command to check stock running totals against the ledger.

Usage:
    python manage.py reconcile_stock
    python manage.py reconcile_stock --dry-run
    python manage.py reconcile_stock --material 42
"""

from django.core.management.base import BaseCommand, CommandError

from stockledger import inventory
from stockledger.exceptions import InventoryError


class Command(BaseCommand):
    """Reconcile stock levels command."""

    help = 'Recompute stock levels from movements and correct drift'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report drift without correcting it'
        )
        parser.add_argument(
            '--material',
            type=int,
            default=None,
            help='Only reconcile this material id'
        )

    def handle(self, *args, **options):
        try:
            drifted = inventory.reconcile(
                material_id=options['material'],
                commit=not options['dry_run'],
            )
        except InventoryError as exc:
            raise CommandError(exc.message) from exc

        for row in drifted:
            self.stdout.write(
                f"material {row['material_id']}: {row['cached']} → {row['actual']}"
            )

        if options['dry_run']:
            self.stdout.write(f'{len(drifted)} material(s) would be corrected')
        else:
            self.stdout.write(
                self.style.SUCCESS(f'{len(drifted)} material(s) corrected')
            )
