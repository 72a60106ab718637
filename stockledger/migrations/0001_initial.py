"""
Initial migration for Stockledger models.
"""

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Stockledger models: Supplier, Material, StockMovement, StockLevel, AuditRecord, Alert."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Supplier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('contact_info', models.CharField(blank=True, default='', max_length=255, verbose_name='Contact')),
                ('address', models.TextField(blank=True, default='', verbose_name='Address')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Created at')),
            ],
            options={
                'verbose_name': 'Supplier',
                'verbose_name_plural': 'Suppliers',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Material',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('material_type', models.CharField(blank=True, default='', max_length=100, verbose_name='Type')),
                ('specification', models.CharField(blank=True, default='', max_length=255, verbose_name='Specification')),
                ('unit', models.CharField(blank=True, default='', help_text='Unit of measure, e.g. "kg", "pcs", "m"', max_length=20, verbose_name='Unit')),
                ('min_stock', models.PositiveIntegerField(blank=True, help_text='Empty = no low-stock alerts. Alert fires when stock < this value.', null=True, verbose_name='Minimum stock')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, verbose_name='Created at')),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='materials', to='stockledger.supplier', verbose_name='Supplier')),
            ],
            options={
                'verbose_name': 'Material',
                'verbose_name_plural': 'Materials',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='StockMovement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.IntegerField(help_text='Positive = stock in, Negative = stock out', verbose_name='Quantity')),
                ('batch_no', models.CharField(blank=True, default='', max_length=50, verbose_name='Batch')),
                ('received_at', models.DateField(blank=True, null=True, verbose_name='Received on')),
                ('expiry_date', models.DateField(blank=True, null=True, verbose_name='Expires on')),
                ('location', models.CharField(blank=True, default='', max_length=100, verbose_name='Location')),
                ('recorded_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Recorded at')),
                ('material', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='movements', to='stockledger.material', verbose_name='Material')),
            ],
            options={
                'verbose_name': 'Stock movement',
                'verbose_name_plural': 'Stock movements',
                'ordering': ['recorded_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='StockLevel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('_quantity', models.IntegerField(default=0, verbose_name='Quantity')),
                ('movement_count', models.PositiveIntegerField(default=0, verbose_name='Movements')),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('material', models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name='stock_level', to='stockledger.material', verbose_name='Material')),
            ],
            options={
                'verbose_name': 'Stock level',
                'verbose_name_plural': 'Stock levels',
                'ordering': ['material_id'],
            },
        ),
        migrations.CreateModel(
            name='AuditRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('change_type', models.CharField(choices=[('IN', 'Stock in'), ('OUT', 'Stock out')], max_length=3, verbose_name='Change')),
                ('quantity', models.IntegerField(verbose_name='Quantity')),
                ('actor_id', models.PositiveBigIntegerField(blank=True, null=True, verbose_name='User ID')),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Timestamp')),
                ('note', models.TextField(blank=True, default='', verbose_name='Note')),
                ('material', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='audit_records', to='stockledger.material', verbose_name='Material')),
                ('movement', models.OneToOneField(blank=True, help_text='Empty = manual annotation', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='audit_record', to='stockledger.stockmovement', verbose_name='Movement')),
            ],
            options={
                'verbose_name': 'Audit record',
                'verbose_name_plural': 'Audit records',
                'ordering': ['timestamp', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Alert',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('alert_type', models.CharField(choices=[('LOW_STOCK', 'Low stock')], default='LOW_STOCK', max_length=20, verbose_name='Type')),
                ('quantity_at_trigger', models.IntegerField(blank=True, null=True, verbose_name='Stock at trigger')),
                ('triggered_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Triggered at')),
                ('resolved_at', models.DateTimeField(blank=True, null=True, verbose_name='Resolved at')),
                ('resolved_by', models.PositiveBigIntegerField(blank=True, null=True, verbose_name='Resolved by')),
                ('material', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='alerts', to='stockledger.material', verbose_name='Material')),
            ],
            options={
                'verbose_name': 'Alert',
                'verbose_name_plural': 'Alerts',
                'ordering': ['triggered_at', 'id'],
            },
        ),
        # Indexes and constraints
        migrations.AddIndex(
            model_name='stockmovement',
            index=models.Index(fields=['material', 'recorded_at'], name='stockledger_mv_mat_rec_idx'),
        ),
        migrations.AddIndex(
            model_name='auditrecord',
            index=models.Index(fields=['material', 'timestamp'], name='stockledger_au_mat_ts_idx'),
        ),
        migrations.AddIndex(
            model_name='alert',
            index=models.Index(fields=['material', 'resolved_at'], name='stockledger_al_mat_res_idx'),
        ),
        migrations.AddConstraint(
            model_name='alert',
            constraint=models.UniqueConstraint(condition=models.Q(('resolved_at__isnull', True)), fields=('material', 'alert_type'), name='unique_open_alert_per_material'),
        ),
    ]
