# Generated manually for orders app

import uuid
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


RESTAURANT_CHOICES = [('midiebi', 'მიდიები'), ('sakhinkle', 'სახინკლე')]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('restaurant', models.CharField(choices=RESTAURANT_CHOICES, db_index=True, max_length=20)),
                ('chef', models.CharField(max_length=100)),
                ('date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'active_orders',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.UUIDField(db_index=True)),
                ('product_snapshot', models.JSONField(default=dict)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('purchased', 'Purchased'), ('unavailable', 'Unavailable'), ('forwarded', 'Forwarded to supplier')], default='pending', max_length=20)),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=12, validators=[MinValueValidator(Decimal('0'))])),
                ('unit', models.CharField(max_length=30)),
                ('actual_quantity', models.DecimalField(blank=True, decimal_places=3, max_digits=12, null=True)),
                ('price_per_unit', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('position', models.PositiveIntegerField(default=0)),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.order')),
            ],
            options={
                'db_table': 'order_items',
                'ordering': ['position', 'id'],
                'unique_together': {('order', 'product_id')},
            },
        ),
        migrations.CreateModel(
            name='CompletedOrder',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('source_order_id', models.UUIDField(db_index=True)),
                ('restaurant', models.CharField(choices=RESTAURANT_CHOICES, db_index=True, max_length=20)),
                ('chef', models.CharField(max_length=100)),
                ('date', models.DateTimeField()),
                ('completion_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('items', models.JSONField(default=list)),
            ],
            options={
                'db_table': 'completed_orders',
                'ordering': ['-completion_date'],
            },
        ),
        migrations.CreateModel(
            name='UnavailableItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('product_id', models.UUIDField(db_index=True)),
                ('product_snapshot', models.JSONField(default=dict)),
                ('order_id', models.UUIDField()),
                ('restaurant', models.CharField(choices=RESTAURANT_CHOICES, max_length=20)),
                ('date', models.DateTimeField(db_index=True)),
            ],
            options={
                'db_table': 'unavailable_items',
                'ordering': ['-date'],
            },
        ),
        migrations.CreateModel(
            name='DispatchRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('items', models.JSONField(default=list)),
            ],
            options={
                'db_table': 'ordered_history',
                'ordering': ['-date'],
            },
        ),
    ]
