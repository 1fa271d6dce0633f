# Generated manually for catalog app

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name_ka', models.CharField(db_index=True, max_length=200)),
                ('name_en', models.CharField(blank=True, max_length=200)),
                ('name_ru', models.CharField(blank=True, max_length=200)),
                ('category_ka', models.CharField(db_index=True, max_length=200)),
                ('category_en', models.CharField(blank=True, max_length=200)),
                ('category_ru', models.CharField(blank=True, max_length=200)),
                ('default_unit', models.CharField(choices=[('კგ', 'კგ'), ('ლიტრი', 'ლიტრი'), ('ცალი', 'ცალი'), ('შეკვრა', 'შეკვრა')], default='კგ', max_length=20)),
                ('restaurants', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'products',
                'ordering': ['name_ka'],
            },
        ),
    ]
