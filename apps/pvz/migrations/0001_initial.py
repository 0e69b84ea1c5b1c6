# Generated manually for the pvz app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='PickupPoint',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('city', models.CharField(choices=[('Moscow', 'Москва'), ('Saint Petersburg', 'Санкт-Петербург'), ('Kazan', 'Казань')], max_length=32)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='pickup_points', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'pvz',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['created_at'], name='pvz_created_at_idx')],
            },
        ),
        migrations.CreateModel(
            name='Reception',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('is_open', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='receptions', to=settings.AUTH_USER_MODEL)),
                ('pickup_point', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='receptions', to='pvz.pickuppoint')),
            ],
            options={
                'db_table': 'receptions',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['pickup_point', 'created_at'], name='reception_pvz_created_idx')],
                'constraints': [models.UniqueConstraint(condition=models.Q(('is_open', True)), fields=('pickup_point',), name='one_open_reception_per_pvz')],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('type', models.CharField(choices=[('electronics', 'Электроника'), ('clothing', 'Одежда'), ('shoes', 'Обувь')], max_length=16)),
                ('position', models.PositiveIntegerField()),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to=settings.AUTH_USER_MODEL)),
                ('reception', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to='pvz.reception')),
            ],
            options={
                'db_table': 'products',
                'ordering': ['created_at', 'position'],
                'indexes': [models.Index(fields=['created_at'], name='product_created_at_idx')],
                'constraints': [models.UniqueConstraint(fields=('reception', 'position'), name='unique_product_position_per_reception')],
            },
        ),
    ]
