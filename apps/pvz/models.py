# ==========================================
# apps/pvz/models.py
# ==========================================

from django.db import models
from django.db.models import Q
from django.utils import timezone
import uuid


class City(models.TextChoices):
    MOSCOW = 'Moscow', 'Москва'
    SAINT_PETERSBURG = 'Saint Petersburg', 'Санкт-Петербург'
    KAZAN = 'Kazan', 'Казань'


class ProductType(models.TextChoices):
    ELECTRONICS = 'electronics', 'Электроника'
    CLOTHING = 'clothing', 'Одежда'
    SHOES = 'shoes', 'Обувь'


class ReceptionStatus(models.TextChoices):
    IN_PROGRESS = 'in_progress', 'In progress'
    CLOSED = 'close', 'Closed'


class PickupPoint(models.Model):
    """Pickup point (PVZ) where goods are received and stored."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    city = models.CharField(max_length=32, choices=City.choices)
    created_at = models.DateTimeField(default=timezone.now)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='pickup_points'
    )

    class Meta:
        db_table = 'pvz'
        indexes = [
            models.Index(fields=['created_at'], name='pvz_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.city} ({self.id})"


class Reception(models.Model):
    """Goods-intake session at a pickup point. Open until closed, never re-opened."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    pickup_point = models.ForeignKey(
        PickupPoint,
        on_delete=models.CASCADE,
        related_name='receptions'
    )
    is_open = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='receptions'
    )

    class Meta:
        db_table = 'receptions'
        indexes = [
            models.Index(fields=['pickup_point', 'created_at'], name='reception_pvz_created_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['pickup_point'],
                condition=Q(is_open=True),
                name='one_open_reception_per_pvz',
            ),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Reception {self.id} ({self.status})"

    @property
    def status(self):
        return ReceptionStatus.IN_PROGRESS if self.is_open else ReceptionStatus.CLOSED


class Product(models.Model):
    """Item logged in a reception, kept in insertion order."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    reception = models.ForeignKey(
        Reception,
        on_delete=models.CASCADE,
        related_name='products'
    )
    type = models.CharField(max_length=16, choices=ProductType.choices)

    # 1-based insertion ordinal inside the reception; breaks created_at ties
    position = models.PositiveIntegerField()

    created_at = models.DateTimeField(default=timezone.now)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['created_at'], name='product_created_at_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['reception', 'position'],
                name='unique_product_position_per_reception',
            ),
        ]
        ordering = ['created_at', 'position']

    def __str__(self):
        return f"{self.type} #{self.position} in {self.reception_id}"
