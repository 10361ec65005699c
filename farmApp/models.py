from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


DEFAULT_FARM_ID = 1


class Farm(models.Model):
    """A farm owning one or more fields."""
    name = models.CharField(max_length=100)
    location = models.CharField(max_length=200, blank=True)
    owner = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name


class Field(models.Model):
    """A bounded land unit of a farm (parcela)."""
    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Maintenance', 'Under Maintenance'),
        ('Retired', 'Retired'),
    ]

    name = models.CharField(max_length=100)
    area_ha = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Field area in hectares"
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Active')
    farm = models.ForeignKey(
        Farm,
        on_delete=models.PROTECT,
        related_name='fields',
        default=DEFAULT_FARM_ID
    )

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.name} ({self.area_ha} ha)"


class Variety(models.Model):
    """A crop variety that can be planted in a field."""
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'varieties'

    def __str__(self):
        return self.name
