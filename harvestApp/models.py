from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models, transaction
from plantingApp.models import Planting


class HarvestManager(models.Manager):
    def register(self, planting, date, quantity_kg, quality='Medium'):
        """Insert a harvest for a planting and return the new harvest id."""
        if date < planting.date:
            raise ValidationError("A harvest cannot be dated before its planting")

        with transaction.atomic(using=self.db):
            harvest = self.create(
                planting=planting,
                date=date,
                quantity_kg=quantity_kg,
                quality=quality
            )
        return harvest.id


class Harvest(models.Model):
    QUALITY_CHOICES = [
        ('High', 'High'),
        ('Medium', 'Medium'),
        ('Low', 'Low'),
    ]

    planting = models.ForeignKey(Planting, on_delete=models.PROTECT, related_name='harvests')
    date = models.DateField()

    # Yield information
    quantity_kg = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Harvested quantity in kilograms"
    )
    quality = models.CharField(max_length=10, choices=QUALITY_CHOICES, default='Medium')

    objects = HarvestManager()

    class Meta:
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.quantity_kg} kg from {self.planting} ({self.date})"
