from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


RESTOCK_THRESHOLD = Decimal('50')


class Supply(models.Model):
    """Farm input kept in stock (fertilizers, pesticides...)."""
    KIND_CHOICES = [
        ('Fertilizer', 'Fertilizer'),
        ('Pesticide', 'Pesticide'),
        ('Herbicide', 'Herbicide'),
        ('Other', 'Other'),
    ]

    STATUS_OPTIMAL = 'Optimal'
    STATUS_RESTOCK = 'Urgent restock'

    name = models.CharField(max_length=100)
    kind = models.CharField(max_length=20, choices=KIND_CHOICES, default='Other')
    expiry_date = models.DateField(null=True, blank=True)
    stock = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Current stock level"
    )
    unit = models.CharField(max_length=20, default='kg')
    status = models.CharField(max_length=30, default=STATUS_OPTIMAL, editable=False)

    class Meta:
        ordering = ['name']
        verbose_name_plural = 'supplies'

    @staticmethod
    def status_for(stock):
        return Supply.STATUS_RESTOCK if Decimal(str(stock)) < RESTOCK_THRESHOLD else Supply.STATUS_OPTIMAL

    def save(self, *args, **kwargs):
        """Recompute the stock status before every write."""
        self.status = self.status_for(self.stock)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name}: {self.stock} {self.unit}"
