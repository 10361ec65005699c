from django.core.validators import MinValueValidator
from django.db import models
from farmApp.models import Field, Variety


class Planting(models.Model):
    """A sowing of one variety on one field (siembra)."""
    date = models.DateField()
    plant_count = models.PositiveIntegerField(
        validators=[MinValueValidator(0)],
        help_text="Number of plants sown"
    )
    field = models.ForeignKey(Field, on_delete=models.PROTECT, related_name='plantings')
    variety = models.ForeignKey(Variety, on_delete=models.PROTECT, related_name='plantings')

    class Meta:
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.variety} on {self.field} ({self.date})"
