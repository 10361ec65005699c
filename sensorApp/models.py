from django.db import models
from django.utils import timezone
from farmApp.models import Field


class Sensor(models.Model):
    KIND_CHOICES = [
        ('Temperature', 'Temperature'),
        ('Humidity', 'Humidity'),
        ('pH', 'pH'),
        ('Wind', 'Wind'),
    ]

    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('Inactive', 'Inactive'),
    ]

    kind = models.CharField(max_length=20, choices=KIND_CHOICES)
    location = models.CharField(max_length=150, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='Active')
    field = models.ForeignKey(Field, on_delete=models.PROTECT, related_name='sensors')

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.kind} sensor #{self.id} on {self.field}"


class SensorReading(models.Model):
    sensor = models.ForeignKey(Sensor, on_delete=models.PROTECT, related_name='readings')
    value = models.FloatField()
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.sensor.kind} = {self.value} at {self.timestamp}"
