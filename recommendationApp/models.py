from django.db import models
from django.utils import timezone
from farmApp.models import Field
from workerApp.models import Worker


class Recommendation(models.Model):
    """Advisory suggestion for a field, waiting to be accepted or rejected."""
    STATUS_PENDING = 'Pending'
    STATUS_ACCEPTED = 'Accepted'
    STATUS_REJECTED = 'Rejected'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
    ]

    description = models.TextField()
    timestamp = models.DateTimeField(default=timezone.now)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING)
    field = models.ForeignKey(Field, on_delete=models.PROTECT, related_name='recommendations')
    assignee = models.ForeignKey(
        Worker,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recommendations'
    )

    class Meta:
        ordering = ['-timestamp', '-id']

    @property
    def is_closed(self):
        return self.status != self.STATUS_PENDING

    def __str__(self):
        return f"Recommendation #{self.id} for {self.field} - {self.status}"
