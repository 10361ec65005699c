from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from farmApp.models import Field
from workerApp.models import Worker


def is_in_the_past(scheduled_date):
    return timezone.localdate(scheduled_date) < timezone.localdate()


class TaskManager(models.Manager):
    def register(self, description, scheduled_date, field, assignee, status='Pending'):
        """Insert a user-scheduled task; it may not be scheduled in the past."""
        if is_in_the_past(scheduled_date):
            raise ValidationError("A task cannot be scheduled in the past")

        task = self.model(
            description=description,
            scheduled_date=scheduled_date,
            status=status or 'Pending',
            field=field,
            assignee=assignee
        )
        task.full_clean()
        task.save(using=self._db)
        return task

    def create_derived(self, description, field_id, assignee_id):
        """Insert a pending task scheduled now, derived from another record."""
        return self.create(
            description=description,
            scheduled_date=timezone.now(),
            status='Pending',
            field_id=field_id,
            assignee_id=assignee_id
        )


class Task(models.Model):
    STATUS_CHOICES = [
        ('Pending', 'Pending'),
        ('InProgress', 'In Progress'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
    ]

    description = models.TextField()
    scheduled_date = models.DateTimeField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='Pending')
    field = models.ForeignKey(Field, on_delete=models.PROTECT, related_name='tasks')
    assignee = models.ForeignKey(Worker, on_delete=models.PROTECT, related_name='tasks')

    objects = TaskManager()

    class Meta:
        ordering = ['-scheduled_date', '-id']

    def __str__(self):
        return f"Task #{self.id} on {self.field} - {self.status}"
