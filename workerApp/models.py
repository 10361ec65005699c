from django.db import models


class WorkerManager(models.Manager):
    def register(self, name, role='Laborer', contact=''):
        if not name:
            raise ValueError("The worker name must be provided")
        if role not in [choice[0] for choice in Worker.ROLE_CHOICES]:
            raise ValueError("Invalid role selected")

        worker = self.model(name=name.strip(), role=role, contact=contact or '')
        worker.save(using=self._db)
        return worker


class Worker(models.Model):
    ROLE_CHOICES = [
        ('Administrator', 'Administrator'),
        ('Technician', 'Technician'),
        ('Laborer', 'Laborer'),
    ]

    name = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='Laborer')
    contact = models.CharField(max_length=150, blank=True, help_text="Email or phone number")

    objects = WorkerManager()

    class Meta:
        ordering = ['-id']

    def __str__(self):
        return f"{self.name} ({self.role})"
