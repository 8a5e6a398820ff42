# apps/tasks/models.py
from django.db import models
from apps.projects.models import RoleChoices


class Task(models.Model):
    # Zadanie nie istnieje bez projektu (kompozycja)
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.CASCADE,
        related_name='tasks'
    )

    role = models.CharField(max_length=10, choices=RoleChoices.choices)
    responsible_name = models.CharField(max_length=200, blank=True)
    worker_name = models.CharField(max_length=200, blank=True)

    # Wymaganie po etykiecie i kategorii, nie po ID rekordu
    requirement = models.CharField(max_length=200)
    category = models.CharField(max_length=100, blank=True)
    notes = models.TextField(blank=True)

    done = models.BooleanField(default=False)
    completed_on = models.DateField(null=True, blank=True)

    order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.requirement} ({self.role})"
