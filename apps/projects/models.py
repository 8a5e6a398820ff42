# apps/projects/models.py
from django.db import models
from apps.projects.domain.entities import ProjectStatus, ResponsibleRole


class RoleChoices(models.TextChoices):
    JPRO = ResponsibleRole.JPRO.value, 'Kierownik projektu'
    EPR = ResponsibleRole.EPR.value, 'Specjalista BHP'
    RRHH = ResponsibleRole.RRHH.value, 'Kadry'
    LEGAL = ResponsibleRole.LEGAL.value, 'Dział prawny'


class Project(models.Model):
    code = models.CharField(max_length=50, unique=True)
    name = models.CharField(max_length=200)
    client = models.CharField(max_length=200, blank=True)

    # Firma, której katalog wymagań obowiązuje w projekcie
    company = models.CharField(max_length=200, blank=True)

    class StatusChoices(models.TextChoices):
        PENDING = ProjectStatus.PENDING.value, 'Oczekuje'
        IN_PROGRESS = ProjectStatus.IN_PROGRESS.value, 'W toku'
        FINALIZED = ProjectStatus.FINALIZED.value, 'Zakończony'
        CANCELLED = ProjectStatus.CANCELLED.value, 'Anulowany'

    status = models.CharField(
        max_length=20,
        choices=StatusChoices.choices,
        default=StatusChoices.PENDING
    )

    # Przypisanie ról, JSON: {"JPRO": "Jan Kowalski", "EPR": "..."}
    responsibles = models.JSONField(default=dict, blank=True)

    finalized_on = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.code} - {self.name}"


class CompanyRequirement(models.Model):
    """Wymaganie, które firma-klient stawia każdemu projektowi."""
    company = models.CharField(max_length=200, db_index=True)
    requirement = models.CharField(max_length=200)
    category = models.CharField(max_length=100)
    role = models.CharField(max_length=10, choices=RoleChoices.choices)
    notes = models.TextField(blank=True)
    order = models.PositiveIntegerField(default=0)
    mandatory = models.BooleanField(default=True)

    class Meta:
        ordering = ['company', 'order', 'id']

    def __str__(self):
        return f"{self.company}: {self.requirement} ({self.role})"
