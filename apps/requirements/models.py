# apps/requirements/models.py
from django.db import models
from django.utils import timezone
from apps.requirements.domain.entities import RequirementStatus
from apps.requirements.domain.services import StatusClassifier, lead_time_days


class Worker(models.Model):
    national_id = models.CharField(max_length=20, unique=True)  # RUT / PESEL
    full_name = models.CharField(max_length=200)
    email = models.EmailField(blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.full_name


class RequirementType(models.Model):
    """Katalog wymagań (np. badanie wstępne, kurs pracy na wysokości)."""
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=100)  # Badania, Kursy, Prawo jazdy, Prawne
    notice_days = models.PositiveIntegerField(
        null=True, blank=True,
        help_text="Ile dni przed wygaśnięciem powiadomić? (puste = wartość domyślna)"
    )

    def __str__(self):
        return f"{self.name} ({self.category})"


class RequirementRecord(models.Model):
    """Egzemplarz wymagania konkretnego pracownika, z datami ważności."""

    # TextChoices dla Admina, mapowane na Enum domenowy
    class StatusChoices(models.TextChoices):
        CURRENT = RequirementStatus.CURRENT.value, 'Ważny'
        EXPIRING = RequirementStatus.EXPIRING.value, 'Wygasa'
        EXPIRED = RequirementStatus.EXPIRED.value, 'Wygasły'
        IN_RENEWAL = RequirementStatus.IN_RENEWAL.value, 'W odnowieniu'

    worker = models.ForeignKey(Worker, on_delete=models.PROTECT, related_name='requirement_records')
    requirement_type = models.ForeignKey(RequirementType, on_delete=models.PROTECT, related_name='records')

    # Kopie (denormalizacja pod listy)
    worker_name = models.CharField(max_length=200, blank=True)
    national_id = models.CharField(max_length=20, blank=True)
    requirement = models.CharField(max_length=200, blank=True)
    category = models.CharField(max_length=100, blank=True)

    valid_from = models.DateField(null=True, blank=True)
    valid_to = models.DateField(null=True, blank=True)

    # Ręczne nadpisanie statusu (NULL = status liczony z dat)
    manual_status = models.CharField(max_length=20, choices=StatusChoices.choices, null=True, blank=True)
    # Status zmaterializowany przy zapisie
    status = models.CharField(max_length=20, choices=StatusChoices.choices, default=StatusChoices.CURRENT)

    lead_time_days = models.IntegerField(null=True, blank=True)
    notice_days = models.PositiveIntegerField(null=True, blank=True)
    link = models.URLField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.worker_name}: {self.requirement}"

    def refresh_derived(self, today=None):
        today = today or timezone.localdate()
        manual = RequirementStatus(self.manual_status) if self.manual_status else None
        self.status = StatusClassifier().resolve(manual, self.valid_to, today).value
        self.lead_time_days = lead_time_days(self.valid_to, today)

    def save(self, *args, today=None, derive=True, **kwargs):
        # Każdy zapis (także z Admina) przelicza status i lead time,
        # chyba że wyliczył je już use case (derive=False)
        if derive:
            self.refresh_derived(today)
        super().save(*args, **kwargs)
