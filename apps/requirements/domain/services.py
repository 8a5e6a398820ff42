# apps/requirements/domain/services.py
from datetime import date, timedelta
from typing import Optional

from apps.requirements.domain.entities import RequirementStatus, RequirementRecordEntity

EXPIRING_WINDOW_DAYS = 30


class StatusClassifier:
    """
    Wylicza status dokumentu z daty wygaśnięcia.
    Funkcja czysta: "dzisiaj" zawsze przychodzi z zewnątrz.
    """

    def __init__(self, window_days: int = EXPIRING_WINDOW_DAYS):
        self.window_days = window_days

    def classify(self, expiration_date: Optional[date], today: date) -> RequirementStatus:
        # Brak daty wygaśnięcia = dokument bezterminowy
        if expiration_date is None:
            return RequirementStatus.CURRENT

        if expiration_date < today:
            return RequirementStatus.EXPIRED
        if expiration_date <= today + timedelta(days=self.window_days):
            return RequirementStatus.EXPIRING
        return RequirementStatus.CURRENT

    def resolve(self, manual_status: Optional[RequirementStatus], expiration_date: Optional[date],
                today: date) -> RequirementStatus:
        """Status ręczny ma pierwszeństwo; klasyfikator nie jest wtedy wywoływany."""
        if manual_status is not None:
            return RequirementStatus(manual_status)
        return self.classify(expiration_date, today)

    def refresh(self, record: RequirementRecordEntity, today: date) -> RequirementRecordEntity:
        """Ustawia status i lead time na encji (ścieżki zapisu i odczytu)."""
        record.status = self.resolve(record.manual_status, record.valid_to, today)
        record.lead_time_days = lead_time_days(record.valid_to, today)
        return record


def lead_time_days(expiration_date: Optional[date], today: date) -> Optional[int]:
    if expiration_date is None:
        return None
    return (expiration_date - today).days
