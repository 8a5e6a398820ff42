# apps/requirements/domain/entities.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from enum import Enum


class RequirementStatus(str, Enum):
    CURRENT = 'current'
    EXPIRING = 'expiring'
    EXPIRED = 'expired'
    IN_RENEWAL = 'in_renewal'  # Tylko ręcznie, nigdy nie wyliczany z dat


@dataclass
class WorkerRef:
    id: int
    full_name: str
    national_id: str = ""


@dataclass
class RequirementTypeRef:
    id: int
    name: str
    category: str
    notice_days: Optional[int] = None


@dataclass
class RequirementRecordEntity:
    id: Optional[int]  # None przed zapisem
    worker_id: int
    requirement_type_id: int

    # Kopie z pracownika / typu wymagania (do list i raportów)
    worker_name: str = ""
    national_id: str = ""
    requirement: str = ""
    category: str = ""

    valid_from: Optional[date] = None
    valid_to: Optional[date] = None

    manual_status: Optional[RequirementStatus] = None
    status: RequirementStatus = RequirementStatus.CURRENT

    lead_time_days: Optional[int] = None  # valid_to - dzisiaj
    notice_days: Optional[int] = None
    link: str = ""

    created_at: Optional[datetime] = None

    @property
    def has_manual_status(self) -> bool:
        return self.manual_status is not None
