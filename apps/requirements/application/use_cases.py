# apps/requirements/application/use_cases.py
import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Mapping, Optional
from django.conf import settings
from django.utils import timezone
from apps.core.exceptions import NotFound, ValidationFailure
from apps.requirements.domain.entities import RequirementRecordEntity, RequirementStatus
from apps.requirements.domain.services import StatusClassifier
from apps.requirements.ports.repositories import IRequirementRecordRepository

logger = logging.getLogger(__name__)


def default_notice_days() -> int:
    return settings.ACCREDITATION.get('DEFAULT_NOTICE_DAYS', 60)


@dataclass
class CreateRequirementInput:
    worker_id: int
    requirement_type_id: int
    valid_from: Optional[date]
    valid_to: Optional[date]
    link: str = ""


@dataclass
class UpdateRequirementInput:
    record_id: int
    valid_from: Optional[date]
    valid_to: Optional[date]
    manual_status: Optional[RequirementStatus] = None  # None = wyczyść nadpisanie
    link: Optional[str] = None  # None = bez zmian


def _require_dates(valid_from, valid_to):
    missing = [name for name, value in (('valid_from', valid_from), ('valid_to', valid_to)) if value is None]
    if missing:
        raise ValidationFailure(f"Missing required dates: {', '.join(missing)}")


class ListRequirementsUseCase:
    def __init__(self, repository: IRequirementRecordRepository,
                 clock: Callable[[], date] = timezone.localdate):
        self.repository = repository
        self.clock = clock
        self.classifier = StatusClassifier()

    def execute(self, worker_name: Optional[str] = None, filters: Optional[Mapping[str, str]] = None,
                status: Optional[RequirementStatus] = None) -> List[RequirementRecordEntity]:
        today = self.clock()
        records = self.repository.list_all(worker_name=worker_name, filters=filters)

        # Status zapisany w bazie może być nieaktualny - liczymy od nowa
        records = [self.classifier.refresh(r, today) for r in records]

        # Filtr statusu dopiero po klasyfikacji
        if status is not None:
            records = [r for r in records if r.status == status]
        return records


class CreateRequirementUseCase:
    def __init__(self, repository: IRequirementRecordRepository,
                 clock: Callable[[], date] = timezone.localdate):
        self.repository = repository
        self.clock = clock
        self.classifier = StatusClassifier()

    def execute(self, input_dto: CreateRequirementInput) -> RequirementRecordEntity:
        _require_dates(input_dto.valid_from, input_dto.valid_to)

        worker = self.repository.find_worker(input_dto.worker_id)
        if worker is None:
            raise NotFound(f"Worker {input_dto.worker_id} not found")

        req_type = self.repository.find_requirement_type(input_dto.requirement_type_id)
        if req_type is None:
            raise NotFound(f"Requirement type {input_dto.requirement_type_id} not found")

        record = RequirementRecordEntity(
            id=None,
            worker_id=worker.id,
            requirement_type_id=req_type.id,
            worker_name=worker.full_name,
            national_id=worker.national_id,
            requirement=req_type.name,
            category=req_type.category,
            valid_from=input_dto.valid_from,
            valid_to=input_dto.valid_to,
            notice_days=req_type.notice_days if req_type.notice_days is not None else default_notice_days(),
            link=input_dto.link or "",
        )
        self.classifier.refresh(record, self.clock())

        saved = self.repository.save(record)
        logger.info("Utworzono wymaganie %s dla %s (status: %s)", saved.requirement, saved.worker_name, saved.status.value)
        return saved


class UpdateRequirementUseCase:
    def __init__(self, repository: IRequirementRecordRepository,
                 clock: Callable[[], date] = timezone.localdate):
        self.repository = repository
        self.clock = clock
        self.classifier = StatusClassifier()

    def execute(self, input_dto: UpdateRequirementInput) -> RequirementRecordEntity:
        _require_dates(input_dto.valid_from, input_dto.valid_to)

        record = self.repository.get_by_id(input_dto.record_id)
        if record is None:
            raise NotFound(f"Requirement record {input_dto.record_id} not found")

        record.valid_from = input_dto.valid_from
        record.valid_to = input_dto.valid_to
        # Zapisujemy dosłownie - także None, żeby klasyfikator przejął kontrolę
        record.manual_status = input_dto.manual_status
        if input_dto.link is not None:
            record.link = input_dto.link

        self.classifier.refresh(record, self.clock())
        return self.repository.save(record)


class DeleteRequirementUseCase:
    def __init__(self, repository: IRequirementRecordRepository):
        self.repository = repository

    def execute(self, record_id: int) -> None:
        if not self.repository.delete(record_id):
            raise NotFound(f"Requirement record {record_id} not found")
        logger.info("Usunięto rekord wymagania %s", record_id)


class RefreshRequirementStatusesUseCase:
    """Materializuje ponownie status rekordów bez ręcznego nadpisania."""

    def __init__(self, repository: IRequirementRecordRepository,
                 clock: Callable[[], date] = timezone.localdate):
        self.repository = repository
        self.clock = clock
        self.classifier = StatusClassifier()

    def execute(self) -> List[RequirementRecordEntity]:
        today = self.clock()
        changed = []

        for record in self.repository.list_all():
            if record.has_manual_status:
                continue
            old = (record.status, record.lead_time_days)
            self.classifier.refresh(record, today)
            if (record.status, record.lead_time_days) != old:
                changed.append(self.repository.save(record))

        return changed
