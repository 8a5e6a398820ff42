# apps/requirements/adapters/orm_repositories.py
import logging
from typing import List, Mapping, Optional
from django.db import DatabaseError
from apps.core.exceptions import StoreFailure, ValidationFailure
from apps.core.http import form_errors
from apps.requirements.domain.entities import (
    RequirementRecordEntity, RequirementStatus, WorkerRef, RequirementTypeRef,
)
from apps.requirements.filters import RequirementRecordFilter
from apps.requirements.ports.repositories import IRequirementRecordRepository
from apps.requirements.models import (
    RequirementRecord as RecordModel, Worker, RequirementType,
)

logger = logging.getLogger(__name__)


class DjangoRequirementRecordRepository(IRequirementRecordRepository):
    def to_entity(self, model: RecordModel) -> RequirementRecordEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return RequirementRecordEntity(
            id=model.id,
            worker_id=model.worker_id,
            requirement_type_id=model.requirement_type_id,
            worker_name=model.worker_name,
            national_id=model.national_id,
            requirement=model.requirement,
            category=model.category,
            valid_from=model.valid_from,
            valid_to=model.valid_to,
            manual_status=RequirementStatus(model.manual_status) if model.manual_status else None,
            status=RequirementStatus(model.status),
            lead_time_days=model.lead_time_days,
            notice_days=model.notice_days,
            link=model.link,
            created_at=model.created_at,
        )

    def list_all(self, worker_name: Optional[str] = None,
                 filters: Optional[Mapping[str, str]] = None) -> List[RequirementRecordEntity]:
        qs = RecordModel.objects.all().order_by('-created_at', '-id')
        if worker_name:
            qs = qs.filter(worker_name__icontains=worker_name)
        try:
            if filters:
                f = RequirementRecordFilter(filters, queryset=qs)
                if not f.is_valid():
                    raise ValidationFailure(form_errors(f.form))
                qs = f.qs
            return [self.to_entity(r) for r in qs]
        except DatabaseError as e:
            logger.error("Odczyt rekordów wymagań nie powiódł się: %s", e)
            raise StoreFailure(f"Could not list requirement records: {e}") from e

    def get_by_id(self, record_id: int) -> Optional[RequirementRecordEntity]:
        try:
            return self.to_entity(RecordModel.objects.get(id=record_id))
        except RecordModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreFailure(f"Could not load requirement record {record_id}: {e}") from e

    def save(self, record: RequirementRecordEntity) -> RequirementRecordEntity:
        data = {
            'worker_id': record.worker_id,
            'requirement_type_id': record.requirement_type_id,
            'worker_name': record.worker_name,
            'national_id': record.national_id,
            'requirement': record.requirement,
            'category': record.category,
            'valid_from': record.valid_from,
            'valid_to': record.valid_to,
            'manual_status': record.manual_status.value if record.manual_status else None,
            'status': record.status.value,
            'lead_time_days': record.lead_time_days,
            'notice_days': record.notice_days,
            'link': record.link,
        }

        try:
            if record.id:
                obj = RecordModel.objects.get(id=record.id)
                for field, value in data.items():
                    setattr(obj, field, value)
            else:
                obj = RecordModel(**data)
            # Status i lead time wyliczył już use case (z wstrzykniętym "dzisiaj")
            obj.save(derive=False)
        except DatabaseError as e:
            logger.error("Zapis rekordu wymagania nie powiódł się: %s", e)
            raise StoreFailure(f"Could not save requirement record: {e}") from e

        return self.to_entity(obj)

    def delete(self, record_id: int) -> bool:
        try:
            deleted, _ = RecordModel.objects.filter(id=record_id).delete()
        except DatabaseError as e:
            raise StoreFailure(f"Could not delete requirement record {record_id}: {e}") from e
        return deleted > 0

    def find_worker(self, worker_id: int) -> Optional[WorkerRef]:
        try:
            w = Worker.objects.get(id=worker_id)
        except Worker.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreFailure(f"Could not load worker {worker_id}: {e}") from e
        return WorkerRef(id=w.id, full_name=w.full_name, national_id=w.national_id)

    def find_requirement_type(self, type_id: int) -> Optional[RequirementTypeRef]:
        try:
            t = RequirementType.objects.get(id=type_id)
        except RequirementType.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreFailure(f"Could not load requirement type {type_id}: {e}") from e
        return RequirementTypeRef(id=t.id, name=t.name, category=t.category, notice_days=t.notice_days)
