# apps/requirements/ports/repositories.py
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional
from apps.requirements.domain.entities import RequirementRecordEntity, WorkerRef, RequirementTypeRef


class IRequirementRecordRepository(ABC):
    @abstractmethod
    def list_all(self, worker_name: Optional[str] = None,
                 filters: Optional[Mapping[str, str]] = None) -> List[RequirementRecordEntity]:
        """
        Wszystkie rekordy, od najnowszych.
        filters: parametry zapytania (worker, category, requirement_type);
        niepoprawne wartości kończą się ValidationFailure.
        """
        pass

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[RequirementRecordEntity]:
        pass

    @abstractmethod
    def save(self, record: RequirementRecordEntity) -> RequirementRecordEntity:
        """Tworzy lub aktualizuje rekord i zwraca encję (z ID)."""
        pass

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        """Zwraca False, jeśli rekordu nie było."""
        pass

    @abstractmethod
    def find_worker(self, worker_id: int) -> Optional[WorkerRef]:
        pass

    @abstractmethod
    def find_requirement_type(self, type_id: int) -> Optional[RequirementTypeRef]:
        pass
