# apps/projects/ports/repositories.py
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional
from apps.projects.domain.entities import ProjectEntity, ProjectStatus, ProjectSummary, ResponsibleRole


class IProjectRepository(ABC):
    @abstractmethod
    def get_by_id(self, project_id: int, lock: bool = False) -> Optional[ProjectEntity]:
        """lock=True blokuje wiersz projektu do końca bieżącej transakcji."""
        pass

    @abstractmethod
    def update_status(self, project_id: int, status: ProjectStatus,
                      finalized_on: Optional[date] = None) -> None:
        pass

    @abstractmethod
    def save_responsibles(self, project_id: int, responsibles: Dict[ResponsibleRole, str]) -> None:
        pass

    @abstractmethod
    def list_summaries(self) -> List[ProjectSummary]:
        """Projekty z licznikami zadań, od najnowszych."""
        pass

    @abstractmethod
    def list_company_requirements(self, company: str) -> List[dict]:
        """Katalog wymagań firmy (wiersze posortowane po 'order')."""
        pass
