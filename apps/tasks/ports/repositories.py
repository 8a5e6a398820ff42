# apps/tasks/ports/repositories.py
from abc import ABC, abstractmethod
from typing import Dict, List
from apps.projects.domain.entities import ResponsibleRole
from apps.tasks.domain.entities import TaskEntity


class ITaskRepository(ABC):
    @abstractmethod
    def list_for_project(self, project_id: int) -> List[TaskEntity]:
        """Wszystkie zadania projektu (pełny zbiór, bez filtrów)."""
        pass

    @abstractmethod
    def save(self, task: TaskEntity) -> TaskEntity:
        """Zapisuje pojedyncze zadanie i zwraca zaktualizowaną encję."""
        pass

    @abstractmethod
    def bulk_create(self, tasks: List[TaskEntity]) -> List[TaskEntity]:
        pass

    @abstractmethod
    def update_responsible_names(self, project_id: int, names: Dict[ResponsibleRole, str]) -> int:
        """Przepisuje nazwiska odpowiedzialnych na zadania danej roli. Zwraca liczbę zmian."""
        pass
