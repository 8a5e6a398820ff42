# apps/tasks/domain/entities.py
from dataclasses import dataclass
from datetime import date
from typing import Optional
from apps.projects.domain.entities import ProjectStatus, ResponsibleRole


@dataclass
class TaskEntity:
    id: Optional[int]  # ID może być None przed zapisem
    project_id: int
    role: ResponsibleRole
    requirement: str  # Etykieta wymagania (bez klucza obcego do rekordu pracownika)
    category: str = ""

    # Kto odpowiada / kogo dotyczy (opcjonalnie)
    responsible_name: str = ""
    worker_name: str = ""
    notes: str = ""
    order: int = 0

    done: bool = False
    completed_on: Optional[date] = None  # Ustawione wtedy i tylko wtedy, gdy done

    def set_done(self, done: bool, today: date) -> None:
        self.done = done
        self.completed_on = today if done else None


@dataclass
class CompletionResult:
    task: TaskEntity
    all_completed: bool
    project_status_changed: Optional[ProjectStatus] = None

    # Stan projektu po zmianie
    completed: int = 0
    total: int = 0

    @property
    def should_notify(self) -> bool:
        """Jednorazowy komunikat "projekt ukończony" zamiast cichej zmiany badge'a."""
        return self.all_completed
