# apps/projects/domain/entities.py
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Optional


class ProjectStatus(str, Enum):
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    FINALIZED = 'finalized'
    CANCELLED = 'cancelled'  # Terminalny, ustawiany tylko ręcznie


class ResponsibleRole(str, Enum):
    """Zamknięty zbiór ról odpowiedzialnych za zadania."""
    JPRO = 'JPRO'    # Kierownik projektu
    EPR = 'EPR'      # Specjalista BHP
    RRHH = 'RRHH'    # Kadry
    LEGAL = 'LEGAL'  # Dział prawny


@dataclass
class ProjectEntity:
    id: Optional[int]
    code: str
    name: str
    client: str = ""
    company: str = ""
    status: ProjectStatus = ProjectStatus.PENDING

    # {rola: imię i nazwisko osoby odpowiedzialnej}
    responsibles: Dict[ResponsibleRole, str] = field(default_factory=dict)

    created_on: Optional[date] = None
    finalized_on: Optional[date] = None

    def is_finalized(self) -> bool:
        return self.status == ProjectStatus.FINALIZED

    def is_terminal(self) -> bool:
        return self.status == ProjectStatus.CANCELLED


@dataclass
class ProjectSummary:
    project: ProjectEntity
    completed: int
    total: int
