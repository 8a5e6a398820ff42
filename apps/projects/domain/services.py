# apps/projects/domain/services.py
from dataclasses import dataclass
from typing import Optional
from apps.projects.domain.entities import ProjectStatus


@dataclass
class ProjectRecalculation:
    all_completed: bool
    new_status: Optional[ProjectStatus] = None  # None = brak zapisu statusu projektu

    @property
    def status_changed(self) -> bool:
        return self.new_status is not None


class ProjectStatusService:
    def recalculate(self, current_status: ProjectStatus, completed_before: int,
                    total: int, done: bool) -> ProjectRecalculation:
        """
        Decyduje o kaskadzie po zmianie jednego zadania.

        completed_before i total to migawka sprzed zapisu zadania.
        Kolejność reguł:
        1. done i brakowało dokładnie jednego -> FINALIZED
        2. po zmianie nie wszystko zrobione, a projekt był FINALIZED -> IN_PROGRESS
        3. w pozostałych przypadkach status projektu się nie zmienia
        """
        # Anulowany projekt jest terminalny - kaskada go nie rusza
        if current_status == ProjectStatus.CANCELLED:
            return ProjectRecalculation(all_completed=False)

        # Projekt bez zadań nigdy nie jest finalizowany automatycznie
        if total <= 0:
            return ProjectRecalculation(all_completed=False)

        # 1. Ostatnie brakujące zadanie
        if done and completed_before == total - 1:
            if current_status == ProjectStatus.FINALIZED:
                # Już zapisany jako zakończony - nic do zapisania
                return ProjectRecalculation(all_completed=True)
            return ProjectRecalculation(all_completed=True, new_status=ProjectStatus.FINALIZED)

        # 2. Cofnięcie zakończonego projektu
        completed_after = completed_before + (1 if done else -1)
        if completed_after < total and current_status == ProjectStatus.FINALIZED:
            return ProjectRecalculation(all_completed=False, new_status=ProjectStatus.IN_PROGRESS)

        # 3. Bez przekroczenia granicy
        return ProjectRecalculation(all_completed=False)
