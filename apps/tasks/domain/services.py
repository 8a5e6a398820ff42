# apps/tasks/domain/services.py
import logging
from datetime import date
from apps.core.exceptions import NotFound
from apps.projects.domain.entities import ProjectStatus
from apps.projects.domain.services import ProjectStatusService
from apps.projects.ports.repositories import IProjectRepository
from apps.tasks.domain.entities import CompletionResult
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


class TaskCompletionService:
    def __init__(self, task_repository: ITaskRepository, project_repository: IProjectRepository,
                 status_service: ProjectStatusService = None):
        self.task_repository = task_repository
        self.project_repository = project_repository
        self.status_service = status_service or ProjectStatusService()

    def set_done(self, project_id: int, task_id: int, done: bool, today: date) -> CompletionResult:
        """
        Ustawia flagę done zadania i uruchamia kaskadę statusu projektu.
        Kroki muszą iść po kolei: migawka -> zapis zadania -> zapis projektu.
        """

        # 1. Projekt (z blokadą wiersza) i pełny zbiór jego zadań
        project = self.project_repository.get_by_id(project_id, lock=True)
        if project is None:
            raise NotFound(f"Project {project_id} not found")

        tasks = self.task_repository.list_for_project(project_id)
        task = next((t for t in tasks if t.id == task_id), None)
        if task is None:
            raise NotFound(f"Task {task_id} not found in project {project_id}")

        # 2. Migawka PRZED zmianą - potrzebna do wykrycia "ostatniego" zadania
        completed_before = sum(1 for t in tasks if t.done)
        total = len(tasks)

        # Ta sama wartość -> brak przejścia, nic nie zapisujemy
        if task.done == done:
            return CompletionResult(task=task, all_completed=False, completed=completed_before, total=total)

        # 3-4. Zmiana i zapis pojedynczego zadania
        task.set_done(done, today)
        task = self.task_repository.save(task)

        # 5. Kaskada (względem ostatnio zapisanego statusu projektu)
        previous_status = project.status
        recalculation = self.status_service.recalculate(previous_status, completed_before, total, done)
        if recalculation.new_status is not None:
            finalized_on = today if recalculation.new_status == ProjectStatus.FINALIZED else None
            self.project_repository.update_status(project_id, recalculation.new_status, finalized_on=finalized_on)
            logger.info(
                "Projekt %s: %s -> %s (zadanie %s)",
                project.code, previous_status.value, recalculation.new_status.value, task_id
            )

        completed_after = completed_before + (1 if done else -1)
        return CompletionResult(
            task=task,
            all_completed=recalculation.all_completed,
            project_status_changed=recalculation.new_status,
            completed=completed_after,
            total=total,
        )
