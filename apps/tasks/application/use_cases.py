# apps/tasks/application/use_cases.py
from dataclasses import dataclass
from datetime import date
from typing import Callable
from django.db import transaction
from django.utils import timezone
from apps.projects.ports.repositories import IProjectRepository
from apps.tasks.domain.entities import CompletionResult
from apps.tasks.domain.services import TaskCompletionService
from apps.tasks.ports.repositories import ITaskRepository


@dataclass
class SetTaskDoneInput:
    project_id: int
    task_id: int
    done: bool


class SetTaskDoneUseCase:
    def __init__(self, task_repository: ITaskRepository, project_repository: IProjectRepository,
                 clock: Callable[[], date] = timezone.localdate):
        self.service = TaskCompletionService(task_repository, project_repository)
        self.clock = clock

    def execute(self, input_dto: SetTaskDoneInput) -> CompletionResult:
        # Jedna transakcja: zapis zadania i statusu projektu razem albo wcale
        with transaction.atomic():
            return self.service.set_done(
                input_dto.project_id,
                input_dto.task_id,
                input_dto.done,
                today=self.clock(),
            )
