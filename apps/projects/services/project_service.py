# apps/projects/services/project_service.py
import logging
from dataclasses import dataclass
from typing import Dict, List
from django.db import transaction
from apps.core.exceptions import NotFound, ValidationFailure
from apps.projects.domain.entities import ProjectEntity, ProjectStatus, ProjectSummary, ResponsibleRole
from apps.projects.domain.progress import RoleProgress, progress_by_role
from apps.projects.ports.repositories import IProjectRepository
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


@dataclass
class ProjectDetail:
    project: ProjectEntity
    tasks: List[TaskEntity]
    progress: List[RoleProgress]

    @property
    def completed(self) -> int:
        return sum(1 for t in self.tasks if t.done)

    @property
    def total(self) -> int:
        return len(self.tasks)


class ProjectService:
    def __init__(self, project_repository: IProjectRepository, task_repository: ITaskRepository):
        self.projects = project_repository
        self.tasks = task_repository

    def _get_project(self, project_id: int, lock: bool = False) -> ProjectEntity:
        project = self.projects.get_by_id(project_id, lock=lock)
        if project is None:
            raise NotFound(f"Project {project_id} not found")
        return project

    def list_projects(self) -> List[ProjectSummary]:
        return self.projects.list_summaries()

    def get_detail(self, project_id: int) -> ProjectDetail:
        project = self._get_project(project_id)
        tasks = self.tasks.list_for_project(project_id)
        return ProjectDetail(project=project, tasks=tasks, progress=progress_by_role(tasks))

    def provision_tasks(self, project_id: int) -> List[TaskEntity]:
        """
        Tworzy zadania projektu z katalogu wymagań firmy.
        Jeśli projekt ma już zadania - tylko odświeża nazwiska odpowiedzialnych.
        """
        with transaction.atomic():
            project = self._get_project(project_id, lock=True)
            existing = self.tasks.list_for_project(project_id)

            if existing:
                changed = self.tasks.update_responsible_names(project_id, project.responsibles)
                logger.info("Projekt %s ma już %d zadań, zaktualizowano %d", project.code, len(existing), changed)
                return self.tasks.list_for_project(project_id)

            catalogue = self.projects.list_company_requirements(project.company)
            if not catalogue:
                logger.warning("Brak katalogu wymagań dla firmy '%s' (projekt %s)", project.company, project.code)
                return []

            new_tasks = []
            for row in catalogue:
                role = ResponsibleRole(row['role'])
                new_tasks.append(TaskEntity(
                    id=None,
                    project_id=project_id,
                    role=role,
                    requirement=row['requirement'],
                    category=row['category'],
                    notes=row.get('notes') or "",
                    order=row.get('order') or 0,
                    responsible_name=project.responsibles.get(role, ""),
                ))

            self.tasks.bulk_create(new_tasks)
            logger.info("Projekt %s: utworzono %d zadań", project.code, len(new_tasks))

        return self.tasks.list_for_project(project_id)

    def assign_responsibles(self, project_id: int, responsibles: Dict[str, str]) -> ProjectEntity:
        """Zapisuje osoby odpowiedzialne; projekt oczekujący przechodzi w toku."""
        try:
            assignment = {ResponsibleRole(role): (name or "").strip() for role, name in responsibles.items()}
        except ValueError as e:
            raise ValidationFailure(f"Unknown responsible role: {e}") from e

        with transaction.atomic():
            project = self._get_project(project_id, lock=True)

            merged = dict(project.responsibles)
            merged.update(assignment)
            self.projects.save_responsibles(project_id, merged)
            self.tasks.update_responsible_names(project_id, assignment)

            if project.status == ProjectStatus.PENDING:
                self.projects.update_status(project_id, ProjectStatus.IN_PROGRESS)

        return self._get_project(project_id)
