# apps/tasks/adapters/orm_repositories.py
import logging
from typing import Dict, List
from django.db import DatabaseError
from apps.core.exceptions import NotFound, StoreFailure
from apps.projects.domain.entities import ResponsibleRole
from apps.tasks.domain.entities import TaskEntity
from apps.tasks.ports.repositories import ITaskRepository
from apps.tasks.models import Task as TaskModel

logger = logging.getLogger(__name__)


class DjangoTaskRepository(ITaskRepository):
    def to_entity(self, model: TaskModel) -> TaskEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return TaskEntity(
            id=model.id,
            project_id=model.project_id,
            role=ResponsibleRole(model.role),
            requirement=model.requirement,
            category=model.category,
            responsible_name=model.responsible_name,
            worker_name=model.worker_name,
            notes=model.notes,
            order=model.order,
            done=model.done,
            completed_on=model.completed_on,
        )

    def _to_data(self, task: TaskEntity) -> dict:
        return {
            'project_id': task.project_id,
            'role': ResponsibleRole(task.role).value,
            'requirement': task.requirement,
            'category': task.category,
            'responsible_name': task.responsible_name,
            'worker_name': task.worker_name,
            'notes': task.notes,
            'order': task.order,
            'done': task.done,
            'completed_on': task.completed_on,
        }

    def list_for_project(self, project_id: int) -> List[TaskEntity]:
        try:
            return [self.to_entity(t) for t in TaskModel.objects.filter(project_id=project_id).order_by('order', 'id')]
        except DatabaseError as e:
            raise StoreFailure(f"Could not load tasks of project {project_id}: {e}") from e

    def save(self, task: TaskEntity) -> TaskEntity:
        data = self._to_data(task)

        try:
            if task.id:
                # Aktualizacja istniejącego
                updated = TaskModel.objects.filter(id=task.id, project_id=task.project_id).update(**data)
                if not updated:
                    raise NotFound(f"Task {task.id} not found in project {task.project_id}")
                obj = TaskModel.objects.get(id=task.id)
            else:
                obj = TaskModel.objects.create(**data)
        except DatabaseError as e:
            logger.error("Zapis zadania %s nie powiódł się: %s", task.id, e)
            raise StoreFailure(f"Could not save task {task.id}: {e}") from e

        return self.to_entity(obj)

    def bulk_create(self, tasks: List[TaskEntity]) -> List[TaskEntity]:
        objs = [TaskModel(**self._to_data(t)) for t in tasks]
        try:
            created = TaskModel.objects.bulk_create(objs)
        except DatabaseError as e:
            logger.error("Tworzenie zadań nie powiodło się: %s", e)
            raise StoreFailure(f"Could not create tasks: {e}") from e
        return [self.to_entity(t) for t in created]

    def update_responsible_names(self, project_id: int, names: Dict[ResponsibleRole, str]) -> int:
        changed = 0
        try:
            for role, name in names.items():
                changed += TaskModel.objects.filter(
                    project_id=project_id,
                    role=ResponsibleRole(role).value
                ).exclude(responsible_name=name or "").update(responsible_name=name or "")
        except DatabaseError as e:
            raise StoreFailure(f"Could not update responsibles of project {project_id}: {e}") from e
        return changed
