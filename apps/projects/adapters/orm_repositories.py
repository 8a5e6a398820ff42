# apps/projects/adapters/orm_repositories.py
import logging
from datetime import date
from typing import Dict, List, Optional
from django.db import DatabaseError
from django.db.models import Count, Q
from django.utils import timezone
from apps.core.exceptions import NotFound, StoreFailure
from apps.projects.domain.entities import ProjectEntity, ProjectStatus, ProjectSummary, ResponsibleRole
from apps.projects.ports.repositories import IProjectRepository
from apps.projects.models import Project as ProjectModel, CompanyRequirement

logger = logging.getLogger(__name__)


class DjangoProjectRepository(IProjectRepository):
    def to_entity(self, model: ProjectModel) -> ProjectEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        responsibles = {}
        for role, name in (model.responsibles or {}).items():
            # Nieznane role (np. stare dane) pomijamy
            if role in ResponsibleRole._value2member_map_:
                responsibles[ResponsibleRole(role)] = name

        return ProjectEntity(
            id=model.id,
            code=model.code,
            name=model.name,
            client=model.client,
            company=model.company,
            status=ProjectStatus(model.status),
            responsibles=responsibles,
            created_on=timezone.localdate(model.created_at) if model.created_at else None,
            finalized_on=model.finalized_on,
        )

    def get_by_id(self, project_id: int, lock: bool = False) -> Optional[ProjectEntity]:
        qs = ProjectModel.objects.all()
        if lock:
            qs = qs.select_for_update()
        try:
            return self.to_entity(qs.get(id=project_id))
        except ProjectModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise StoreFailure(f"Could not load project {project_id}: {e}") from e

    def update_status(self, project_id: int, status: ProjectStatus,
                      finalized_on: Optional[date] = None) -> None:
        try:
            updated = ProjectModel.objects.filter(id=project_id).update(
                status=ProjectStatus(status).value,
                finalized_on=finalized_on,
            )
        except DatabaseError as e:
            logger.error("Zapis statusu projektu %s nie powiódł się: %s", project_id, e)
            raise StoreFailure(f"Could not update status of project {project_id}: {e}") from e
        if not updated:
            raise NotFound(f"Project {project_id} not found")

    def save_responsibles(self, project_id: int, responsibles: Dict[ResponsibleRole, str]) -> None:
        data = {ResponsibleRole(role).value: name for role, name in responsibles.items()}
        try:
            updated = ProjectModel.objects.filter(id=project_id).update(responsibles=data)
        except DatabaseError as e:
            raise StoreFailure(f"Could not update responsibles of project {project_id}: {e}") from e
        if not updated:
            raise NotFound(f"Project {project_id} not found")

    def list_summaries(self) -> List[ProjectSummary]:
        qs = ProjectModel.objects.annotate(
            total=Count('tasks'),
            completed=Count('tasks', filter=Q(tasks__done=True))
        ).order_by('-created_at', '-id')

        try:
            return [ProjectSummary(self.to_entity(p), completed=p.completed, total=p.total) for p in qs]
        except DatabaseError as e:
            raise StoreFailure(f"Could not list projects: {e}") from e

    def list_company_requirements(self, company: str) -> List[dict]:
        try:
            return list(
                CompanyRequirement.objects.filter(company=company)
                .order_by('order', 'id')
                .values('requirement', 'category', 'role', 'notes', 'order', 'mandatory')
            )
        except DatabaseError as e:
            raise StoreFailure(f"Could not load requirements of company {company}: {e}") from e
