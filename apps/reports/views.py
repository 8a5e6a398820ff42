# apps/reports/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET
from apps.core.exceptions import AccreditationError
from apps.core.http import error_response
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.domain.entities import ProjectStatus
from apps.projects.views import progress_to_dict
from apps.requirements.adapters.orm_repositories import DjangoRequirementRecordRepository
from apps.requirements.application.use_cases import ListRequirementsUseCase
from apps.requirements.views import record_to_dict
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from .domain.services import ReportService


@require_GET
@login_required
def dashboard_api_view(request):
    """
    API zwracające dane do wykresów (dokumenty, projekty, postęp ról).
    """
    service = ReportService()
    today = timezone.localdate()

    try:
        # 1. Dokumenty ze świeżym statusem
        records = ListRequirementsUseCase(
            repository=DjangoRequirementRecordRepository(),
            clock=lambda: today,
        ).execute()

        # 2. Projekty
        project_repo = DjangoProjectRepository()
        summaries = project_repo.list_summaries()

        # 3. Zadania projektów otwartych (bez anulowanych i zakończonych)
        task_repo = DjangoTaskRepository()
        open_tasks = []
        for s in summaries:
            if s.project.status in (ProjectStatus.PENDING, ProjectStatus.IN_PROGRESS):
                open_tasks.extend(task_repo.list_for_project(s.project.id))
    except AccreditationError as e:
        return error_response(e)

    progress = service.role_progress(open_tasks)

    return JsonResponse({
        'requirements': service.requirement_breakdown(records),
        'upcoming_expirations': [record_to_dict(r) for r in service.upcoming_expirations(records, today)],
        'projects': service.project_breakdown(summaries),
        'project_metrics': service.project_metrics(summaries),
        'role_progress': [progress_to_dict(p) for p in progress],
        'open_roles': [role.value for role in service.open_roles(progress)],
    })
