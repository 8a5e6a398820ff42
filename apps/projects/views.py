# apps/projects/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_GET
from apps.core.exceptions import AccreditationError
from apps.core.http import error_response
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from apps.tasks.views import task_to_dict
from .adapters.orm_repositories import DjangoProjectRepository
from .domain.entities import ResponsibleRole
from .services.project_service import ProjectService


def _service():
    return ProjectService(DjangoProjectRepository(), DjangoTaskRepository())


def project_to_dict(project):
    return {
        'id': project.id,
        'code': project.code,
        'name': project.name,
        'client': project.client,
        'company': project.company,
        'status': project.status.value,
        'responsibles': {role.value: name for role, name in project.responsibles.items()},
        'finalized_on': project.finalized_on.isoformat() if project.finalized_on else None,
    }


def progress_to_dict(item):
    return {
        'role': item.role.value,
        'completed': item.completed,
        'total': item.total,
        'percent': item.percent,
    }


@require_GET
@login_required
def project_list_view(request):
    """Lista projektów z postępem zadań."""
    try:
        summaries = _service().list_projects()
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse({'results': [
        dict(project_to_dict(s.project), completed=s.completed, total=s.total)
        for s in summaries
    ]})


@require_GET
@login_required
def project_detail_view(request, pk):
    """Dashboard konkretnego projektu."""
    try:
        detail = _service().get_detail(pk)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse(dict(
        project_to_dict(detail.project),
        completed=detail.completed,
        total=detail.total,
        tasks=[task_to_dict(t) for t in detail.tasks],
        progress_by_role=[progress_to_dict(p) for p in detail.progress],
    ))


@require_http_methods(["POST"])
@login_required
def project_responsibles_view(request, pk):
    # Pola formularza nazwane jak role: JPRO=..., EPR=...
    responsibles = {role.value: request.POST[role.value] for role in ResponsibleRole if role.value in request.POST}

    try:
        project = _service().assign_responsibles(pk, responsibles)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse(project_to_dict(project))


@require_http_methods(["POST"])
@login_required
def project_provision_view(request, pk):
    try:
        tasks = _service().provision_tasks(pk)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse({'results': [task_to_dict(t) for t in tasks]})
