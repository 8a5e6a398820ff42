# apps/tasks/views.py
from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods, require_GET
from apps.core.exceptions import AccreditationError, ValidationFailure
from apps.core.http import error_response
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.models import Project
from .adapters.orm_repositories import DjangoTaskRepository
from .application.use_cases import SetTaskDoneUseCase, SetTaskDoneInput
from .filters import TaskFilter
from .models import Task

TRUE_VALUES = {'true', '1', 'on', 'yes'}
FALSE_VALUES = {'false', '0', 'off', 'no'}


def task_to_dict(task):
    return {
        'id': task.id,
        'project_id': task.project_id,
        'role': task.role.value,
        'responsible_name': task.responsible_name,
        'worker_name': task.worker_name,
        'requirement': task.requirement,
        'category': task.category,
        'notes': task.notes,
        'order': task.order,
        'done': task.done,
        'completed_on': task.completed_on.isoformat() if task.completed_on else None,
    }


def parse_done(raw):
    value = (raw or '').strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValidationFailure("Parameter 'done' must be true or false")


@require_GET
@login_required
def project_task_list_view(request, project_id):
    project = get_object_or_404(Project, pk=project_id)

    qs = Task.objects.filter(project=project).order_by('order', 'id')
    f = TaskFilter(request.GET, queryset=qs)

    repo = DjangoTaskRepository()
    return JsonResponse({'results': [task_to_dict(repo.to_entity(t)) for t in f.qs]})


@require_http_methods(["POST"])
@login_required
def task_set_done_view(request, project_id, pk):
    """Zaznacza/odznacza zadanie i zwraca wynik kaskady dla UI."""
    try:
        done = parse_done(request.POST.get('done'))

        # Złożenie Use Case (Manual Dependency Injection)
        use_case = SetTaskDoneUseCase(
            task_repository=DjangoTaskRepository(),
            project_repository=DjangoProjectRepository(),
        )
        result = use_case.execute(SetTaskDoneInput(project_id=project_id, task_id=pk, done=done))

    except AccreditationError as e:
        return error_response(e)

    payload = {
        'task': task_to_dict(result.task),
        'all_completed': result.all_completed,
        'project_status_changed': result.project_status_changed.value if result.project_status_changed else None,
        'completed': result.completed,
        'total': result.total,
    }

    # Jednorazowy komunikat tylko przy ukończeniu całego projektu
    if result.should_notify:
        payload['notification'] = {
            'kind': 'project_completed',
            'auto_dismiss_ms': settings.ACCREDITATION.get('COMPLETION_NOTICE_MS', 3000),
        }

    return JsonResponse(payload)
