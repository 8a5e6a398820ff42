# apps/requirements/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_GET
from apps.core.exceptions import AccreditationError, ValidationFailure
from apps.core.http import error_response, form_errors
from .adapters.orm_repositories import DjangoRequirementRecordRepository
from .application.use_cases import (
    ListRequirementsUseCase, CreateRequirementUseCase, CreateRequirementInput,
    UpdateRequirementUseCase, UpdateRequirementInput, DeleteRequirementUseCase,
)
from .domain.entities import RequirementStatus
from .forms import RequirementCreateForm, RequirementUpdateForm


def record_to_dict(record):
    return {
        'id': record.id,
        'worker_id': record.worker_id,
        'worker_name': record.worker_name,
        'national_id': record.national_id,
        'requirement_type_id': record.requirement_type_id,
        'requirement': record.requirement,
        'category': record.category,
        'valid_from': record.valid_from.isoformat() if record.valid_from else None,
        'valid_to': record.valid_to.isoformat() if record.valid_to else None,
        'manual_status': record.manual_status.value if record.manual_status else None,
        'status': record.status.value,
        'lead_time_days': record.lead_time_days,
        'notice_days': record.notice_days,
        'link': record.link,
    }


def parse_status(raw):
    if not raw:
        return None
    try:
        return RequirementStatus(raw)
    except ValueError:
        raise ValidationFailure(f"Unknown status '{raw}'") from None


@require_GET
@login_required
def requirement_list_view(request):
    """Lista dokumentów pracowników ze świeżo wyliczonym statusem."""
    use_case = ListRequirementsUseCase(repository=DjangoRequirementRecordRepository())

    try:
        records = use_case.execute(
            filters=request.GET,
            status=parse_status(request.GET.get('status')),
        )
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse({'results': [record_to_dict(r) for r in records]})


@require_http_methods(["POST"])
@login_required
def requirement_create_view(request):
    form = RequirementCreateForm(request.POST)
    if not form.is_valid():
        return error_response(ValidationFailure(form_errors(form)))

    data = form.cleaned_data
    input_dto = CreateRequirementInput(
        worker_id=data['worker_id'],
        requirement_type_id=data['requirement_type_id'],
        valid_from=data['valid_from'],
        valid_to=data['valid_to'],
        link=data.get('link') or "",
    )

    use_case = CreateRequirementUseCase(repository=DjangoRequirementRecordRepository())
    try:
        record = use_case.execute(input_dto)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse(record_to_dict(record), status=201)


@require_http_methods(["POST"])
@login_required
def requirement_edit_view(request, pk):
    form = RequirementUpdateForm(request.POST)
    if not form.is_valid():
        return error_response(ValidationFailure(form_errors(form)))

    data = form.cleaned_data
    manual = data.get('manual_status')
    input_dto = UpdateRequirementInput(
        record_id=pk,
        valid_from=data['valid_from'],
        valid_to=data['valid_to'],
        manual_status=RequirementStatus(manual) if manual else None,
        # Link zmieniamy tylko, jeśli przyszedł w żądaniu
        link=data.get('link', '') if 'link' in request.POST else None,
    )

    use_case = UpdateRequirementUseCase(repository=DjangoRequirementRecordRepository())
    try:
        record = use_case.execute(input_dto)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse(record_to_dict(record))


@require_http_methods(["POST", "DELETE"])
@login_required
def requirement_delete_view(request, pk):
    # Usuwanie tylko dla administratorów
    if not request.user.is_staff:
        return JsonResponse({'error': 'Only administrators can delete records'}, status=403)

    use_case = DeleteRequirementUseCase(repository=DjangoRequirementRecordRepository())
    try:
        use_case.execute(pk)
    except AccreditationError as e:
        return error_response(e)

    return JsonResponse({'deleted': pk})
