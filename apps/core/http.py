# apps/core/http.py
from django.http import JsonResponse

from .exceptions import AccreditationError, NotFound, ValidationFailure, StoreFailure

ERROR_STATUS = {
    NotFound: 404,
    ValidationFailure: 400,
    StoreFailure: 503,
}


def error_response(error: AccreditationError) -> JsonResponse:
    """Zamienia błąd domenowy na odpowiedź JSON (komunikat blokujący w UI)."""
    status = 500
    for exc_type, code in ERROR_STATUS.items():
        if isinstance(error, exc_type):
            status = code
            break
    return JsonResponse({'error': str(error)}, status=status)


def form_errors(form) -> str:
    # "pole: komunikat; pole: komunikat"
    return "; ".join(
        f"{field}: {' '.join(str(m) for m in messages)}"
        for field, messages in form.errors.items()
    )
