# apps/core/exceptions.py


class AccreditationError(Exception):
    """Bazowy błąd silnika akredytacji."""


class NotFound(AccreditationError, LookupError):
    """Pracownik, typ wymagania, zadanie lub projekt nie istnieje."""


class ValidationFailure(AccreditationError, ValueError):
    """Brak wymaganych danych (np. dat) przy tworzeniu/edycji."""


class StoreFailure(AccreditationError):
    """Zapis lub odczyt z bazy się nie powiódł (w tym utrata połączenia)."""
