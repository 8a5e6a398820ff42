"""
Wspólne fixtures dla testów.

Testy logiki domenowej nie potrzebują bazy; testy adapterów, use case'ów
i widoków używają @pytest.mark.django_db.
"""

from datetime import date

import pytest

from apps.projects.models import Project
from apps.requirements.models import Worker, RequirementType
from apps.tasks.models import Task

FIXED_TODAY = date(2025, 3, 10)


@pytest.fixture
def today():
    return FIXED_TODAY


@pytest.fixture
def clock(today):
    return lambda: today


@pytest.fixture
def worker(db):
    return Worker.objects.create(national_id="12.345.678-9", full_name="Ana Pérez")


@pytest.fixture
def requirement_type(db):
    return RequirementType.objects.create(name="Examen Pre-ocupacional", category="Exámenes", notice_days=45)


@pytest.fixture
def make_project(db):
    """Tworzy projekt z zadaniami; done_flags to lista flag done kolejnych zadań."""
    counter = {'n': 0}

    def _make(done_flags=(), status=Project.StatusChoices.IN_PROGRESS, roles=None, completed_on=None):
        counter['n'] += 1
        project = Project.objects.create(
            code=f"P-{counter['n']:03d}",
            name=f"Proyecto {counter['n']}",
            client="Cliente SA",
            company="Minera Norte",
            status=status,
        )
        roles = roles or ['JPRO'] * len(done_flags)
        for i, (flag, role) in enumerate(zip(done_flags, roles)):
            Task.objects.create(
                project=project,
                role=role,
                requirement=f"Requisito {i + 1}",
                category="Exámenes",
                done=flag,
                completed_on=(completed_on or FIXED_TODAY) if flag else None,
                order=i,
            )
        return project

    return _make


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="operator", password="secret")


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(username="admin", password="secret", is_staff=True)


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client
