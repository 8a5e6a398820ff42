"""Tests for project listing, provisioning and responsible assignment."""

import pytest

from apps.core.exceptions import NotFound, ValidationFailure
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.domain.entities import ProjectStatus, ResponsibleRole
from apps.projects.models import CompanyRequirement, Project
from apps.projects.services.project_service import ProjectService
from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from apps.tasks.models import Task


@pytest.fixture
def service():
    return ProjectService(DjangoProjectRepository(), DjangoTaskRepository())


@pytest.fixture
def catalogue(db):
    rows = [
        ("Examen Pre-ocupacional", "Exámenes", "EPR", 1),
        ("Contrato de trabajo", "Legal", "RRHH", 2),
        ("Curso de altura", "Cursos", "EPR", 3),
    ]
    for requirement, category, role, order in rows:
        CompanyRequirement.objects.create(
            company="Minera Norte", requirement=requirement, category=category, role=role, order=order,
        )
    CompanyRequirement.objects.create(company="Otra", requirement="Nada", category="X", role="JPRO")


@pytest.mark.django_db
class TestProvisionTasks:

    def test_creates_tasks_from_company_catalogue(self, service, make_project, catalogue):
        project = make_project()
        Project.objects.filter(id=project.id).update(responsibles={'EPR': 'Carla Soto'})

        tasks = service.provision_tasks(project.id)

        assert [t.requirement for t in tasks] == [
            "Examen Pre-ocupacional", "Contrato de trabajo", "Curso de altura",
        ]
        assert all(not t.done for t in tasks)
        assert [t.responsible_name for t in tasks] == ["Carla Soto", "", "Carla Soto"]

    def test_second_run_only_refreshes_names(self, service, make_project, catalogue):
        project = make_project()
        service.provision_tasks(project.id)
        Project.objects.filter(id=project.id).update(responsibles={'RRHH': 'Luis Rojas'})

        tasks = service.provision_tasks(project.id)

        assert Task.objects.filter(project=project).count() == 3
        assert [t.responsible_name for t in tasks if t.role == ResponsibleRole.RRHH] == ["Luis Rojas"]

    def test_company_without_catalogue(self, service, make_project):
        project = make_project()

        assert service.provision_tasks(project.id) == []

    def test_unknown_project(self, service, db):
        with pytest.raises(NotFound):
            service.provision_tasks(9999)


@pytest.mark.django_db
class TestAssignResponsibles:

    def test_pending_project_moves_in_progress(self, service, make_project):
        project = make_project(done_flags=[False, False], status=Project.StatusChoices.PENDING, roles=['JPRO', 'EPR'])

        result = service.assign_responsibles(project.id, {'JPRO': 'Marta Díaz '})

        assert result.status == ProjectStatus.IN_PROGRESS
        assert result.responsibles == {ResponsibleRole.JPRO: 'Marta Díaz'}
        names = dict(Task.objects.filter(project=project).values_list('role', 'responsible_name'))
        assert names == {'JPRO': 'Marta Díaz', 'EPR': ''}

    def test_merges_with_existing_assignment(self, service, make_project):
        project = make_project()
        service.assign_responsibles(project.id, {'JPRO': 'Marta Díaz'})

        result = service.assign_responsibles(project.id, {'LEGAL': 'Pedro Vera'})

        assert result.responsibles == {
            ResponsibleRole.JPRO: 'Marta Díaz',
            ResponsibleRole.LEGAL: 'Pedro Vera',
        }

    def test_finalized_project_keeps_status(self, service, make_project):
        project = make_project(done_flags=[True], status=Project.StatusChoices.FINALIZED)

        result = service.assign_responsibles(project.id, {'JPRO': 'Marta Díaz'})

        assert result.status == ProjectStatus.FINALIZED

    def test_unknown_role(self, service, make_project):
        project = make_project()

        with pytest.raises(ValidationFailure):
            service.assign_responsibles(project.id, {'CEO': 'Nadie'})


@pytest.mark.django_db
class TestProjectQueries:

    def test_list_counts_tasks(self, service, make_project):
        make_project(done_flags=[True, False, False])
        make_project(done_flags=[])

        summaries = {s.project.code: (s.completed, s.total) for s in service.list_projects()}

        assert summaries == {'P-001': (1, 3), 'P-002': (0, 0)}

    def test_detail_progress_by_role(self, service, make_project):
        project = make_project(done_flags=[True, False, True], roles=['JPRO', 'JPRO', 'RRHH'])

        detail = service.get_detail(project.id)

        assert (detail.completed, detail.total) == (2, 3)
        progress = {p.role: (p.completed, p.total, p.percent) for p in detail.progress}
        assert progress == {
            ResponsibleRole.JPRO: (1, 2, 50.0),
            ResponsibleRole.RRHH: (1, 1, 100.0),
        }

    def test_detail_unknown_project(self, service, db):
        with pytest.raises(NotFound):
            service.get_detail(9999)
