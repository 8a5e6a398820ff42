"""HTTP tests for the JSON endpoints."""

from datetime import timedelta
from unittest.mock import patch

import pytest
from django.urls import reverse
from django.utils import timezone

from apps.core.exceptions import StoreFailure
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.models import CompanyRequirement, Project
from apps.requirements.models import RequirementRecord, RequirementType
from apps.tasks.models import Task


@pytest.mark.django_db
class TestTaskViews:

    def test_login_required(self, client, make_project):
        project = make_project(done_flags=[False])
        task = project.tasks.get()

        response = client.post(reverse('task_set_done', args=[project.id, task.id]), {'done': 'true'})

        assert response.status_code == 302
        assert not Task.objects.get(id=task.id).done

    def test_completing_last_task_returns_notification(self, auth_client, make_project):
        project = make_project(done_flags=[True, True, False])
        task = project.tasks.get(done=False)

        response = auth_client.post(reverse('task_set_done', args=[project.id, task.id]), {'done': 'true'})

        assert response.status_code == 200
        body = response.json()
        assert body['all_completed'] is True
        assert body['project_status_changed'] == 'finalized'
        assert (body['completed'], body['total']) == (3, 3)
        assert body['notification'] == {'kind': 'project_completed', 'auto_dismiss_ms': 3000}
        assert body['task']['completed_on'] == timezone.localdate().isoformat()

    def test_undo_has_no_notification(self, auth_client, make_project):
        project = make_project(done_flags=[True, True], status=Project.StatusChoices.FINALIZED)
        task = project.tasks.first()

        body = auth_client.post(reverse('task_set_done', args=[project.id, task.id]), {'done': 'false'}).json()

        assert body['project_status_changed'] == 'in_progress'
        assert body['all_completed'] is False
        assert 'notification' not in body
        assert body['task']['completed_on'] is None

    def test_invalid_done_value(self, auth_client, make_project):
        project = make_project(done_flags=[False])
        task = project.tasks.get()

        response = auth_client.post(reverse('task_set_done', args=[project.id, task.id]), {'done': 'maybe'})

        assert response.status_code == 400
        assert 'done' in response.json()['error']

    def test_task_from_other_project(self, auth_client, make_project):
        project = make_project(done_flags=[False])
        other = make_project(done_flags=[False])
        foreign_task = other.tasks.get()

        response = auth_client.post(reverse('task_set_done', args=[project.id, foreign_task.id]), {'done': 'true'})

        assert response.status_code == 404
        assert not Task.objects.get(id=foreign_task.id).done

    def test_get_not_allowed(self, auth_client, make_project):
        project = make_project(done_flags=[False])
        task = project.tasks.get()

        response = auth_client.get(reverse('task_set_done', args=[project.id, task.id]))

        assert response.status_code == 405

    def test_task_list_filter(self, auth_client, make_project):
        project = make_project(done_flags=[True, False, False], roles=['JPRO', 'EPR', 'EPR'])

        response = auth_client.get(reverse('project_task_list', args=[project.id]), {'role': 'EPR', 'done': 'false'})

        results = response.json()['results']
        assert len(results) == 2
        assert {t['role'] for t in results} == {'EPR'}

    def test_task_payload_carries_catalogue_fields(self, auth_client, make_project):
        project = make_project()
        CompanyRequirement.objects.create(
            company=project.company, requirement="Curso de altura", category="Cursos",
            role="EPR", notes="Vigencia 2 años", order=7,
        )
        auth_client.post(reverse('project_provision', args=[project.id]))

        task = auth_client.get(reverse('project_task_list', args=[project.id])).json()['results'][0]

        assert task['notes'] == "Vigencia 2 años"
        assert task['order'] == 7

    def test_task_list_unknown_project(self, auth_client, db):
        assert auth_client.get(reverse('project_task_list', args=[9999])).status_code == 404


@pytest.mark.django_db
class TestProjectViews:

    def test_detail(self, auth_client, make_project):
        project = make_project(done_flags=[True, False], roles=['JPRO', 'LEGAL'])

        body = auth_client.get(reverse('project_detail', args=[project.id])).json()

        assert body['code'] == project.code
        assert body['status'] == 'in_progress'
        assert len(body['tasks']) == 2
        assert body['progress_by_role'] == [
            {'role': 'JPRO', 'completed': 1, 'total': 1, 'percent': 100.0},
            {'role': 'LEGAL', 'completed': 0, 'total': 1, 'percent': 0.0},
        ]

    def test_detail_unknown(self, auth_client, db):
        assert auth_client.get(reverse('project_detail', args=[9999])).status_code == 404

    def test_list(self, auth_client, make_project):
        make_project(done_flags=[True, False])

        results = auth_client.get(reverse('project_list')).json()['results']

        assert results[0]['completed'] == 1
        assert results[0]['total'] == 2

    def test_store_failure_is_reported_as_503(self, auth_client, db):
        with patch.object(DjangoProjectRepository, 'list_summaries',
                          side_effect=StoreFailure("Could not list projects: connection lost")):
            response = auth_client.get(reverse('project_list'))

        assert response.status_code == 503
        assert response.json() == {'error': "Could not list projects: connection lost"}

    def test_assign_responsibles(self, auth_client, make_project):
        project = make_project(status=Project.StatusChoices.PENDING)

        body = auth_client.post(reverse('project_responsibles', args=[project.id]), {'EPR': 'Carla Soto'}).json()

        assert body['status'] == 'in_progress'
        assert body['responsibles'] == {'EPR': 'Carla Soto'}


@pytest.mark.django_db
class TestRequirementViews:

    def _payload(self, worker, requirement_type, valid_to):
        return {
            'worker_id': worker.id,
            'requirement_type_id': requirement_type.id,
            'valid_from': (valid_to - timedelta(days=365)).isoformat(),
            'valid_to': valid_to.isoformat(),
        }

    def test_create(self, auth_client, worker, requirement_type):
        valid_to = timezone.localdate() + timedelta(days=10)

        response = auth_client.post(reverse('requirement_create'), self._payload(worker, requirement_type, valid_to))

        assert response.status_code == 201
        body = response.json()
        assert body['status'] == 'expiring'
        assert body['lead_time_days'] == 10
        assert body['worker_name'] == worker.full_name

    def test_create_unknown_worker(self, auth_client, worker, requirement_type):
        payload = self._payload(worker, requirement_type, timezone.localdate())
        payload['worker_id'] = 9999

        response = auth_client.post(reverse('requirement_create'), payload)

        assert response.status_code == 404
        assert RequirementRecord.objects.count() == 0

    def test_create_missing_date(self, auth_client, worker, requirement_type):
        payload = self._payload(worker, requirement_type, timezone.localdate())
        del payload['valid_to']

        response = auth_client.post(reverse('requirement_create'), payload)

        assert response.status_code == 400
        assert 'valid_to' in response.json()['error']

    def test_edit_sets_manual_status(self, auth_client, worker, requirement_type):
        valid_to = timezone.localdate() - timedelta(days=3)
        record_id = auth_client.post(
            reverse('requirement_create'), self._payload(worker, requirement_type, valid_to)
        ).json()['id']

        body = auth_client.post(reverse('requirement_edit', args=[record_id]), {
            'valid_from': (valid_to - timedelta(days=365)).isoformat(),
            'valid_to': valid_to.isoformat(),
            'manual_status': 'in_renewal',
        }).json()

        assert body['status'] == 'in_renewal'
        assert body['manual_status'] == 'in_renewal'

    def test_list_filters_by_status(self, auth_client, worker, requirement_type):
        today = timezone.localdate()
        auth_client.post(reverse('requirement_create'), self._payload(worker, requirement_type, today + timedelta(days=5)))
        auth_client.post(reverse('requirement_create'), self._payload(worker, requirement_type, today + timedelta(days=300)))

        results = auth_client.get(reverse('requirement_list'), {'status': 'expiring'}).json()['results']

        assert [r['lead_time_days'] for r in results] == [5]

    def test_list_filters_by_requirement_type(self, auth_client, worker, requirement_type):
        other_type = RequirementType.objects.create(name="Licencia de conducir", category="Conducción")
        valid_to = timezone.localdate() + timedelta(days=100)
        auth_client.post(reverse('requirement_create'), self._payload(worker, requirement_type, valid_to))
        auth_client.post(reverse('requirement_create'), self._payload(worker, other_type, valid_to))

        results = auth_client.get(reverse('requirement_list'), {'requirement_type': other_type.id}).json()['results']

        assert [r['requirement'] for r in results] == ["Licencia de conducir"]

    def test_list_filters_by_worker_and_category(self, auth_client, worker, requirement_type):
        other_type = RequirementType.objects.create(name="Licencia de conducir", category="Conducción")
        valid_to = timezone.localdate() + timedelta(days=100)
        auth_client.post(reverse('requirement_create'), self._payload(worker, requirement_type, valid_to))
        auth_client.post(reverse('requirement_create'), self._payload(worker, other_type, valid_to))

        by_category = auth_client.get(reverse('requirement_list'), {'category': 'Exámenes'}).json()['results']
        by_worker = auth_client.get(reverse('requirement_list'), {'worker': 'nadie'}).json()['results']

        assert [r['category'] for r in by_category] == ['Exámenes']
        assert by_worker == []

    def test_list_rejects_malformed_requirement_type(self, auth_client, worker, requirement_type):
        auth_client.post(
            reverse('requirement_create'),
            self._payload(worker, requirement_type, timezone.localdate() + timedelta(days=100)),
        )

        response = auth_client.get(reverse('requirement_list'), {'requirement_type': 'abc'})

        assert response.status_code == 400
        assert 'requirement_type' in response.json()['error']

    def test_list_rejects_unknown_status(self, auth_client, db):
        response = auth_client.get(reverse('requirement_list'), {'status': 'archived'})

        assert response.status_code == 400
        assert 'archived' in response.json()['error']

    def test_delete_requires_staff(self, client, auth_client, staff_user, worker, requirement_type):
        record_id = auth_client.post(
            reverse('requirement_create'), self._payload(worker, requirement_type, timezone.localdate())
        ).json()['id']

        assert auth_client.post(reverse('requirement_delete', args=[record_id])).status_code == 403
        assert RequirementRecord.objects.filter(id=record_id).exists()

        client.force_login(staff_user)
        assert client.post(reverse('requirement_delete', args=[record_id])).status_code == 200
        assert not RequirementRecord.objects.filter(id=record_id).exists()
        assert client.post(reverse('requirement_delete', args=[record_id])).status_code == 404


@pytest.mark.django_db
class TestDashboard:

    def test_dashboard(self, auth_client, worker, requirement_type, make_project):
        today = timezone.localdate()
        auth_client.post(reverse('requirement_create'), {
            'worker_id': worker.id,
            'requirement_type_id': requirement_type.id,
            'valid_from': (today - timedelta(days=300)).isoformat(),
            'valid_to': (today + timedelta(days=20)).isoformat(),
        })
        make_project(done_flags=[True, False], roles=['JPRO', 'EPR'])
        finished = make_project(done_flags=[True], status=Project.StatusChoices.FINALIZED)
        Project.objects.filter(id=finished.id).update(finalized_on=today + timedelta(days=4))

        body = auth_client.get(reverse('reports_dashboard')).json()

        assert body['requirements'] == {'current': 0, 'expiring': 1, 'expired': 0, 'in_renewal': 0}
        assert len(body['upcoming_expirations']) == 1
        assert body['projects'] == {'pending': 0, 'in_progress': 1, 'finalized': 1, 'cancelled': 0}
        assert body['open_roles'] == ['EPR']
        assert body['project_metrics'] == {
            'active': 1,
            'tasks_completed': 2,
            'tasks_total': 3,
            'average_days_to_finalize': 4.0,
        }

    def test_dashboard_is_get_only(self, client, db):
        assert client.post(reverse('reports_dashboard')).status_code == 405
