"""Tests for ProjectStatusService and progress_by_role()."""

from types import SimpleNamespace

import pytest

from apps.projects.domain.entities import ProjectStatus, ResponsibleRole
from apps.projects.domain.progress import RoleProgress, progress_by_role
from apps.projects.domain.services import ProjectStatusService


class TestRecalculate:
    """Tests for ProjectStatusService.recalculate()."""

    def setup_method(self):
        self.service = ProjectStatusService()

    def test_last_task_done_finalizes(self):
        result = self.service.recalculate(ProjectStatus.IN_PROGRESS, completed_before=2, total=3, done=True)
        assert result.all_completed is True
        assert result.new_status == ProjectStatus.FINALIZED

    def test_pending_project_finalizes_too(self):
        result = self.service.recalculate(ProjectStatus.PENDING, completed_before=0, total=1, done=True)
        assert result.new_status == ProjectStatus.FINALIZED

    def test_already_finalized_reports_completion_without_write(self):
        result = self.service.recalculate(ProjectStatus.FINALIZED, completed_before=2, total=3, done=True)
        assert result.all_completed is True
        assert result.status_changed is False

    def test_not_last_task_no_change(self):
        result = self.service.recalculate(ProjectStatus.IN_PROGRESS, completed_before=0, total=3, done=True)
        assert result.all_completed is False
        assert result.new_status is None

    def test_unmarking_finalized_regresses(self):
        result = self.service.recalculate(ProjectStatus.FINALIZED, completed_before=3, total=3, done=False)
        assert result.all_completed is False
        assert result.new_status == ProjectStatus.IN_PROGRESS

    def test_unmarking_in_progress_no_change(self):
        result = self.service.recalculate(ProjectStatus.IN_PROGRESS, completed_before=2, total=3, done=False)
        assert result.new_status is None

    def test_stale_finalized_with_open_tasks_regresses(self):
        # Projekt oznaczony jako zakończony, ale zadań wciąż brakuje
        result = self.service.recalculate(ProjectStatus.FINALIZED, completed_before=0, total=3, done=True)
        assert result.new_status == ProjectStatus.IN_PROGRESS

    @pytest.mark.parametrize("done", [True, False])
    def test_cancelled_is_terminal(self, done):
        result = self.service.recalculate(ProjectStatus.CANCELLED, completed_before=2, total=3, done=done)
        assert result.all_completed is False
        assert result.new_status is None

    def test_zero_tasks_never_finalizes(self):
        result = self.service.recalculate(ProjectStatus.IN_PROGRESS, completed_before=-1, total=0, done=True)
        assert result.all_completed is False
        assert result.new_status is None


def _task(role, done):
    return SimpleNamespace(role=role, done=done)


class TestProgressByRole:
    """Tests for progress_by_role()."""

    def test_buckets_per_role_in_enum_order(self):
        tasks = [
            _task(ResponsibleRole.LEGAL, False),
            _task(ResponsibleRole.JPRO, True),
            _task(ResponsibleRole.JPRO, False),
            _task(ResponsibleRole.EPR, True),
        ]
        result = progress_by_role(tasks)

        assert [p.role for p in result] == [ResponsibleRole.JPRO, ResponsibleRole.EPR, ResponsibleRole.LEGAL]
        assert (result[0].completed, result[0].total) == (1, 2)
        assert result[0].percent == 50.0
        assert result[1].percent == 100.0
        assert result[2].percent == 0.0

    def test_roles_without_tasks_are_omitted(self):
        result = progress_by_role([_task('RRHH', True)])
        assert [p.role for p in result] == [ResponsibleRole.RRHH]

    def test_empty_task_list(self):
        assert progress_by_role([]) == []

    def test_percent_undefined_for_empty_bucket(self):
        assert RoleProgress(ResponsibleRole.EPR, 0, 0).percent is None
