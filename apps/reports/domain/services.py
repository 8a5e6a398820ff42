# apps/reports/domain/services.py
from collections import Counter
from datetime import date
from typing import List
from apps.projects.domain.entities import ProjectStatus, ProjectSummary, ResponsibleRole
from apps.projects.domain.progress import RoleProgress, progress_by_role
from apps.requirements.domain.entities import RequirementRecordEntity, RequirementStatus
from apps.tasks.domain.entities import TaskEntity


class ReportService:

    def requirement_breakdown(self, records: List[RequirementRecordEntity]) -> dict:
        """Liczba dokumentów w każdym statusie (także zerowe)."""
        counts = Counter(r.status for r in records)
        return {status.value: counts.get(status, 0) for status in RequirementStatus}

    def upcoming_expirations(self, records: List[RequirementRecordEntity], today: date) -> List[RequirementRecordEntity]:
        """
        Dokumenty, dla których minął już próg powiadomienia (notice_days),
        ale które jeszcze nie wygasły. Posortowane od najbliższego terminu.
        """
        due = []
        for r in records:
            if r.valid_to is None or r.valid_to < today or r.has_manual_status:
                continue
            days_left = (r.valid_to - today).days
            if r.notice_days is not None and days_left <= r.notice_days:
                due.append(r)
        return sorted(due, key=lambda r: r.valid_to)

    def project_breakdown(self, summaries: List[ProjectSummary]) -> dict:
        counts = Counter(s.project.status for s in summaries)
        return {status.value: counts.get(status, 0) for status in ProjectStatus}

    def project_metrics(self, summaries: List[ProjectSummary]) -> dict:
        """
        Zbiorcze liczby dla przeglądu projektów.
        Średni czas liczony od utworzenia do finalized_on, tylko dla zakończonych.
        """
        active = [s for s in summaries
                  if s.project.status not in (ProjectStatus.CANCELLED, ProjectStatus.FINALIZED)]

        durations = [
            (s.project.finalized_on - s.project.created_on).days
            for s in summaries
            if s.project.is_finalized() and s.project.finalized_on and s.project.created_on
        ]
        # Brak zakończonych projektów = średnia niezdefiniowana
        average = round(sum(durations) / len(durations), 1) if durations else None

        return {
            'active': len(active),
            'tasks_completed': sum(s.completed for s in summaries),
            'tasks_total': sum(s.total for s in summaries),
            'average_days_to_finalize': average,
        }

    def role_progress(self, tasks: List[TaskEntity]) -> List[RoleProgress]:
        # Suma po wszystkich przekazanych projektach
        return progress_by_role(tasks)

    def open_roles(self, progress: List[RoleProgress]) -> List[ResponsibleRole]:
        """Role, które mają jeszcze niezamknięte zadania."""
        return [p.role for p in progress if p.completed < p.total]
