# apps/projects/domain/progress.py
from dataclasses import dataclass
from typing import Iterable, List, Optional
from apps.projects.domain.entities import ResponsibleRole


@dataclass
class RoleProgress:
    role: ResponsibleRole
    completed: int
    total: int

    @property
    def percent(self) -> Optional[float]:
        # Przy zerowej liczbie zadań procent jest niezdefiniowany
        if self.total == 0:
            return None
        return round(self.completed / self.total * 100, 1)


def progress_by_role(tasks: Iterable) -> List[RoleProgress]:
    """
    Liczy zadania ukończone/wszystkie dla każdej roli.
    Zwraca tylko role z co najmniej jednym zadaniem, w kolejności enuma.
    """
    buckets = {}
    for task in tasks:
        bucket = buckets.setdefault(ResponsibleRole(task.role), RoleProgress(ResponsibleRole(task.role), 0, 0))
        bucket.total += 1
        if task.done:
            bucket.completed += 1

    return [buckets[role] for role in ResponsibleRole if role in buckets]
