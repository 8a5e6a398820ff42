from django.core.management.base import BaseCommand
from apps.requirements.adapters.orm_repositories import DjangoRequirementRecordRepository
from apps.requirements.application.use_cases import RefreshRequirementStatusesUseCase


class Command(BaseCommand):
    help = 'Przelicza zapisany status dokumentów bez ręcznego nadpisania'

    def handle(self, *args, **options):
        use_case = RefreshRequirementStatusesUseCase(repository=DjangoRequirementRecordRepository())
        changed = use_case.execute()

        self.stdout.write(self.style.SUCCESS(f'Zaktualizowano {len(changed)} rekordów.'))
        for r in changed:
            self.stdout.write(f"- {r.worker_name}: {r.requirement} ({r.status.value})")
