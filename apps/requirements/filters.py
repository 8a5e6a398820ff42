import django_filters
from .models import RequirementRecord, RequirementType


class RequirementRecordFilter(django_filters.FilterSet):
    worker = django_filters.CharFilter(field_name='worker_name', lookup_expr='icontains', label="Pracownik zawiera")
    requirement_type = django_filters.ModelChoiceFilter(queryset=RequirementType.objects.all(), label="Typ wymagania")

    # Status nie jest tu filtrowany: zależy od dzisiejszej daty i liczymy go przy odczycie

    class Meta:
        model = RequirementRecord
        fields = ['category']
