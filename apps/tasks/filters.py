import django_filters
from .models import Task
from apps.projects.models import RoleChoices


class TaskFilter(django_filters.FilterSet):
    role = django_filters.ChoiceFilter(choices=RoleChoices.choices, label="Rola")
    done = django_filters.BooleanFilter(label="Zrobione")
    requirement = django_filters.CharFilter(lookup_expr='icontains', label="Wymaganie zawiera")
    responsible_name = django_filters.CharFilter(lookup_expr='icontains', label="Odpowiedzialny")

    class Meta:
        model = Task
        fields = ['category']
