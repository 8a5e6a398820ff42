from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ('requirement', 'project', 'role', 'responsible_name', 'done', 'completed_on')
    list_filter = ('role', 'done', 'category')
    search_fields = ('requirement', 'responsible_name', 'worker_name', 'project__code')
    # Zmiana "done" przez Admina omija kaskadę - tylko do odczytu
    readonly_fields = ('done', 'completed_on')
