from django.contrib import admin
from apps.tasks.models import Task
from .models import Project, CompanyRequirement


class TaskInline(admin.TabularInline):
    model = Task
    extra = 0
    fields = ('requirement', 'category', 'role', 'responsible_name', 'done', 'completed_on')
    readonly_fields = ('done', 'completed_on')
    can_delete = False


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'client', 'status', 'finalized_on')
    list_filter = ('status',)
    search_fields = ('code', 'name', 'client')
    inlines = [TaskInline]


@admin.register(CompanyRequirement)
class CompanyRequirementAdmin(admin.ModelAdmin):
    list_display = ('company', 'requirement', 'category', 'role', 'order', 'mandatory')
    list_filter = ('company', 'role')
    search_fields = ('requirement',)
