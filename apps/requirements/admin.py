from django.contrib import admin
from .models import Worker, RequirementType, RequirementRecord


@admin.register(Worker)
class WorkerAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'national_id', 'email', 'is_active')
    list_filter = ('is_active',)
    search_fields = ('full_name', 'national_id')


@admin.register(RequirementType)
class RequirementTypeAdmin(admin.ModelAdmin):
    list_display = ('name', 'category', 'notice_days')
    list_filter = ('category',)
    search_fields = ('name',)


@admin.register(RequirementRecord)
class RequirementRecordAdmin(admin.ModelAdmin):
    list_display = ('worker_name', 'requirement', 'category', 'valid_to', 'status', 'manual_status')
    list_filter = ('status', 'category')
    search_fields = ('worker_name', 'national_id', 'requirement')
    readonly_fields = ('status', 'lead_time_days')
