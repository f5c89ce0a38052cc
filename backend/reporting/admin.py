from django.contrib import admin

from .models import Challenge, ExportLog, ModuleRating, Report


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ('module', 'lecturer', 'program', 'date_of_lecture', 'status', 'revision')
    list_filter = ('status', 'program')
    search_fields = ('topic_taught', 'module__module_name', 'lecturer__username')
    raw_id_fields = ('lecturer', 'module', 'reviewed_by')
    readonly_fields = ('signed_at', 'created_at', 'updated_at')


@admin.register(Challenge)
class ChallengeAdmin(admin.ModelAdmin):
    list_display = ('__str__', 'kind', 'module', 'raised_by', 'status', 'priority', 'submitted_date', 'resolved_date')
    list_filter = ('kind', 'status', 'priority')
    search_fields = ('title', 'description', 'challenge_type')
    raw_id_fields = ('raised_by', 'module')


@admin.register(ModuleRating)
class ModuleRatingAdmin(admin.ModelAdmin):
    list_display = ('module', 'rating', 'rated_by', 'created_at')
    list_filter = ('rating',)
    raw_id_fields = ('module', 'rated_by')


@admin.register(ExportLog)
class ExportLogAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'user', 'entity', 'export_type', 'row_count', 'filename', 'ip_address')
    list_filter = ('entity', 'export_type')
    search_fields = ('filename', 'user__username')
    readonly_fields = ('created_at',)
