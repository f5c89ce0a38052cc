from django.contrib import admin

from .models import Faculty, LectureAssignment, Module, Program


@admin.register(Faculty)
class FacultyAdmin(admin.ModelAdmin):
    list_display = ('code', 'name')
    search_fields = ('code', 'name')


@admin.register(Program)
class ProgramAdmin(admin.ModelAdmin):
    list_display = ('program_code', 'program_name', 'faculty')
    list_filter = ('faculty',)
    search_fields = ('program_code', 'program_name')


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = ('module_name', 'program', 'faculty', 'total_registered_students')
    list_filter = ('program', 'faculty')
    search_fields = ('module_name',)


@admin.register(LectureAssignment)
class LectureAssignmentAdmin(admin.ModelAdmin):
    list_display = ('lecturer', 'module', 'program', 'assigned_by', 'created_at')
    list_filter = ('program',)
    raw_id_fields = ('lecturer', 'module', 'assigned_by')
