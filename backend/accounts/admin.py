from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ('username', 'email', 'role', 'student_number', 'program', 'is_active')
    list_filter = ('role', 'is_active', 'program')
    search_fields = ('username', 'email', 'first_name', 'last_name', 'student_number')

    fieldsets = DjangoUserAdmin.fieldsets + (
        ('Reporting', {'fields': ('role', 'student_number', 'faculty', 'program')}),
    )
