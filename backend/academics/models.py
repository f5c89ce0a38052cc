from django.conf import settings
from django.db import models


class Faculty(models.Model):
    code = models.CharField(max_length=16, unique=True)
    name = models.CharField(max_length=128)

    class Meta:
        ordering = ('name',)
        verbose_name_plural = 'Faculties'

    def __str__(self):
        return f"{self.code} - {self.name}"


class Program(models.Model):
    program_code = models.CharField(max_length=32, unique=True)
    program_name = models.CharField(max_length=255)
    faculty = models.ForeignKey(Faculty, on_delete=models.PROTECT, related_name='programs')

    class Meta:
        ordering = ('program_code',)

    def __str__(self):
        return f"{self.program_name} ({self.program_code})"


class Module(models.Model):
    module_name = models.CharField(max_length=255)
    program = models.ForeignKey(Program, on_delete=models.CASCADE, related_name='modules')
    # denormalised from program so faculty-scoped lists need no join
    faculty = models.ForeignKey(Faculty, on_delete=models.PROTECT, related_name='modules', null=True, blank=True)
    total_registered_students = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ('module_name',)
        unique_together = ('module_name', 'program')

    def __str__(self):
        return self.module_name

    def save(self, *args, **kwargs):
        if self.faculty_id is None and self.program_id is not None:
            self.faculty_id = self.program.faculty_id
        super().save(*args, **kwargs)


class LectureAssignment(models.Model):
    """A lecturer teaching a module of a program."""

    lecturer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='lecture_assignments')
    module = models.ForeignKey(Module, on_delete=models.CASCADE, related_name='assignments')
    program = models.ForeignKey(Program, on_delete=models.CASCADE, related_name='assignments')
    assigned_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assignments_made',
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at', '-id')
        unique_together = ('lecturer', 'module')

    def __str__(self):
        return f"{self.lecturer} -> {self.module}"
