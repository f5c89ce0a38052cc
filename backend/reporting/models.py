from django.conf import settings
from django.db import models
from django.utils import timezone


class Report(models.Model):
    """A lecturer's record of one lecture delivered."""

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        REVIEWED = 'reviewed', 'Reviewed'
        COMPLETED = 'completed', 'Completed'

    lecturer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reports')
    module = models.ForeignKey('academics.Module', on_delete=models.PROTECT, related_name='reports')
    program = models.ForeignKey('academics.Program', on_delete=models.PROTECT, related_name='reports')
    faculty = models.ForeignKey('academics.Faculty', on_delete=models.SET_NULL, null=True, blank=True, related_name='reports')

    week_of_reporting = models.CharField(max_length=32, blank=True, default='')
    date_of_lecture = models.DateField()
    scheduled_time = models.CharField(max_length=32, blank=True, default='')
    venue = models.CharField(max_length=128, blank=True, default='')
    # no actual <= total rule: late registrations are counted on the day
    actual_students_present = models.PositiveIntegerField(default=0)
    total_registered_students = models.PositiveIntegerField(default=0)
    topic_taught = models.CharField(max_length=255)
    learning_outcomes = models.TextField(blank=True, default='')
    recommendations = models.TextField(blank=True, default='')

    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    principal_feedback = models.TextField(null=True, blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reviewed_reports',
    )

    # set once by a student, never cleared
    student_name = models.CharField(max_length=128, null=True, blank=True)
    student_number = models.CharField(max_length=32, null=True, blank=True)
    signed_at = models.DateTimeField(null=True, blank=True)

    revision = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-date_of_lecture', '-id')
        indexes = [
            models.Index(fields=['status'], name='reporting_r_status_8c1e2b_idx'),
            models.Index(fields=['lecturer', '-date_of_lecture'], name='reporting_r_lecture_5d7a90_idx'),
        ]

    def __str__(self):
        return f"{self.module} @ {self.date_of_lecture}"

    @property
    def is_signed(self) -> bool:
        return bool(self.student_name) and bool(self.student_number)


class Challenge(models.Model):
    """An issue raised against a module.

    Lecturers and students both raise challenges; `kind` tells them apart.
    Both share one status vocabulary. Only student challenges carry a
    priority and a title; only lecturer challenges carry type, impact and a
    proposed solution.
    """

    class Kind(models.TextChoices):
        LECTURER = 'lecturer', 'Lecturer'
        STUDENT = 'student', 'Student'

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In progress'
        RESOLVED = 'resolved', 'Resolved'

    class Priority(models.TextChoices):
        LOW = 'low', 'Low'
        MEDIUM = 'medium', 'Medium'
        HIGH = 'high', 'High'

    kind = models.CharField(max_length=16, choices=Kind.choices)
    raised_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='challenges')
    module = models.ForeignKey('academics.Module', on_delete=models.PROTECT, related_name='challenges')
    program = models.ForeignKey('academics.Program', on_delete=models.PROTECT, related_name='challenges', null=True, blank=True)
    faculty = models.ForeignKey('academics.Faculty', on_delete=models.SET_NULL, null=True, blank=True, related_name='challenges')

    title = models.CharField(max_length=255, blank=True, default='')
    description = models.TextField()
    priority = models.CharField(max_length=8, choices=Priority.choices, blank=True, default='')
    challenge_type = models.CharField(max_length=64, blank=True, default='')
    impact = models.TextField(blank=True, default='')
    proposed_solution = models.TextField(blank=True, default='')

    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    feedback = models.TextField(null=True, blank=True)
    submitted_date = models.DateField(default=timezone.localdate)
    resolved_date = models.DateField(null=True, blank=True)

    revision = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created_at', '-id')
        indexes = [
            models.Index(fields=['kind', 'status'], name='reporting_c_kind_3f9b41_idx'),
        ]

    def __str__(self):
        return self.title or f"{self.get_kind_display()} challenge #{self.pk}"

    def save(self, *args, **kwargs):
        if self.status == self.Status.RESOLVED:
            if self.resolved_date is None:
                self.resolved_date = timezone.localdate()
        else:
            self.resolved_date = None
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'status' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'resolved_date'}
        super().save(*args, **kwargs)


class ModuleRating(models.Model):
    module = models.ForeignKey('academics.Module', on_delete=models.CASCADE, related_name='ratings')
    rated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='module_ratings',
    )
    rating = models.PositiveSmallIntegerField()
    comments = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('created_at', 'id')
        constraints = [
            models.UniqueConstraint(fields=['module', 'rated_by'], name='uniq_module_rating_per_user'),
        ]

    def __str__(self):
        return f"{self.module} rated {self.rating}"


class ExportLog(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='export_logs',
    )
    entity = models.CharField(max_length=32)
    export_type = models.CharField(max_length=8, default='csv')
    row_count = models.IntegerField(default=0)
    filename = models.CharField(max_length=255)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created_at',)

    def __str__(self) -> str:
        who = getattr(self.user, 'username', None) or 'unknown'
        return f"{self.filename} by {who}"
