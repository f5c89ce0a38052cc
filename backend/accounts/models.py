from django.contrib.auth.models import AbstractUser
from django.core.validators import RegexValidator
from django.db import models


class UsernameValidator(RegexValidator):
    """Custom validator that allows spaces in usernames."""
    regex = r'^[\w\s.@+-]+$'
    message = 'Enter a valid username. This value may contain letters, numbers, spaces, and @/./+/-/_ characters.'
    flags = 0


class User(AbstractUser):
    """
    Base user model.
    Students, lecturers, principal lecturers and program leaders are all users;
    what each dashboard shows is decided by `role`.
    """

    class Role(models.TextChoices):
        STUDENT = 'Student', 'Student'
        LECTURER = 'Lecturer', 'Lecturer'
        PRINCIPAL_LECTURER = 'Principal Lecturer', 'Principal Lecturer'
        PROGRAM_LEADER = 'Program Leader', 'Program Leader'

    username = models.CharField(
        max_length=150,
        unique=True,
        help_text='Required. 150 characters or fewer. Letters, numbers, spaces, and @/./+/-/_ characters.',
        validators=[UsernameValidator()],
        error_messages={
            'unique': 'A user with that username already exists.',
        },
    )
    role = models.CharField(max_length=32, choices=Role.choices, default=Role.STUDENT)

    # students only
    student_number = models.CharField(max_length=32, blank=True, default='')
    program = models.ForeignKey(
        'academics.Program',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='students',
    )
    faculty = models.ForeignKey(
        'academics.Faculty',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='members',
    )

    def __str__(self):
        return self.username

    @property
    def display_name(self) -> str:
        full = self.get_full_name().strip()
        return full or self.username

    @property
    def is_student(self) -> bool:
        return self.role == self.Role.STUDENT

    @property
    def is_lecturer(self) -> bool:
        return self.role == self.Role.LECTURER

    @property
    def is_principal_lecturer(self) -> bool:
        return self.role == self.Role.PRINCIPAL_LECTURER

    @property
    def is_program_leader(self) -> bool:
        return self.role == self.Role.PROGRAM_LEADER
