import datetime

from django.contrib.auth import get_user_model

from academics.models import Faculty, LectureAssignment, Module, Program
from reporting.models import Challenge, Report

User = get_user_model()


def make_user(username, role, **extra):
    return User.objects.create_user(
        username=username,
        email=f'{username}@example.com',
        password='secret123',
        role=role,
        **extra,
    )


class ReportingWorldMixin:
    """Two programs in one faculty, one lecturer per program, and one user per role."""

    @classmethod
    def setUpTestData(cls):
        cls.faculty = Faculty.objects.create(code='FICT', name='Information & Communication Technology')
        cls.bscit = Program.objects.create(program_code='BSCIT', program_name='BSc Information Technology', faculty=cls.faculty)
        cls.bscsm = Program.objects.create(program_code='BSCSM', program_name='BSc Software Engineering', faculty=cls.faculty)
        cls.web = Module.objects.create(module_name='Web Application Development', program=cls.bscit, total_registered_students=40)
        cls.db = Module.objects.create(module_name='Database Systems', program=cls.bscsm, total_registered_students=25)

        cls.leader = make_user('leader', User.Role.PROGRAM_LEADER)
        cls.principal = make_user('principal', User.Role.PRINCIPAL_LECTURER)
        cls.lecturer = make_user('lecturer', User.Role.LECTURER, first_name='Thabo', last_name='Mokoena')
        cls.other_lecturer = make_user('lecturer2', User.Role.LECTURER)
        cls.student = make_user('student', User.Role.STUDENT, student_number='901000001', program=cls.bscit)
        cls.unenrolled = make_user('drifter', User.Role.STUDENT, student_number='901000002')

        LectureAssignment.objects.create(lecturer=cls.lecturer, module=cls.web, program=cls.bscit, assigned_by=cls.leader)
        LectureAssignment.objects.create(lecturer=cls.other_lecturer, module=cls.db, program=cls.bscsm, assigned_by=cls.leader)

    @classmethod
    def make_report(cls, lecturer=None, module=None, **extra):
        lecturer = lecturer or cls.lecturer
        module = module or cls.web
        values = {
            'week_of_reporting': 'Week 6',
            'date_of_lecture': datetime.date(2024, 3, 5),
            'scheduled_time': '08:30',
            'venue': 'Hall 6',
            'actual_students_present': 31,
            'total_registered_students': module.total_registered_students,
            'topic_taught': 'Recursion',
            'learning_outcomes': 'Trace recursive calls',
        }
        values.update(extra)
        return Report.objects.create(
            lecturer=lecturer,
            module=module,
            program=module.program,
            faculty=module.program.faculty,
            **values,
        )

    @classmethod
    def make_challenge(cls, kind=Challenge.Kind.LECTURER, raised_by=None, module=None, **extra):
        if raised_by is None:
            raised_by = cls.student if kind == Challenge.Kind.STUDENT else cls.lecturer
        module = module or cls.web
        values = {'description': 'Projector in Hall 6 is broken'}
        if kind == Challenge.Kind.STUDENT:
            values.update(title='No projector', priority=Challenge.Priority.HIGH)
        else:
            values.update(challenge_type='Resources', impact='Slides cannot be shown')
        values.update(extra)
        return Challenge.objects.create(
            kind=kind,
            raised_by=raised_by,
            module=module,
            program=module.program,
            faculty=module.program.faculty,
            **values,
        )
