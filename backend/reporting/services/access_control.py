"""Which reporting records each role may see and change."""
from django.db.models import QuerySet

from reporting.models import Challenge, ModuleRating, Report

STUDENT = 'Student'
LECTURER = 'Lecturer'
PRINCIPAL_LECTURER = 'Principal Lecturer'
PROGRAM_LEADER = 'Program Leader'

REVIEWERS = (PRINCIPAL_LECTURER, PROGRAM_LEADER)


def _is_reviewer(user) -> bool:
    return bool(getattr(user, 'is_superuser', False)) or getattr(user, 'role', None) in REVIEWERS


def visible_reports(user) -> QuerySet:
    """Reports `user` may list.

    - lecturers: their own reports
    - students: reports for modules of the program they are enrolled in
    - principal lecturers / program leaders: everything
    """
    qs = Report.objects.select_related('module', 'program', 'lecturer', 'faculty')
    if _is_reviewer(user):
        return qs
    role = getattr(user, 'role', None)
    if role == LECTURER:
        return qs.filter(lecturer=user)
    if role == STUDENT:
        if user.program_id is None:
            return qs.none()
        return qs.filter(program_id=user.program_id)
    return qs.none()


def visible_challenges(user, kind=None) -> QuerySet:
    qs = Challenge.objects.select_related('module', 'program', 'raised_by')
    if kind:
        qs = qs.filter(kind=kind)
    if _is_reviewer(user):
        return qs
    return qs.filter(raised_by=user)


def visible_ratings(user) -> QuerySet:
    qs = ModuleRating.objects.select_related('module', 'module__program', 'rated_by')
    if _is_reviewer(user):
        return qs
    role = getattr(user, 'role', None)
    if role == LECTURER:
        return qs.filter(module__assignments__lecturer=user).distinct()
    if role == STUDENT:
        return qs.filter(rated_by=user)
    return qs.none()


def can_update_challenge(challenge: Challenge, user) -> bool:
    """Reviewers can move any challenge; students can move their own."""
    if _is_reviewer(user):
        return True
    return (
        challenge.kind == Challenge.Kind.STUDENT
        and getattr(user, 'role', None) == STUDENT
        and challenge.raised_by_id == getattr(user, 'id', None)
    )
