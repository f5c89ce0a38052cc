"""Overview counters shown at the top of each dashboard."""
from typing import Dict

from django.contrib.auth import get_user_model

from academics.models import LectureAssignment, Module, Program
from reporting.models import Challenge, Report
from reporting.services import access_control
from reporting.services.rating_aggregator import group_by_module

User = get_user_model()


def _program_leader_stats(user) -> Dict:
    reports = Report.objects.all()
    return {
        'totalPrograms': Program.objects.count(),
        'totalModules': Module.objects.count(),
        'totalReports': reports.count(),
        'reviewedReports': reports.filter(status=Report.Status.REVIEWED).count(),
        'totalAssignments': LectureAssignment.objects.count(),
        'totalLecturers': User.objects.filter(role=User.Role.LECTURER, is_active=True).count(),
        'totalStudents': User.objects.filter(role=User.Role.STUDENT, is_active=True).count(),
    }


def _principal_lecturer_stats(user) -> Dict:
    reports = Report.objects.all()
    challenges = Challenge.objects.all()
    ratings = access_control.visible_ratings(user).values('module_id')
    return {
        'totalReports': reports.count(),
        'pendingReviews': reports.filter(principal_feedback__isnull=True).count(),
        'pendingChallenges': challenges.filter(status=Challenge.Status.PENDING).count(),
        'inProgressChallenges': challenges.filter(status=Challenge.Status.IN_PROGRESS).count(),
        'resolvedChallenges': challenges.filter(status=Challenge.Status.RESOLVED).count(),
        'ratedModules': len(group_by_module(ratings)),
    }


def _lecturer_stats(user) -> Dict:
    reports = Report.objects.filter(lecturer=user)
    challenges = Challenge.objects.filter(raised_by=user)
    return {
        'myAssignments': LectureAssignment.objects.filter(lecturer=user).count(),
        'myReports': reports.count(),
        'reviewedReports': reports.exclude(status=Report.Status.PENDING).count(),
        'myChallenges': challenges.count(),
        'openChallenges': challenges.exclude(status=Challenge.Status.RESOLVED).count(),
    }


def _student_stats(user) -> Dict:
    reports = access_control.visible_reports(user)
    challenges = Challenge.objects.filter(raised_by=user, kind=Challenge.Kind.STUDENT)
    modules = Module.objects.filter(program_id=user.program_id) if user.program_id else Module.objects.none()
    return {
        'hasProgram': user.program_id is not None,
        'myModules': modules.count(),
        'programReports': reports.count(),
        'myChallenges': challenges.count(),
        'pendingChallenges': challenges.filter(status=Challenge.Status.PENDING).count(),
        'ratedModules': user.module_ratings.count(),
    }


_BY_ROLE = {
    User.Role.PROGRAM_LEADER: _program_leader_stats,
    User.Role.PRINCIPAL_LECTURER: _principal_lecturer_stats,
    User.Role.LECTURER: _lecturer_stats,
    User.Role.STUDENT: _student_stats,
}


def dashboard_stats(user) -> Dict:
    if user is None:
        raise ValueError('user is required')
    builder = _BY_ROLE.get(user.role, _program_leader_stats if user.is_superuser else None)
    if builder is None:
        return {'role': user.role, 'stats': {}}
    return {'role': user.role, 'stats': builder(user)}
