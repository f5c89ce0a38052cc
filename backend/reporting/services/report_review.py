"""Principal feedback and student attendance signing on lecture reports."""
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from reporting.exceptions import AttendanceAlreadySigned
from reporting.models import Report
from reporting.services.revisions import check_revision

logger = logging.getLogger(__name__)

REVIEW_STATUSES = (Report.Status.REVIEWED, Report.Status.COMPLETED)


@transaction.atomic
def submit_feedback(report: Report, feedback: str, reviewer, status: Optional[str] = None,
                    expected_revision: Optional[int] = None) -> Report:
    """Attach principal feedback; the report leaves `pending`."""
    text = str(feedback or '').strip()
    if not text:
        raise ValidationError('Feedback is required')
    new_status = status or Report.Status.REVIEWED
    if new_status not in REVIEW_STATUSES:
        raise ValidationError(f"Invalid review status '{new_status}'")

    report = Report.objects.select_for_update().get(pk=report.pk)
    check_revision(report, expected_revision)

    report.principal_feedback = text
    report.status = new_status
    report.reviewed_by = reviewer
    report.revision += 1
    report.save(update_fields=['principal_feedback', 'status', 'reviewed_by', 'revision', 'updated_at'])
    logger.info('Report %s reviewed by user id=%s status=%s', report.pk, getattr(reviewer, 'id', None), new_status)
    return report


@transaction.atomic
def sign_attendance(report: Report, student_name: str, student_number: str,
                    expected_revision: Optional[int] = None) -> Report:
    """Record the student signature. Signing is one-way: a signed report stays signed."""
    name = str(student_name or '').strip()
    number = str(student_number or '').strip()
    if not name or not number:
        raise ValidationError('Please enter both your name and student number')

    report = Report.objects.select_for_update().get(pk=report.pk)
    if report.is_signed:
        raise AttendanceAlreadySigned()
    check_revision(report, expected_revision)

    report.student_name = name
    report.student_number = number
    report.signed_at = timezone.now()
    report.revision += 1
    report.save(update_fields=['student_name', 'student_number', 'signed_at', 'revision', 'updated_at'])
    logger.info('Attendance signed on report %s', report.pk)
    return report
