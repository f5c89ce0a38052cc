from django.core.exceptions import ValidationError
from django.test import TestCase

from reporting.exceptions import AttendanceAlreadySigned, StaleRevision
from reporting.models import Report
from reporting.services import report_review
from reporting.tests.helpers import ReportingWorldMixin


class FeedbackTests(ReportingWorldMixin, TestCase):
    def setUp(self):
        self.report = self.make_report()

    def test_feedback_marks_reviewed(self):
        report = report_review.submit_feedback(self.report, ' Good pacing ', reviewer=self.principal)
        report.refresh_from_db()
        self.assertEqual(report.status, Report.Status.REVIEWED)
        self.assertEqual(report.principal_feedback, 'Good pacing')
        self.assertEqual(report.reviewed_by, self.principal)
        self.assertEqual(report.revision, 2)

    def test_feedback_can_complete(self):
        report = report_review.submit_feedback(self.report, 'Done', reviewer=self.principal, status='completed')
        self.assertEqual(report.status, Report.Status.COMPLETED)

    def test_blank_feedback_rejected(self):
        with self.assertRaises(ValidationError):
            report_review.submit_feedback(self.report, '  ', reviewer=self.principal)

    def test_cannot_review_back_to_pending(self):
        with self.assertRaises(ValidationError):
            report_review.submit_feedback(self.report, 'x', reviewer=self.principal, status='pending')

    def test_stale_revision(self):
        report_review.submit_feedback(self.report, 'first', reviewer=self.principal)
        with self.assertRaises(StaleRevision):
            report_review.submit_feedback(self.report, 'second', reviewer=self.principal, expected_revision=1)
        self.report.refresh_from_db()
        self.assertEqual(self.report.principal_feedback, 'first')


class SignAttendanceTests(ReportingWorldMixin, TestCase):
    def setUp(self):
        self.report = self.make_report()

    def test_sign(self):
        self.assertFalse(self.report.is_signed)
        report = report_review.sign_attendance(self.report, 'Naledi Dube', '901000001')
        report.refresh_from_db()
        self.assertTrue(report.is_signed)
        self.assertIsNotNone(report.signed_at)

    def test_both_values_required(self):
        with self.assertRaises(ValidationError) as ctx:
            report_review.sign_attendance(self.report, 'Naledi Dube', ' ')
        self.assertIn('Please enter both your name and student number', ctx.exception.messages)
        self.report.refresh_from_db()
        self.assertFalse(self.report.is_signed)

    def test_signing_is_one_way(self):
        report_review.sign_attendance(self.report, 'Naledi Dube', '901000001')
        with self.assertRaises(AttendanceAlreadySigned):
            report_review.sign_attendance(self.report, 'Someone Else', '901000009')
        self.report.refresh_from_db()
        self.assertEqual(self.report.student_name, 'Naledi Dube')
