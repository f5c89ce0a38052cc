import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import HasRole
from .models import Challenge, ExportLog, ModuleRating, Report
from .serializers import (
    ChallengeSerializer,
    ChallengeStatusSerializer,
    LecturerChallengeSerializer,
    ModuleRatingSerializer,
    ReportFeedbackSerializer,
    ReportSerializer,
    SignAttendanceSerializer,
    StudentChallengeSerializer,
)
from .services import access_control, challenge_lifecycle, export_tables, report_review
from .services.dashboard import dashboard_stats
from .services.rating_aggregator import group_by_module
from .services.record_filter import (
    CHALLENGE_SEARCH_FIELDS,
    RATING_GROUP_SEARCH_FIELDS,
    RATING_SEARCH_FIELDS,
    REPORT_SEARCH_FIELDS,
    distinct_values,
    search_records,
)
from .services.tabular_exporter import CSV, FORMATS, PDF, NothingToExport, build_export
from .services.view_state import apply_state, state_from_query

logger = logging.getLogger(__name__)

User = get_user_model()

STUDENT = User.Role.STUDENT
LECTURER = User.Role.LECTURER
PRINCIPAL_LECTURER = User.Role.PRINCIPAL_LECTURER
PROGRAM_LEADER = User.Role.PROGRAM_LEADER


def _client_ip(request):
    forwarded = (request.META.get('HTTP_X_FORWARDED_FOR') or '').split(',')[0].strip()
    if forwarded:
        return forwarded
    return request.META.get('REMOTE_ADDR')


def export_response(request, table, records):
    """Serve `records` through `table` as a file download.

    ?type= picks csv (default), xlsx or pdf. An empty list produces a JSON
    notice instead of a file. Rows past the per-format cap are dropped and
    the count is reported in `X-Export-Truncated`.
    """
    export_type = str(request.query_params.get('type') or CSV).strip().lower()
    if export_type not in FORMATS:
        return Response(
            {'detail': f"Unsupported export type '{export_type}'. Use one of: {', '.join(FORMATS)}"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    cap = max(1, settings.REPORTING_PDF_MAX_ROWS if export_type == PDF else settings.REPORTING_EXPORT_MAX_ROWS)
    records = list(records)
    dropped = max(0, len(records) - cap)
    if dropped:
        logger.warning(
            'Export of %s truncated to %s rows, %s dropped (user id=%s)',
            table.entity, cap, dropped, request.user.id,
        )
        records = records[:cap]

    try:
        artifact = build_export(table, records, export_type)
    except NothingToExport as exc:
        return Response({'detail': str(exc), 'exported': False})

    ExportLog.objects.create(
        user=request.user,
        entity=table.entity,
        export_type=artifact.export_type,
        row_count=artifact.row_count,
        filename=artifact.filename,
        ip_address=_client_ip(request),
        user_agent=(request.META.get('HTTP_USER_AGENT') or '')[:2000],
    )
    logger.info('Export %s rows=%s user id=%s', artifact.filename, artifact.row_count, request.user.id)

    resp = HttpResponse(artifact.content, content_type=artifact.content_type)
    resp['Content-Disposition'] = f'attachment; filename="{artifact.filename}"'
    if dropped:
        resp['X-Export-Truncated'] = str(dropped)
    return resp


def _filtered_reports(request):
    data = ReportSerializer(access_control.visible_reports(request.user), many=True).data
    state = state_from_query(request.query_params)
    return apply_state(state, data, REPORT_SEARCH_FIELDS)


def _filtered_challenges(request, kind=None):
    data = ChallengeSerializer(access_control.visible_challenges(request.user, kind=kind), many=True).data
    state = state_from_query(request.query_params)
    return apply_state(state, data, CHALLENGE_SEARCH_FIELDS, date_field='submitted_date')


class ReportListCreateView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (LECTURER,)
    read_roles = ()

    def get(self, request):
        return Response(_filtered_reports(request))

    def post(self, request):
        serializer = ReportSerializer(data=request.data, context={'request': request, 'lecturer': request.user})
        serializer.is_valid(raise_exception=True)
        report = serializer.save(lecturer=request.user)
        logger.info('Report %s submitted by lecturer id=%s', report.pk, request.user.id)
        return Response(ReportSerializer(report).data, status=status.HTTP_201_CREATED)


class ReportFilterOptionsView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        data = ReportSerializer(access_control.visible_reports(request.user), many=True).data
        return Response({
            'programs': distinct_values(data, 'program_code'),
            'statuses': list(Report.Status.values),
        })


class ReportDetailView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request, pk: int):
        report = get_object_or_404(access_control.visible_reports(request.user), pk=pk)
        return Response(ReportSerializer(report).data)


class ReportFeedbackView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (PRINCIPAL_LECTURER,)

    def put(self, request, pk: int):
        report = get_object_or_404(Report, pk=pk)
        serializer = ReportFeedbackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        report = report_review.submit_feedback(
            report,
            data['principal_feedback'],
            reviewer=request.user,
            status=data.get('status'),
            expected_revision=data.get('revision'),
        )
        return Response(ReportSerializer(report).data)


class ReportSignAttendanceView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (STUDENT,)

    def put(self, request, pk: int):
        report = get_object_or_404(access_control.visible_reports(request.user), pk=pk)
        serializer = SignAttendanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        report = report_review.sign_attendance(
            report,
            data['student_name'],
            data['student_number'],
            expected_revision=data.get('revision'),
        )
        return Response(ReportSerializer(report).data)


class ReportExportView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        context = export_tables.context_for(request.user)
        if request.user.role == STUDENT:
            table = export_tables.student_reports_table(context)
        else:
            table = export_tables.review_reports_table(context)
        return export_response(request, table, _filtered_reports(request))


class ChallengeListCreateView(APIView):
    """Lecturer challenges; reviewers also see student ones unless ?kind= narrows it."""
    permission_classes = (HasRole,)
    allowed_roles = (LECTURER,)
    read_roles = (LECTURER, PRINCIPAL_LECTURER, PROGRAM_LEADER)

    def get(self, request):
        kind = request.query_params.get('kind')
        if request.user.role == LECTURER:
            kind = Challenge.Kind.LECTURER
        return Response(_filtered_challenges(request, kind=kind))

    def post(self, request):
        serializer = LecturerChallengeSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        challenge = serializer.save(raised_by=request.user, kind=Challenge.Kind.LECTURER)
        logger.info('Lecturer challenge %s raised by user id=%s', challenge.pk, request.user.id)
        return Response(ChallengeSerializer(challenge).data, status=status.HTTP_201_CREATED)


class ChallengeStatusUpdateMixin:
    def _update_status(self, request, challenge):
        if not access_control.can_update_challenge(challenge, request.user):
            return Response({'detail': 'Not authorized to update this challenge'}, status=status.HTTP_403_FORBIDDEN)
        serializer = ChallengeStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        challenge = challenge_lifecycle.set_status(
            challenge,
            data['status'],
            feedback=data.get('feedback'),
            expected_revision=data.get('revision'),
            acted_by=request.user,
        )
        return Response(ChallengeSerializer(challenge).data)


class ChallengeUpdateView(ChallengeStatusUpdateMixin, APIView):
    permission_classes = (HasRole,)
    allowed_roles = (PRINCIPAL_LECTURER, PROGRAM_LEADER)

    def put(self, request, pk: int):
        challenge = get_object_or_404(Challenge, pk=pk)
        return self._update_status(request, challenge)

    patch = put


class StudentChallengeListCreateView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (STUDENT,)

    def get(self, request):
        return Response(_filtered_challenges(request, kind=Challenge.Kind.STUDENT))

    def post(self, request):
        serializer = StudentChallengeSerializer(data=request.data, context={'request': request, 'student': request.user})
        serializer.is_valid(raise_exception=True)
        challenge = serializer.save(raised_by=request.user, kind=Challenge.Kind.STUDENT)
        logger.info('Student challenge %s raised by user id=%s', challenge.pk, request.user.id)
        return Response(ChallengeSerializer(challenge).data, status=status.HTTP_201_CREATED)


class StudentChallengeUpdateView(ChallengeStatusUpdateMixin, APIView):
    permission_classes = (HasRole,)
    allowed_roles = (STUDENT,)

    def put(self, request, pk: int):
        challenge = get_object_or_404(Challenge, pk=pk, kind=Challenge.Kind.STUDENT, raised_by=request.user)
        return self._update_status(request, challenge)

    patch = put


class ChallengeExportView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        kind = request.query_params.get('kind')
        if request.user.role == STUDENT:
            kind = Challenge.Kind.STUDENT
        elif request.user.role == LECTURER:
            kind = Challenge.Kind.LECTURER
        table = export_tables.challenges_table(export_tables.context_for(request.user))
        return export_response(request, table, _filtered_challenges(request, kind=kind))


class ModuleRatingCreateView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (STUDENT,)

    def post(self, request):
        serializer = ModuleRatingSerializer(data=request.data, context={'request': request, 'student': request.user})
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        with transaction.atomic():
            rating, created = ModuleRating.objects.update_or_create(
                module=data['module'],
                rated_by=request.user,
                defaults={'rating': data['rating'], 'comments': data.get('comments') or ''},
            )
        logger.info('Module %s rated %s by user id=%s (created=%s)', rating.module_id, rating.rating, request.user.id, created)
        return Response(
            ModuleRatingSerializer(rating).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


def _rating_summary(request):
    data = ModuleRatingSerializer(access_control.visible_ratings(request.user), many=True).data
    groups = [g.as_dict() for g in group_by_module(data)]
    return search_records(groups, request.query_params.get('search'), RATING_GROUP_SEARCH_FIELDS)


class RatingListView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        data = ModuleRatingSerializer(access_control.visible_ratings(request.user), many=True).data
        return Response(search_records(data, request.query_params.get('search'), RATING_SEARCH_FIELDS))


class RatingSummaryView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        return Response(_rating_summary(request))


class RatingExportView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (PRINCIPAL_LECTURER, PROGRAM_LEADER, LECTURER)

    def get(self, request):
        table = export_tables.rating_summary_table(export_tables.context_for(request.user))
        return export_response(request, table, _rating_summary(request))


class DashboardView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        return Response(dashboard_stats(request.user))
