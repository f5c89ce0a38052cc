import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import HasRole
from .models import Faculty, LectureAssignment, Module, Program
from .serializers import (
    FacultySerializer,
    LectureAssignmentSerializer,
    ModuleSerializer,
    PersonSerializer,
    ProgramSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()

PROGRAM_LEADER = User.Role.PROGRAM_LEADER


class ProgramLeaderWriteViewSet(viewsets.ModelViewSet):
    """Readable by any signed-in user, writable by program leaders."""
    permission_classes = (HasRole,)
    allowed_roles = (PROGRAM_LEADER,)
    read_roles = ()

    def perform_create(self, serializer):
        obj = serializer.save()
        logger.info('%s created id=%s by user id=%s', obj.__class__.__name__, obj.pk, self.request.user.id)


class FacultyViewSet(ProgramLeaderWriteViewSet):
    queryset = Faculty.objects.all()
    serializer_class = FacultySerializer


class ProgramViewSet(ProgramLeaderWriteViewSet):
    queryset = Program.objects.select_related('faculty')
    serializer_class = ProgramSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        faculty_id = self.request.query_params.get('faculty')
        if faculty_id:
            qs = qs.filter(faculty_id=faculty_id)
        return qs


class ProgramsByFacultyView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request, faculty_id: int):
        faculty = get_object_or_404(Faculty, pk=faculty_id)
        qs = Program.objects.filter(faculty=faculty).select_related('faculty')
        return Response(ProgramSerializer(qs, many=True).data)


class ModuleViewSet(ProgramLeaderWriteViewSet):
    queryset = Module.objects.select_related('program')
    serializer_class = ModuleSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        program_id = self.request.query_params.get('program')
        if program_id:
            qs = qs.filter(program_id=program_id)
        return qs


class LectureAssignmentViewSet(ProgramLeaderWriteViewSet):
    queryset = LectureAssignment.objects.select_related('lecturer', 'module', 'program', 'assigned_by')
    serializer_class = LectureAssignmentSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        user = self.request.user
        # lecturers only ever see their own teaching load
        if user.role == User.Role.LECTURER and not user.is_superuser:
            return qs.filter(lecturer=user)
        lecturer_id = self.request.query_params.get('lecturer')
        if lecturer_id:
            qs = qs.filter(lecturer_id=lecturer_id)
        return qs

    def perform_create(self, serializer):
        obj = serializer.save(assigned_by=self.request.user)
        logger.info('Assigned lecturer id=%s to module id=%s', obj.lecturer_id, obj.module_id)


class LecturerListView(APIView):
    permission_classes = (IsAuthenticated,)

    def get(self, request):
        qs = User.objects.filter(role=User.Role.LECTURER, is_active=True).order_by('username')
        return Response(PersonSerializer(qs, many=True).data)


class StudentListView(APIView):
    permission_classes = (HasRole,)
    allowed_roles = (User.Role.PROGRAM_LEADER, User.Role.PRINCIPAL_LECTURER, User.Role.LECTURER)

    def get(self, request):
        qs = User.objects.filter(role=User.Role.STUDENT, is_active=True).order_by('username')
        program_id = request.query_params.get('program')
        if program_id:
            qs = qs.filter(program_id=program_id)
        return Response(PersonSerializer(qs, many=True).data)


class StudentModulesView(APIView):
    """Modules of the program the signed-in student is enrolled in."""
    permission_classes = (HasRole,)
    allowed_roles = (User.Role.STUDENT,)

    def get(self, request):
        user = request.user
        if user.program_id is None:
            return Response({
                'modules': [],
                'hasProgram': False,
                'message': 'You are not enrolled in any program. Please contact your program leader.',
            })

        qs = Module.objects.filter(program_id=user.program_id).select_related('program')
        return Response({
            'modules': ModuleSerializer(qs, many=True).data,
            'hasProgram': True,
            'message': '',
        })
