from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import (
    FacultyViewSet,
    LectureAssignmentViewSet,
    LecturerListView,
    ModuleViewSet,
    ProgramsByFacultyView,
    ProgramViewSet,
    StudentListView,
    StudentModulesView,
)

router = DefaultRouter()
router.register(r'faculties', FacultyViewSet, basename='faculty')
router.register(r'programs', ProgramViewSet, basename='program')
router.register(r'modules', ModuleViewSet, basename='module')
router.register(r'lecture-assignments', LectureAssignmentViewSet, basename='lecture-assignment')

urlpatterns = [
    # explicit paths go before the router so they are not read as detail pks
    path('programs/by-faculty/<int:faculty_id>/', ProgramsByFacultyView.as_view(), name='programs-by-faculty'),
    path('lecturers/', LecturerListView.as_view(), name='lecturers'),
    path('students/', StudentListView.as_view(), name='students'),
    path('student/modules/', StudentModulesView.as_view(), name='student-modules'),
    path('', include(router.urls)),
]
