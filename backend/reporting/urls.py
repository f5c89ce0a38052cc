from django.urls import path

from .views import (
    ChallengeExportView,
    ChallengeListCreateView,
    ChallengeUpdateView,
    DashboardView,
    ModuleRatingCreateView,
    RatingExportView,
    RatingListView,
    RatingSummaryView,
    ReportDetailView,
    ReportExportView,
    ReportFeedbackView,
    ReportFilterOptionsView,
    ReportListCreateView,
    ReportSignAttendanceView,
    StudentChallengeListCreateView,
    StudentChallengeUpdateView,
)

urlpatterns = [
    path('reports/', ReportListCreateView.as_view(), name='reports'),
    path('reports/export/', ReportExportView.as_view(), name='reports-export'),
    path('reports/filters/', ReportFilterOptionsView.as_view(), name='reports-filters'),
    path('reports/<int:pk>/', ReportDetailView.as_view(), name='report-detail'),
    path('reports/<int:pk>/feedback/', ReportFeedbackView.as_view(), name='report-feedback'),
    path('reports/<int:pk>/sign-attendance/', ReportSignAttendanceView.as_view(), name='report-sign-attendance'),
    path('challenges/', ChallengeListCreateView.as_view(), name='challenges'),
    path('challenges/export/', ChallengeExportView.as_view(), name='challenges-export'),
    path('challenges/<int:pk>/', ChallengeUpdateView.as_view(), name='challenge-update'),
    path('student/challenges/', StudentChallengeListCreateView.as_view(), name='student-challenges'),
    path('student/challenges/<int:pk>/', StudentChallengeUpdateView.as_view(), name='student-challenge-update'),
    path('module-ratings/', ModuleRatingCreateView.as_view(), name='module-ratings'),
    path('ratings/', RatingListView.as_view(), name='ratings'),
    path('ratings/summary/', RatingSummaryView.as_view(), name='ratings-summary'),
    path('ratings/export/', RatingExportView.as_view(), name='ratings-export'),
    path('dashboard/', DashboardView.as_view(), name='reporting-dashboard'),
]
