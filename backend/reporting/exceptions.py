from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidChallengeStatus(ValidationError):
    pass


class StaleRevision(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This record was changed by someone else. Reload it and try again.'
    default_code = 'stale_revision'


class AttendanceAlreadySigned(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Attendance for this report has already been signed.'
    default_code = 'attendance_already_signed'
