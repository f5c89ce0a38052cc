from django.contrib.auth import get_user_model
from rest_framework import serializers

from .models import Faculty, LectureAssignment, Module, Program

User = get_user_model()


class FacultySerializer(serializers.ModelSerializer):
    class Meta:
        model = Faculty
        fields = ('id', 'code', 'name')


class ProgramSerializer(serializers.ModelSerializer):
    faculty_id = serializers.PrimaryKeyRelatedField(queryset=Faculty.objects.all(), source='faculty')
    faculty_name = serializers.CharField(source='faculty.name', read_only=True)

    class Meta:
        model = Program
        fields = ('id', 'program_code', 'program_name', 'faculty_id', 'faculty_name')


class ModuleSerializer(serializers.ModelSerializer):
    program_id = serializers.PrimaryKeyRelatedField(queryset=Program.objects.all(), source='program')
    faculty_id = serializers.PrimaryKeyRelatedField(
        queryset=Faculty.objects.all(), source='faculty', required=False, allow_null=True
    )
    program_name = serializers.CharField(source='program.program_name', read_only=True)
    program_code = serializers.CharField(source='program.program_code', read_only=True)

    class Meta:
        model = Module
        fields = ('id', 'module_name', 'program_id', 'program_name', 'program_code', 'faculty_id',
                  'total_registered_students')

    def validate(self, attrs):
        program = attrs.get('program') or getattr(self.instance, 'program', None)
        faculty = attrs.get('faculty')
        if program is not None and faculty is not None and program.faculty_id != faculty.id:
            raise serializers.ValidationError('Program does not belong to the selected faculty.')
        return attrs


class LectureAssignmentSerializer(serializers.ModelSerializer):
    lecturer_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=User.Role.LECTURER), source='lecturer'
    )
    module_id = serializers.PrimaryKeyRelatedField(queryset=Module.objects.all(), source='module')
    program_id = serializers.PrimaryKeyRelatedField(
        queryset=Program.objects.all(), source='program', required=False
    )
    lecturer_name = serializers.CharField(source='lecturer.display_name', read_only=True)
    module_name = serializers.CharField(source='module.module_name', read_only=True)
    program_name = serializers.CharField(source='program.program_name', read_only=True)
    program_code = serializers.CharField(source='program.program_code', read_only=True)
    faculty_id = serializers.IntegerField(source='program.faculty_id', read_only=True)
    assigned_by_name = serializers.SerializerMethodField()

    class Meta:
        model = LectureAssignment
        fields = ('id', 'lecturer_id', 'lecturer_name', 'module_id', 'module_name', 'program_id', 'program_name',
                  'program_code', 'faculty_id', 'assigned_by_name', 'created_at')
        read_only_fields = ('created_at',)

    def get_assigned_by_name(self, obj):
        return obj.assigned_by.display_name if obj.assigned_by_id else None

    def validate(self, attrs):
        module = attrs.get('module')
        program = attrs.get('program')
        if module is not None and program is None:
            attrs['program'] = module.program
        elif module is not None and program.id != module.program_id:
            raise serializers.ValidationError('Module does not belong to the selected program.')
        return attrs


class PersonSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)
    program_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = ('id', 'username', 'name', 'email', 'role', 'student_number', 'program_id')
