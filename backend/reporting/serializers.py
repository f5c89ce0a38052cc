from rest_framework import serializers

from academics.models import Faculty, LectureAssignment, Module, Program
from .models import Challenge, ModuleRating, Report


class ReportSerializer(serializers.ModelSerializer):
    lecturer_id = serializers.IntegerField(read_only=True)
    lecturer_name = serializers.CharField(source='lecturer.display_name', read_only=True)
    module_id = serializers.PrimaryKeyRelatedField(queryset=Module.objects.all(), source='module')
    module_name = serializers.CharField(source='module.module_name', read_only=True)
    program_id = serializers.PrimaryKeyRelatedField(
        queryset=Program.objects.all(), source='program', required=False
    )
    program_name = serializers.CharField(source='program.program_name', read_only=True)
    program_code = serializers.CharField(source='program.program_code', read_only=True)
    faculty_id = serializers.PrimaryKeyRelatedField(
        queryset=Faculty.objects.all(), source='faculty', required=False, allow_null=True
    )
    total_registered_students = serializers.IntegerField(min_value=0, required=False)
    actual_students_present = serializers.IntegerField(min_value=0)
    is_signed = serializers.BooleanField(read_only=True)

    class Meta:
        model = Report
        fields = (
            'id', 'lecturer_id', 'lecturer_name', 'module_id', 'module_name', 'program_id', 'program_name',
            'program_code', 'faculty_id', 'week_of_reporting', 'date_of_lecture', 'scheduled_time', 'venue',
            'actual_students_present', 'total_registered_students', 'topic_taught', 'learning_outcomes',
            'recommendations', 'status', 'principal_feedback', 'student_name', 'student_number', 'is_signed',
            'signed_at', 'revision', 'created_at', 'updated_at',
        )
        read_only_fields = (
            'status', 'principal_feedback', 'student_name', 'student_number', 'signed_at', 'revision',
            'created_at', 'updated_at',
        )

    def validate(self, attrs):
        module = attrs.get('module')
        program = attrs.get('program')
        if module is not None:
            if program is None:
                attrs['program'] = program = module.program
            elif program.id != module.program_id:
                raise serializers.ValidationError('Module does not belong to the selected program.')
            if attrs.get('faculty') is None:
                attrs['faculty'] = program.faculty
            if 'total_registered_students' not in attrs:
                attrs['total_registered_students'] = module.total_registered_students

        lecturer = self.context.get('lecturer')
        if lecturer is not None and module is not None:
            if not LectureAssignment.objects.filter(lecturer=lecturer, module=module).exists():
                raise serializers.ValidationError('You are not assigned to this module.')
        return attrs


class ChallengeSerializer(serializers.ModelSerializer):
    raised_by_id = serializers.IntegerField(read_only=True)
    raised_by_name = serializers.CharField(source='raised_by.display_name', read_only=True)
    # lecturer-facing clients call this field lecturer_id
    lecturer_id = serializers.IntegerField(source='raised_by_id', read_only=True)
    module_id = serializers.PrimaryKeyRelatedField(queryset=Module.objects.all(), source='module')
    module_name = serializers.CharField(source='module.module_name', read_only=True)
    program_id = serializers.PrimaryKeyRelatedField(
        queryset=Program.objects.all(), source='program', required=False, allow_null=True
    )
    faculty_id = serializers.PrimaryKeyRelatedField(
        queryset=Faculty.objects.all(), source='faculty', required=False, allow_null=True
    )
    program_name = serializers.SerializerMethodField()
    program_code = serializers.SerializerMethodField()

    class Meta:
        model = Challenge
        fields = (
            'id', 'kind', 'raised_by_id', 'raised_by_name', 'lecturer_id', 'module_id', 'module_name',
            'program_id', 'program_name', 'program_code', 'faculty_id', 'title', 'description', 'priority',
            'challenge_type', 'impact', 'proposed_solution', 'status', 'feedback', 'submitted_date', 'resolved_date',
            'revision', 'created_at', 'updated_at',
        )
        read_only_fields = (
            'kind', 'status', 'feedback', 'submitted_date', 'resolved_date', 'revision', 'created_at', 'updated_at',
        )

    def get_program_name(self, obj):
        return obj.program.program_name if obj.program_id else None

    def get_program_code(self, obj):
        return obj.program.program_code if obj.program_id else None

    def validate(self, attrs):
        module = attrs.get('module')
        if module is not None:
            if attrs.get('program') is None:
                attrs['program'] = module.program
            if attrs.get('faculty') is None:
                attrs['faculty'] = attrs['program'].faculty
        return attrs


class LecturerChallengeSerializer(ChallengeSerializer):
    challenge_type = serializers.CharField(max_length=64)

    class Meta(ChallengeSerializer.Meta):
        read_only_fields = ChallengeSerializer.Meta.read_only_fields + ('title', 'priority')


class StudentChallengeSerializer(ChallengeSerializer):
    title = serializers.CharField(max_length=255)
    priority = serializers.ChoiceField(choices=Challenge.Priority.choices, default=Challenge.Priority.MEDIUM)

    class Meta(ChallengeSerializer.Meta):
        read_only_fields = ChallengeSerializer.Meta.read_only_fields + (
            'challenge_type', 'impact', 'proposed_solution',
        )

    def validate_module_id(self, module):
        student = self.context.get('student')
        if student is not None and student.program_id is not None and module.program_id != student.program_id:
            raise serializers.ValidationError('Module is not part of your program.')
        return module


class ChallengeStatusSerializer(serializers.Serializer):
    status = serializers.CharField()
    # principal dashboard sends admin_feedback, student dashboard sends feedback
    feedback = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    admin_feedback = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    revision = serializers.IntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        attrs['feedback'] = attrs.get('admin_feedback') or attrs.get('feedback')
        return attrs


class ReportFeedbackSerializer(serializers.Serializer):
    principal_feedback = serializers.CharField()
    status = serializers.ChoiceField(
        choices=(Report.Status.REVIEWED, Report.Status.COMPLETED), required=False
    )
    revision = serializers.IntegerField(required=False, allow_null=True)


class SignAttendanceSerializer(serializers.Serializer):
    student_name = serializers.CharField(allow_blank=True)
    student_number = serializers.CharField(allow_blank=True)
    revision = serializers.IntegerField(required=False, allow_null=True)


class ModuleRatingSerializer(serializers.ModelSerializer):
    module_id = serializers.PrimaryKeyRelatedField(queryset=Module.objects.all(), source='module')
    module_name = serializers.CharField(source='module.module_name', read_only=True)
    program_name = serializers.CharField(source='module.program.program_name', read_only=True)
    program_code = serializers.CharField(source='module.program.program_code', read_only=True)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    rated_by_name = serializers.SerializerMethodField()

    class Meta:
        model = ModuleRating
        fields = ('id', 'module_id', 'module_name', 'program_name', 'program_code', 'rating', 'comments',
                  'rated_by_name', 'created_at')
        read_only_fields = ('created_at',)
        # one rating per student per module; re-rating updates in place
        validators = []

    def get_rated_by_name(self, obj):
        return obj.rated_by.display_name if obj.rated_by_id else None

    def validate_module_id(self, module):
        student = self.context.get('student')
        if student is not None and student.program_id is not None and module.program_id != student.program_id:
            raise serializers.ValidationError('Module is not part of your program.')
        return module
