from typing import Optional

from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken

from academics.models import Faculty, Program

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)
    program_id = serializers.IntegerField(read_only=True)
    faculty_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = ('id', 'username', 'name', 'email', 'role', 'student_number', 'program_id', 'faculty_id')


class RegisterSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    email = serializers.EmailField()
    faculty_id = serializers.PrimaryKeyRelatedField(
        queryset=Faculty.objects.all(), source='faculty', required=False, allow_null=True
    )
    program_id = serializers.PrimaryKeyRelatedField(
        queryset=Program.objects.all(), source='program', required=False, allow_null=True
    )

    class Meta:
        model = User
        fields = ('id', 'username', 'first_name', 'last_name', 'email', 'password', 'role',
                  'student_number', 'faculty_id', 'program_id')
        read_only_fields = ('id',)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('A user with that email already exists.')
        return value

    def validate(self, attrs):
        program = attrs.get('program')
        faculty = attrs.get('faculty')
        if program is not None and faculty is not None and program.faculty_id != faculty.id:
            raise serializers.ValidationError('Program does not belong to the selected faculty.')
        if program is not None and faculty is None:
            attrs['faculty'] = program.faculty
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user


class IdentifierTokenObtainPairSerializer(serializers.Serializer):
    """Authenticate using `identifier` (or `email`) + `password` and return a JWT pair.

    `identifier` may be an email (contains '@'), a username or a student number.
    """
    identifier = serializers.CharField(write_only=True, required=False)
    email = serializers.CharField(write_only=True, required=False)
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        identifier = (attrs.get('identifier') or attrs.get('email') or '').strip()
        password = attrs.get('password')

        if not identifier or not password:
            raise serializers.ValidationError('Must include "email" and "password".')

        user: Optional[User] = None

        if '@' in identifier:
            user = User.objects.filter(email__iexact=identifier).first()
        if user is None:
            user = User.objects.filter(username__iexact=identifier).first()
        if user is None:
            user = User.objects.filter(student_number__iexact=identifier).exclude(student_number='').first()

        # generic error message to avoid leaking which part failed
        invalid_msg = 'Invalid email or password.'

        if user is None or not user.check_password(password):
            raise serializers.ValidationError(invalid_msg)

        if not user.is_active:
            raise serializers.ValidationError('User account is disabled.')

        refresh = RefreshToken.for_user(user)
        # role claim lets the client pick a dashboard without a second request
        refresh['role'] = user.role

        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
            'user': UserSerializer(user).data,
        }
