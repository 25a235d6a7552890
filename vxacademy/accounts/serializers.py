"""
Account serializers: users, roles and role-mandatory courses
"""
from django.contrib.auth.validators import UnicodeUsernameValidator
from rest_framework import serializers

from content.models import Course
from .models import SYSTEM_ROLES, Role, RoleMandatoryCourse, User


class UserSerializer(serializers.ModelSerializer):
    """Public user representation, never exposes the password hash"""

    class Meta:
        model = User
        fields = ['id', 'username', 'name', 'email', 'role', 'xp_points', 'avatar', 'language', 'created_at']
        read_only_fields = ['id', 'xp_points', 'created_at']


def validate_role_name(value):
    if value in SYSTEM_ROLES or Role.objects.filter(name=value).exists():
        return value
    raise serializers.ValidationError(f"Unknown role '{value}'")


class AdminUserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    role = serializers.CharField(required=False, default='frontliner', validators=[validate_role_name])
    course_ids = serializers.ListField(
        child=serializers.IntegerField(), write_only=True, required=False, default=list
    )

    class Meta:
        model = User
        fields = ['id', 'username', 'password', 'name', 'email', 'role', 'avatar', 'language', 'course_ids']
        extra_kwargs = {
            'name': {'required': True, 'allow_blank': False},
            'email': {'required': True, 'validators': []},
            'username': {'validators': [UnicodeUsernameValidator()]},
        }

    def validate_username(self, value):
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError('Username already exists')
        return value

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('Email address already in use')
        return value

    def create(self, validated_data):
        validated_data.pop('course_ids', None)
        password = validated_data.pop('password')
        return User.objects.create_user(password=password, **validated_data)


class AdminUserUpdateSerializer(serializers.ModelSerializer):
    role = serializers.CharField(required=False, validators=[validate_role_name])

    class Meta:
        model = User
        fields = ['id', 'username', 'name', 'email', 'role', 'xp_points', 'avatar', 'language']
        read_only_fields = ['id', 'xp_points']
        extra_kwargs = {
            'email': {'validators': []},
            'username': {'validators': [UnicodeUsernameValidator()]},
        }

    def validate_email(self, value):
        qs = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('Email address already in use')
        return value

    def validate_username(self, value):
        qs = User.objects.filter(username=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError('Username already exists')
        return value


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """What a user may change about themselves"""

    class Meta:
        model = User
        fields = ['name', 'email', 'language']
        extra_kwargs = {'email': {'validators': []}}

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError('Email address already in use')
        return value


class RoleSerializer(serializers.ModelSerializer):
    is_system = serializers.BooleanField(read_only=True)

    class Meta:
        model = Role
        fields = ['id', 'name', 'description', 'permissions', 'is_system', 'created_at']
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {
            'description': {'required': True, 'allow_blank': False, 'allow_null': False},
        }


class RoleMandatoryCourseSerializer(serializers.ModelSerializer):
    role_id = serializers.IntegerField(read_only=True)
    course_id = serializers.PrimaryKeyRelatedField(source='course', queryset=Course.objects.all())
    course_name = serializers.CharField(source='course.name', read_only=True)

    class Meta:
        model = RoleMandatoryCourse
        fields = ['id', 'role_id', 'course_id', 'course_name', 'created_at']
        read_only_fields = ['id', 'created_at']
