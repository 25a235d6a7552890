from rest_framework import serializers

from .models import AssessmentAttempt, Badge, BlockCompletion, Certificate, UserBadge, UserProgress


class UserProgressSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    course_id = serializers.IntegerField(read_only=True)
    course_name = serializers.CharField(source='course.name', read_only=True)

    class Meta:
        model = UserProgress
        fields = ['id', 'user_id', 'course_id', 'course_name', 'completed', 'percent_complete', 'last_accessed']
        read_only_fields = fields


class BlockCompletionSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    block_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = BlockCompletion
        fields = ['id', 'user_id', 'block_id', 'completed_at']
        read_only_fields = fields


class AssessmentAttemptSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    assessment_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = AssessmentAttempt
        fields = ['id', 'user_id', 'assessment_id', 'score', 'passed', 'answers', 'started_at', 'completed_at']
        read_only_fields = fields


class BadgeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Badge
        fields = ['id', 'name', 'description', 'image_url', 'xp_points', 'type', 'created_at']
        read_only_fields = ['id', 'created_at']


class UserBadgeSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    badge = BadgeSerializer(read_only=True)

    class Meta:
        model = UserBadge
        fields = ['id', 'user_id', 'badge', 'earned_at']
        read_only_fields = fields


class CertificateSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)
    course_id = serializers.IntegerField(read_only=True)
    course = serializers.SerializerMethodField()
    user = serializers.SerializerMethodField()

    class Meta:
        model = Certificate
        fields = [
            'id', 'user_id', 'course_id', 'certificate_number', 'issue_date', 'expiry_date', 'status',
            'course', 'user', 'created_at',
        ]
        read_only_fields = fields

    def get_course(self, obj):
        return {'id': obj.course.pk, 'name': obj.course.name, 'description': obj.course.description}

    def get_user(self, obj):
        return {'id': obj.user.pk, 'name': obj.user.name, 'username': obj.user.username}
