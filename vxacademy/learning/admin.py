from django.contrib import admin

from .models import AssessmentAttempt, Badge, BlockCompletion, Certificate, UserBadge, UserProgress


@admin.register(UserProgress)
class UserProgressAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'course', 'percent_complete', 'completed', 'last_accessed']
    list_filter = ['completed']
    # Recomputed by the progress service only
    readonly_fields = ['percent_complete', 'completed']


@admin.register(BlockCompletion)
class BlockCompletionAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'block', 'completed_at']


@admin.register(AssessmentAttempt)
class AssessmentAttemptAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'assessment', 'score', 'passed', 'completed_at']
    list_filter = ['passed']


@admin.register(Badge)
class BadgeAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'type', 'xp_points']
    list_filter = ['type']


@admin.register(UserBadge)
class UserBadgeAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'badge', 'earned_at']


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ['certificate_number', 'user', 'course', 'status', 'issue_date', 'expiry_date']
    list_filter = ['status']
    search_fields = ['certificate_number', 'user__email']
