"""
Learner state: progress, completions, attempts, badges and certificates
"""
from django.conf import settings
from django.db import models
from django.utils import timezone


class UserProgress(models.Model):
    """Per (user, course) aggregate, written only by CourseProgressService"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='course_progress')
    course = models.ForeignKey('content.Course', on_delete=models.CASCADE, related_name='progress_records')
    completed = models.BooleanField(default=False)
    percent_complete = models.IntegerField(default=0)
    last_accessed = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'user_progress'
        unique_together = ('user', 'course')
        ordering = ['-last_accessed', '-id']

    def __str__(self):
        return f"{self.user_id}:{self.course_id} {self.percent_complete}%"


class BlockCompletion(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='block_completions')
    block = models.ForeignKey('content.LearningBlock', on_delete=models.CASCADE, related_name='completions')
    completed_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'block_completions'
        unique_together = ('user', 'block')


class AssessmentAttempt(models.Model):
    """Append-only; failed attempts are kept too"""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='assessment_attempts')
    assessment = models.ForeignKey('content.Assessment', on_delete=models.CASCADE, related_name='attempts')
    score = models.FloatField()
    passed = models.BooleanField(default=False)
    answers = models.JSONField(blank=True, null=True)
    started_at = models.DateTimeField(default=timezone.now)
    completed_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        db_table = 'assessment_attempts'
        ordering = ['-started_at', '-id']


class Badge(models.Model):
    """
    Badge catalog. ``type`` drives automatic awards: 'assessment' for the
    first passed assessment, 'course_completion' for finishing a course.
    """
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    image_url = models.TextField(blank=True, null=True)
    xp_points = models.IntegerField(default=100, null=True)
    type = models.CharField(max_length=50, default='achievement')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'badges'
        ordering = ['id']

    def __str__(self):
        return self.name


class UserBadge(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='user_badges')
    badge = models.ForeignKey(Badge, on_delete=models.CASCADE, related_name='awards')
    earned_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'user_badges'
        ordering = ['-earned_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'badge'], name='unique_user_badge'),
        ]


class Certificate(models.Model):
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('expired', 'Expired'),
        ('revoked', 'Revoked'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='certificates')
    course = models.ForeignKey('content.Course', on_delete=models.CASCADE, related_name='certificates')
    certificate_number = models.CharField(max_length=100, unique=True)
    issue_date = models.DateTimeField(default=timezone.now)
    expiry_date = models.DateTimeField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'certificates'
        ordering = ['-issue_date', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'course'], name='unique_user_course_certificate'),
        ]

    def __str__(self):
        return self.certificate_number

    @property
    def is_expired(self):
        return self.expiry_date is not None and self.expiry_date <= timezone.now()
