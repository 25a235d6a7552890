from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    """In-app notification for a single user"""
    NOTIFICATION_TYPE_CHOICES = [
        ('course_assigned', 'Course Assigned'),
        ('badge_earned', 'Badge Earned'),
        ('achievement', 'Achievement'),
        ('leaderboard_update', 'Leaderboard Update'),
        ('course_reminder', 'Course Reminder'),
    ]

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='notifications')
    type = models.CharField(max_length=30, choices=NOTIFICATION_TYPE_CHOICES)
    title = models.CharField(max_length=255)
    message = models.TextField()
    read = models.BooleanField(default=False)
    metadata = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'read'], name='notif_user_read_idx'),
        ]

    def __str__(self):
        return f"{self.title} -> {self.user_id}"

    def mark_as_read(self):
        if not self.read:
            self.read = True
            self.save(update_fields=['read'])
