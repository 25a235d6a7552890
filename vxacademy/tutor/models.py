from django.conf import settings
from django.db import models
from django.utils import timezone


class AiTutorConversation(models.Model):
    """One running conversation per user; messages are {role, content} dicts"""
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='tutor_conversation')
    messages = models.JSONField(default=list)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'ai_tutor_conversations'

    def __str__(self):
        return f"Conversation for user {self.user_id} ({len(self.messages)} messages)"
