from django.contrib import admin

from .models import AiTutorConversation


@admin.register(AiTutorConversation)
class AiTutorConversationAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'updated_at']
    search_fields = ['user__email', 'user__name']
    readonly_fields = ['created_at', 'updated_at']
