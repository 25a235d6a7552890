from django.urls import path

from . import views

urlpatterns = [
    path('ai-tutor/message', views.send_message, name='ai-tutor-message'),
    path('ai-tutor/conversation', views.conversation, name='ai-tutor-conversation'),
]
