import logging

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import AiTutorConversation
from .responder import generate_reply, initial_messages

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send_message(request):
    """Append the learner's message and the tutor's reply to their conversation"""
    message = request.data.get('message')
    if not isinstance(message, str) or not message.strip():
        return Response({'message': 'Message is required'}, status=status.HTTP_400_BAD_REQUEST)

    reply = generate_reply(message)

    with transaction.atomic():
        conversation, created = AiTutorConversation.objects.select_for_update().get_or_create(
            user=request.user,
            defaults={'messages': initial_messages()},
        )
        conversation.messages = list(conversation.messages) + [
            {'role': 'user', 'content': message},
            {'role': 'assistant', 'content': reply},
        ]
        conversation.save(update_fields=['messages', 'updated_at'])

    logger.info(f"Tutor reply sent to user {request.user.pk} ({len(conversation.messages)} messages)")
    return Response({
        'message': reply,
        'conversation': {
            'id': conversation.pk,
            'messages': conversation.messages,
        },
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def conversation(request):
    try:
        convo = AiTutorConversation.objects.get(user=request.user)
    except AiTutorConversation.DoesNotExist:
        return Response({'messages': []})
    return Response({'id': convo.pk, 'messages': convo.messages})
