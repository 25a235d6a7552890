import logging

from django.conf import settings
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .models import Notification
from .serializers import NotificationSerializer

logger = logging.getLogger(__name__)


class NotificationViewSet(mixins.ListModelMixin,
                          mixins.DestroyModelMixin,
                          viewsets.GenericViewSet):
    """Current user's notifications; other users' rows are invisible (404)"""
    serializer_class = NotificationSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        return Notification.objects.filter(user=self.request.user)

    def list(self, request, *args, **kwargs):
        limit = request.query_params.get('limit', settings.VX_NOTIFICATION_DEFAULT_LIMIT)
        try:
            limit = max(1, int(limit))
        except (ValueError, TypeError):
            limit = settings.VX_NOTIFICATION_DEFAULT_LIMIT

        notifications = self.get_queryset()[:limit]
        serializer = self.get_serializer(notifications, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def count(self, request):
        """Unread notification count"""
        unread_count = self.get_queryset().filter(read=False).count()
        return Response({'count': unread_count})

    @action(detail=True, methods=['patch'])
    def read(self, request, pk=None):
        notification = self.get_object()
        notification.mark_as_read()
        return Response(self.get_serializer(notification).data)

    @action(detail=False, methods=['patch'], url_path='mark-all-read')
    def mark_all_read(self, request):
        updated = self.get_queryset().filter(read=False).update(read=True)
        logger.info(f"Marked {updated} notifications as read for user {request.user.pk}")
        return Response({'message': 'All notifications marked as read', 'updated': updated})

    def destroy(self, request, *args, **kwargs):
        notification = self.get_object()
        notification.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
