"""
Health Check Views

Endpoints used by the load balancer and by operators:
- API liveness
- Database connectivity and schema presence
"""

import logging

from django.apps import apps
from django.db import connection
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class HealthCheckService:
    """Service for performing health checks on system components."""

    @staticmethod
    def check_database():
        """
        Check database connectivity with a trivial query.

        Returns:
            dict: Health status with details
        """
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            return {
                'status': 'healthy',
                'database': 'connected',
                'vendor': connection.vendor,
            }
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {
                'status': 'unhealthy',
                'database': 'disconnected',
                'error': str(e)
            }

    @staticmethod
    def check_tables():
        """
        Verify that the tables of every installed model exist.

        Returns:
            dict: Table status with the names of missing tables
        """
        try:
            required_tables = {model._meta.db_table for model in apps.get_models()}
            existing_tables = set(connection.introspection.table_names())
            missing = sorted(required_tables - existing_tables)

            return {
                'status': 'healthy' if not missing else 'degraded',
                'total_required': len(required_tables),
                'total_existing': len(existing_tables),
                'missing': missing,
            }
        except Exception as e:
            logger.error(f"Table health check failed: {e}")
            return {
                'status': 'unhealthy',
                'error': str(e)
            }


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness: the API process is up and answering."""
    return Response({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def database_status(request):
    """Database connectivity plus table presence."""
    db_status = HealthCheckService.check_database()
    table_status = HealthCheckService.check_tables()

    response_data = {
        'status': db_status['status'],
        'database': db_status,
        'tables': table_status,
    }

    if db_status['status'] == 'healthy' and table_status['status'] in ['healthy', 'degraded']:
        return Response(response_data, status=status.HTTP_200_OK)
    return Response(response_data, status=status.HTTP_503_SERVICE_UNAVAILABLE)
