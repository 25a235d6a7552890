"""
URL configuration for the vxacademy project.

Every API route lives under /api/ without a trailing slash.
"""
from django.contrib import admin
from django.urls import include, path

from .health_check import database_status, health_check

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health', health_check, name='health-check'),
    path('api/health/database', database_status, name='health-database'),
    path('api/', include('accounts.urls')),
    path('api/', include('content.urls')),
    path('api/', include('learning.urls')),
    path('api/', include('notifications.urls')),
    path('api/', include('tutor.urls')),
]
