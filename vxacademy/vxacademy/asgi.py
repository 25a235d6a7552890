"""
ASGI config for the vxacademy project.

It exposes the ASGI callable as a module-level variable named ``application``.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'vxacademy.settings')

application = get_asgi_application()
