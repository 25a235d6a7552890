"""
Accounts views - authentication, profile, admin user management and roles
"""
import logging
import random
import secrets

from django.contrib.auth import authenticate, login as django_login, logout as django_logout, update_session_auth_hash
from django.db import transaction
from django.views.decorators.csrf import csrf_exempt
from rest_framework import status, viewsets
from rest_framework.authtoken.models import Token
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from content.models import Course
from learning.models import UserProgress
from notifications.triggers import NotificationTriggers
from .models import Role, RoleMandatoryCourse, User
from .permissions import IsAdmin
from .serializers import (
    AdminUserCreateSerializer, AdminUserUpdateSerializer, ProfileUpdateSerializer,
    RoleMandatoryCourseSerializer, RoleSerializer, UserSerializer,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
EMAIL_BACKEND = 'accounts.auth_backend.EmailBackend'


def generate_username(email):
    """<email local part>_<random number>, retried until unused"""
    base = email.split('@')[0][:100] or 'user'
    while True:
        candidate = f"{base}_{random.randint(1, 9999)}"
        if not User.objects.filter(username=candidate).exists():
            return candidate


def assign_courses(user, course_ids):
    """Start each course for the user at 0% and notify them; unknown ids are skipped"""
    assigned = []
    for course in Course.objects.filter(pk__in=course_ids):
        UserProgress.objects.get_or_create(user=user, course=course)
        NotificationTriggers.on_course_assigned(user, course)
        assigned.append(course.pk)
    return assigned


# ============ Authentication Endpoints ============

@csrf_exempt
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Self-registration; always creates a frontliner"""
    name = (request.data.get('name') or '').strip()
    email = (request.data.get('email') or '').strip()
    password = request.data.get('password') or ''

    if not name or not email or not password:
        return Response({'message': 'Name, email and password are required'}, status=status.HTTP_400_BAD_REQUEST)
    if len(password) < MIN_PASSWORD_LENGTH:
        return Response(
            {'message': f'Password must be at least {MIN_PASSWORD_LENGTH} characters long'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if User.objects.filter(email__iexact=email).exists():
        return Response({'message': 'Email address already in use'}, status=status.HTTP_400_BAD_REQUEST)

    user = User.objects.create_user(
        username=generate_username(email),
        email=email,
        password=password,
        name=name,
        role='frontliner',
        language=request.data.get('language') or 'en',
    )
    django_login(request._request, user, backend=EMAIL_BACKEND)
    token, _ = Token.objects.get_or_create(user=user)
    NotificationTriggers.on_user_welcome(user)

    logger.info(f"Registered new user {user.pk} ({user.email})")
    return Response({'token': token.key, 'user': UserSerializer(user).data}, status=status.HTTP_201_CREATED)


@csrf_exempt
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password - returns token and user profile"""
    email = request.data.get('email') or request.data.get('username')
    password = request.data.get('password')

    if not email or not password:
        return Response({'message': 'Email and password are required'}, status=status.HTTP_400_BAD_REQUEST)

    user = authenticate(request, email=email, password=password)
    if user is None:
        logger.warning(f"Failed login attempt for {email}")
        return Response({'message': 'Invalid email or password'}, status=status.HTTP_401_UNAUTHORIZED)

    django_login(request._request, user, backend=EMAIL_BACKEND)
    token, _ = Token.objects.get_or_create(user=user)
    return Response({'token': token.key, 'user': UserSerializer(user).data})


@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    if request.user.is_authenticated:
        Token.objects.filter(user=request.user).delete()
    django_logout(request._request)
    return Response({'message': 'Logged out successfully'})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    return Response(UserSerializer(request.user).data)


# ============ Profile ============

@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Name, email and language only; role and XP are not self-service"""
    serializer = ProfileUpdateSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(UserSerializer(request.user).data)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def change_password(request):
    current_password = request.data.get('current_password')
    new_password = request.data.get('new_password')

    if not current_password or not new_password:
        return Response(
            {'message': 'Current password and new password are required'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if len(new_password) < MIN_PASSWORD_LENGTH:
        return Response(
            {'message': f'New password must be at least {MIN_PASSWORD_LENGTH} characters long'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if not request.user.check_password(current_password):
        return Response({'message': 'Current password is incorrect'}, status=status.HTTP_400_BAD_REQUEST)

    request.user.set_password(new_password)
    request.user.save(update_fields=['password'])
    update_session_auth_hash(request._request, request.user)
    logger.info(f"User {request.user.pk} changed their password")
    return Response({'message': 'Password changed successfully'})


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_preferences(request):
    # Not persisted yet; acknowledged so the client settings page works
    logger.info(f"Preferences update from user {request.user.pk}: {dict(request.data)}")
    return Response({'message': 'Preferences updated successfully', 'preferences': request.data})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_mandatory_courses(request):
    """Mandatory courses for the caller's role with their progress on each"""
    mandatory = RoleMandatoryCourse.objects.filter(role__name=request.user.role).select_related('course')
    progress_by_course = {
        p.course_id: p
        for p in UserProgress.objects.filter(user=request.user, course_id__in=[m.course_id for m in mandatory])
    }

    results = []
    for item in mandatory:
        record = progress_by_course.get(item.course_id)
        results.append({
            'id': item.course.pk,
            'name': item.course.name,
            'description': item.course.description,
            'image_url': item.course.image_url,
            'duration': item.course.duration,
            'level': item.course.level,
            'is_completed': bool(record and record.completed),
            'percent_complete': record.percent_complete if record else 0,
            'last_accessed': record.last_accessed if record else None,
        })
    return Response(results)


# ============ Admin: users ============

class AdminUserViewSet(viewsets.ModelViewSet):
    """User management; update is also open to a user editing themselves"""
    queryset = User.objects.all().order_by('id')
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ('update', 'partial_update'):
            return [IsAuthenticated()]
        return [IsAdmin()]

    def get_serializer_class(self):
        if self.action == 'create':
            return AdminUserCreateSerializer
        if self.action in ('update', 'partial_update'):
            return AdminUserUpdateSerializer
        return UserSerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        role = self.request.query_params.get('role')
        if role:
            queryset = queryset.filter(role=role)
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course_ids = serializer.validated_data.get('course_ids') or []

        with transaction.atomic():
            user = serializer.save()
        assigned = assign_courses(user, course_ids) if course_ids else []

        logger.info(f"Admin {request.user.pk} created user {user.pk} with {len(assigned)} assigned courses")
        data = UserSerializer(user).data
        data['assigned_course_ids'] = assigned
        return Response(data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        user = self.get_object()
        is_admin = request.user.is_admin
        if not is_admin and user.pk != request.user.pk:
            return Response({'message': 'Unauthorized'}, status=status.HTTP_403_FORBIDDEN)

        data = {k: v for k, v in request.data.items() if k != 'password'}
        if not is_admin:
            data = {k: v for k, v in data.items() if k in ('name', 'email', 'language')}

        serializer = AdminUserUpdateSerializer(user, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(UserSerializer(user).data)

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        if user.pk == request.user.pk:
            return Response({'message': 'You cannot delete your own account'}, status=status.HTTP_400_BAD_REQUEST)
        logger.info(f"Admin {request.user.pk} deleted user {user.pk}")
        user.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['post'])
    def bulk(self, request):
        """Create many users; each failure is reported without stopping the batch"""
        entries = request.data.get('users') if isinstance(request.data, dict) else request.data
        if not isinstance(entries, list) or not entries:
            return Response({'message': 'A non-empty list of users is required'}, status=status.HTTP_400_BAD_REQUEST)

        created, failed = [], []
        for entry in entries:
            if not isinstance(entry, dict):
                failed.append({'user': entry, 'error': 'Invalid user entry'})
                continue

            payload = dict(entry)
            generated_password = None
            if not payload.get('password'):
                generated_password = secrets.token_urlsafe(9)
                payload['password'] = generated_password
            if not payload.get('username') and payload.get('email'):
                payload['username'] = generate_username(payload['email'])

            serializer = AdminUserCreateSerializer(data=payload)
            if not serializer.is_valid():
                failed.append({
                    'user': {k: v for k, v in entry.items() if k != 'password'},
                    'error': _first_error(serializer.errors),
                })
                continue

            course_ids = serializer.validated_data.get('course_ids') or []
            user = serializer.save()
            if course_ids:
                assign_courses(user, course_ids)

            data = UserSerializer(user).data
            if generated_password:
                data['generated_password'] = generated_password
            created.append(data)

        logger.info(f"Bulk user import by {request.user.pk}: {len(created)} created, {len(failed)} failed")
        return Response({
            'created': len(created),
            'failed': len(failed),
            'users': created,
            'failed_users': failed,
        }, status=status.HTTP_201_CREATED if created else status.HTTP_400_BAD_REQUEST)


def _first_error(errors):
    for field, messages in errors.items():
        message = messages[0] if isinstance(messages, list) and messages else messages
        return f"{field}: {message}"
    return 'Invalid data'


# ============ Roles ============

class RoleViewSet(viewsets.ModelViewSet):
    """Everyone signed in can read roles; only admins change them"""
    queryset = Role.objects.all()
    serializer_class = RoleSerializer
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [IsAuthenticated()]
        return [IsAdmin()]

    def destroy(self, request, *args, **kwargs):
        role = self.get_object()
        if not role.is_system and role.is_in_use():
            return Response({'message': 'Cannot delete role that is in use'}, status=status.HTTP_400_BAD_REQUEST)
        logger.info(f"Role '{role.name}' deleted by {request.user.pk}")
        role.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['get', 'post'], url_path='mandatory-courses')
    def mandatory_courses(self, request, pk=None):
        role = self.get_object()

        if request.method == 'GET':
            items = role.mandatory_courses.select_related('course')
            return Response(RoleMandatoryCourseSerializer(items, many=True).data)

        course_id = request.data.get('course_id')
        try:
            course = Course.objects.get(pk=int(course_id))
        except (TypeError, ValueError):
            return Response({'message': 'Course ID is required'}, status=status.HTTP_400_BAD_REQUEST)
        except Course.DoesNotExist:
            return Response({'message': 'Course not found'}, status=status.HTTP_404_NOT_FOUND)

        item, created = RoleMandatoryCourse.objects.get_or_create(role=role, course=course)
        return Response(
            RoleMandatoryCourseSerializer(item).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    @action(detail=True, methods=['delete'], url_path=r'mandatory-courses/(?P<course_id>\d+)')
    def remove_mandatory_course(self, request, pk=None, course_id=None):
        role = self.get_object()
        deleted, _ = RoleMandatoryCourse.objects.filter(role=role, course_id=course_id).delete()
        if not deleted:
            return Response({'message': 'Mandatory course not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
