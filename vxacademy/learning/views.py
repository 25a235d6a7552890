"""
Learner-facing API: progress, block completion, assessment submission,
badges, leaderboard, certificates and the admin dashboard stats.
"""
import logging
import math

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from accounts.permissions import IsAdmin, IsContentManager
from content.models import Assessment, Course, LearningBlock, Unit
from .models import Badge, Certificate, UserBadge, UserProgress
from .serializers import (
    AssessmentAttemptSerializer, BadgeSerializer, BlockCompletionSerializer,
    CertificateSerializer, UserBadgeSerializer, UserProgressSerializer,
)
from .services import (
    AdminStatsService, AssessmentSubmissionService, BlockCompletionService, CertificateService,
    CourseNotCompleted, CourseProgressService, LeaderboardService,
)

logger = logging.getLogger(__name__)


def parse_score(value):
    """Finite JSON number or None; booleans, strings and inf/nan are not scores"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        finite = math.isfinite(value)
    except OverflowError:
        return None
    return value if finite else None


def parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# ============ Progress ============

@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def progress(request):
    """
    GET: the current user's progress on every started course.
    POST {course_id}: start (or revisit) a course.
    """
    if request.method == 'GET':
        records = UserProgress.objects.filter(user=request.user).select_related('course')
        return Response(UserProgressSerializer(records, many=True).data)

    course_id = parse_id(request.data.get('course_id'))
    if course_id is None:
        return Response({'message': 'Course ID is required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        course = Course.objects.get(pk=course_id)
    except Course.DoesNotExist:
        return Response({'message': 'Course not found'}, status=status.HTTP_404_NOT_FOUND)

    record, created = CourseProgressService.start_course(request.user, course)
    return Response(
        UserProgressSerializer(record).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_progress(request):
    records = UserProgress.objects.filter(user=request.user).select_related('course')
    return Response(UserProgressSerializer(records, many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def complete_block(request, block_id):
    """Mark a learning block complete; repeat calls are no-ops"""
    try:
        block = LearningBlock.objects.get(pk=block_id)
    except LearningBlock.DoesNotExist:
        return Response({'message': 'Learning block not found'}, status=status.HTTP_404_NOT_FOUND)

    completion, created = BlockCompletionService.complete(request.user, block)
    return Response(
        BlockCompletionSerializer(completion).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


# ============ Assessments ============

@api_view(['POST'])
@permission_classes([IsAuthenticated])
def submit_assessment(request, assessment_id):
    """Record an attempt; a pass awards XP and badges and updates course progress"""
    answers = request.data.get('answers')
    score = parse_score(request.data.get('score'))
    if answers is None or score is None:
        return Response({'message': 'Answers and score are required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        assessment = Assessment.objects.get(pk=assessment_id)
    except Assessment.DoesNotExist:
        return Response({'message': 'Assessment not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        result = AssessmentSubmissionService.submit(request.user, assessment, answers, score)
    except Unit.DoesNotExist:
        return Response({'message': 'Unit not found'}, status=status.HTTP_404_NOT_FOUND)
    except Exception as e:
        logger.exception(f"Error submitting assessment {assessment_id} for user {request.user.pk}: {e}")
        return Response({'message': 'Error submitting assessment'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response({
        'attempt': AssessmentAttemptSerializer(result['attempt']).data,
        'passed': result['passed'],
        'message': result['message'],
    })


# ============ Badges & leaderboard ============

class BadgeViewSet(viewsets.ModelViewSet):
    """Public badge catalog; admins and content creators maintain it"""
    queryset = Badge.objects.all()
    serializer_class = BadgeSerializer
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [AllowAny()]
        return [IsContentManager()]

    def perform_create(self, serializer):
        badge = serializer.save()
        logger.info(f"Badge '{badge.name}' created by user {self.request.user.pk}")


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_badges(request):
    awards = UserBadge.objects.filter(user=request.user).select_related('badge')
    return Response(UserBadgeSerializer(awards, many=True).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def leaderboard(request):
    limit = parse_id(request.query_params.get('limit'))
    if limit is None or limit < 1:
        limit = settings.VX_LEADERBOARD_DEFAULT_LIMIT
    return Response(LeaderboardService.top_users(limit))


@api_view(['GET'])
@permission_classes([IsAdmin])
def admin_stats(request):
    return Response(AdminStatsService.collect())


# ============ Certificates ============

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def certificate_list(request):
    certificates = Certificate.objects.filter(user=request.user).select_related('course', 'user')
    return Response(CertificateSerializer(certificates, many=True).data)


def _get_own_certificate(request, certificate_id):
    """Returns (certificate, error_response)"""
    try:
        certificate = Certificate.objects.select_related('course', 'user').get(pk=certificate_id)
    except Certificate.DoesNotExist:
        return None, Response({'message': 'Certificate not found'}, status=status.HTTP_404_NOT_FOUND)

    if certificate.user_id != request.user.pk and not request.user.is_admin:
        return None, Response({'message': 'Access denied'}, status=status.HTTP_403_FORBIDDEN)
    return certificate, None


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def certificate_detail(request, certificate_id):
    certificate, error = _get_own_certificate(request, certificate_id)
    if error is not None:
        return error
    return Response(CertificateSerializer(certificate).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def certificate_generate(request):
    course_id = parse_id(request.data.get('course_id'))
    if course_id is None:
        return Response({'message': 'Course ID is required'}, status=status.HTTP_400_BAD_REQUEST)

    try:
        course = Course.objects.get(pk=course_id)
    except Course.DoesNotExist:
        return Response({'message': 'Course not found'}, status=status.HTTP_404_NOT_FOUND)

    try:
        certificate, created = CertificateService.generate(request.user, course)
    except CourseNotCompleted:
        return Response({'message': 'Course not completed yet'}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        CertificateSerializer(certificate).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def certificate_pdf(request, certificate_id):
    certificate, error = _get_own_certificate(request, certificate_id)
    if error is not None:
        return error

    pdf_bytes = CertificateService.render_pdf(certificate)
    response = HttpResponse(pdf_bytes, content_type='application/pdf')
    response['Content-Disposition'] = f'inline; filename="{certificate.certificate_number}.pdf"'
    return response
