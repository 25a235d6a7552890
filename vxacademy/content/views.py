"""
Content authoring API - training areas, modules, courses, units, blocks, assessments and questions.

Reads are public; writes need an admin or content creator.
"""
import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.permissions import IsContentManagerOrReadOnly
from .models import Assessment, Course, LearningBlock, Module, Question, TrainingArea, Unit
from .serializers import (
    AssessmentSerializer, CourseSerializer, LearningBlockSerializer, ModuleSerializer,
    QuestionSerializer, TrainingAreaSerializer, UnitSerializer,
)

logger = logging.getLogger(__name__)


def _int_param(request, name):
    value = request.query_params.get(name)
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class ContentViewSet(viewsets.ModelViewSet):
    """Shared behaviour: role-gated writes and an audit line per change"""
    permission_classes = [IsContentManagerOrReadOnly]
    lookup_value_regex = r'\d+'

    def perform_create(self, serializer):
        instance = serializer.save()
        logger.info(f"{self.request.user} created {instance.__class__.__name__} {instance.pk}")

    def perform_update(self, serializer):
        instance = serializer.save()
        logger.info(f"{self.request.user} updated {instance.__class__.__name__} {instance.pk}")

    def perform_destroy(self, instance):
        logger.info(f"{self.request.user} deleted {instance.__class__.__name__} {instance.pk}")
        instance.delete()


class TrainingAreaViewSet(ContentViewSet):
    queryset = TrainingArea.objects.all()
    serializer_class = TrainingAreaSerializer


class ModuleViewSet(ContentViewSet):
    serializer_class = ModuleSerializer

    def get_queryset(self):
        queryset = Module.objects.all()
        training_area_id = _int_param(self.request, 'training_area_id')
        if training_area_id is not None:
            queryset = queryset.filter(training_area_id=training_area_id)
        return queryset


class CourseViewSet(ContentViewSet):
    serializer_class = CourseSerializer

    def get_queryset(self):
        queryset = Course.objects.all()
        module_id = _int_param(self.request, 'module_id')
        if module_id is not None:
            queryset = queryset.filter(module_id=module_id)
        return queryset

    @action(detail=True, methods=['get'])
    def units(self, request, pk=None):
        """Units of a course in display order"""
        course = self.get_object()
        serializer = UnitSerializer(course.units.all(), many=True)
        return Response(serializer.data)


class UnitViewSet(ContentViewSet):
    serializer_class = UnitSerializer

    def get_queryset(self):
        queryset = Unit.objects.all()
        course_id = _int_param(self.request, 'course_id')
        if course_id is not None:
            queryset = queryset.filter(course_id=course_id)
        return queryset

    @action(detail=True, methods=['get'])
    def blocks(self, request, pk=None):
        unit = self.get_object()
        serializer = LearningBlockSerializer(unit.blocks.all(), many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['get'])
    def assessments(self, request, pk=None):
        unit = self.get_object()
        serializer = AssessmentSerializer(unit.assessments.all(), many=True)
        return Response(serializer.data)


class LearningBlockViewSet(ContentViewSet):
    serializer_class = LearningBlockSerializer

    def get_queryset(self):
        queryset = LearningBlock.objects.all()
        unit_id = _int_param(self.request, 'unit_id')
        if unit_id is not None:
            queryset = queryset.filter(unit_id=unit_id)
        return queryset


class AssessmentViewSet(ContentViewSet):
    serializer_class = AssessmentSerializer

    def get_queryset(self):
        queryset = Assessment.objects.all()
        unit_id = _int_param(self.request, 'unit_id')
        if unit_id is not None:
            queryset = queryset.filter(unit_id=unit_id)
        return queryset

    @action(detail=True, methods=['get'])
    def questions(self, request, pk=None):
        assessment = self.get_object()
        serializer = QuestionSerializer(assessment.questions.all(), many=True)
        return Response(serializer.data)


class QuestionViewSet(ContentViewSet):
    serializer_class = QuestionSerializer

    def get_queryset(self):
        queryset = Question.objects.all()
        assessment_id = _int_param(self.request, 'assessment_id')
        if assessment_id is not None:
            queryset = queryset.filter(assessment_id=assessment_id)
        return queryset
