from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import (
    AssessmentViewSet, CourseViewSet, LearningBlockViewSet, ModuleViewSet,
    QuestionViewSet, TrainingAreaViewSet, UnitViewSet,
)

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r'training-areas', TrainingAreaViewSet, basename='training-area')
router.register(r'modules', ModuleViewSet, basename='module')
router.register(r'courses', CourseViewSet, basename='course')
router.register(r'units', UnitViewSet, basename='unit')
router.register(r'learning-blocks', LearningBlockViewSet, basename='learning-block')
router.register(r'assessments', AssessmentViewSet, basename='assessment')
router.register(r'questions', QuestionViewSet, basename='question')

urlpatterns = [
    path('', include(router.urls)),
]
