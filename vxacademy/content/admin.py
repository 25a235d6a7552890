from django.contrib import admin

from .models import Assessment, Course, LearningBlock, Module, Question, TrainingArea, Unit


@admin.register(TrainingArea)
class TrainingAreaAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'created_at']
    search_fields = ['name']


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'training_area']
    list_filter = ['training_area']


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'module', 'level', 'duration']
    list_filter = ['level', 'module']
    search_fields = ['name']


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'course', 'order', 'xp_points']
    list_filter = ['course']


@admin.register(LearningBlock)
class LearningBlockAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'unit', 'type', 'order', 'xp_points']
    list_filter = ['type']


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'unit', 'passing_score', 'xp_points']
    inlines = [QuestionInline]
