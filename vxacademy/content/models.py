"""
Authored training content: training area > module > course > unit > blocks/assessments > questions
"""
from django.db import models
from django.utils import timezone


class TrainingArea(models.Model):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    image_url = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'training_areas'
        ordering = ['id']

    def __str__(self):
        return self.name


class Module(models.Model):
    training_area = models.ForeignKey(TrainingArea, on_delete=models.CASCADE, related_name='modules')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    image_url = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'modules'
        ordering = ['id']

    def __str__(self):
        return self.name


class Course(models.Model):
    LEVEL_CHOICES = [
        ('beginner', 'Beginner'),
        ('intermediate', 'Intermediate'),
        ('advanced', 'Advanced'),
    ]

    module = models.ForeignKey(Module, on_delete=models.CASCADE, related_name='courses')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    image_url = models.TextField(blank=True, null=True)
    duration = models.IntegerField(default=0, help_text='Minutes')
    level = models.CharField(max_length=20, choices=LEVEL_CHOICES, default='beginner')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'courses'
        ordering = ['id']

    def __str__(self):
        return self.name


class Unit(models.Model):
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name='units')
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    order = models.IntegerField(default=0)
    duration = models.IntegerField(default=30)
    xp_points = models.IntegerField(default=100)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'units'
        ordering = ['order', 'id']

    def __str__(self):
        return self.name


class LearningBlock(models.Model):
    BLOCK_TYPE_CHOICES = [
        ('video', 'Video'),
        ('text', 'Text'),
        ('interactive', 'Interactive'),
        ('image', 'Image'),
    ]

    unit = models.ForeignKey(Unit, on_delete=models.CASCADE, related_name='blocks')
    type = models.CharField(max_length=20, choices=BLOCK_TYPE_CHOICES)
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True, null=True)
    video_url = models.TextField(blank=True, null=True)
    image_url = models.TextField(blank=True, null=True)
    interactive_data = models.JSONField(blank=True, null=True)
    order = models.IntegerField(default=0)
    xp_points = models.IntegerField(default=10, null=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'learning_blocks'
        ordering = ['order', 'id']

    def __str__(self):
        return self.title


class Assessment(models.Model):
    unit = models.ForeignKey(Unit, on_delete=models.CASCADE, related_name='assessments')
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    passing_score = models.IntegerField(default=70, null=True)
    xp_points = models.IntegerField(default=50, null=True)
    time_limit = models.IntegerField(blank=True, null=True, help_text='Minutes')
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'assessments'
        ordering = ['id']

    def __str__(self):
        return self.title


class Question(models.Model):
    QUESTION_TYPE_CHOICES = [
        ('mcq', 'Multiple Choice'),
        ('true_false', 'True / False'),
    ]

    assessment = models.ForeignKey(Assessment, on_delete=models.CASCADE, related_name='questions')
    question_text = models.TextField()
    question_type = models.CharField(max_length=20, choices=QUESTION_TYPE_CHOICES, default='mcq')
    options = models.JSONField(blank=True, null=True)
    # Stored as text whatever the question type
    correct_answer = models.TextField()
    order = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'questions'
        ordering = ['order', 'id']

    def __str__(self):
        return self.question_text[:50]
