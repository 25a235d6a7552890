from rest_framework import serializers

from .models import Assessment, Course, LearningBlock, Module, Question, TrainingArea, Unit


class TrainingAreaSerializer(serializers.ModelSerializer):
    class Meta:
        model = TrainingArea
        fields = ['id', 'name', 'description', 'image_url', 'created_at']
        read_only_fields = ['id', 'created_at']


class ModuleSerializer(serializers.ModelSerializer):
    training_area_id = serializers.PrimaryKeyRelatedField(source='training_area', queryset=TrainingArea.objects.all())

    class Meta:
        model = Module
        fields = ['id', 'training_area_id', 'name', 'description', 'image_url', 'created_at']
        read_only_fields = ['id', 'created_at']


class CourseSerializer(serializers.ModelSerializer):
    module_id = serializers.PrimaryKeyRelatedField(source='module', queryset=Module.objects.all())
    unit_count = serializers.SerializerMethodField()

    class Meta:
        model = Course
        fields = ['id', 'module_id', 'name', 'description', 'image_url', 'duration', 'level', 'unit_count', 'created_at']
        read_only_fields = ['id', 'created_at']

    def get_unit_count(self, obj):
        return obj.units.count()


class UnitSerializer(serializers.ModelSerializer):
    course_id = serializers.PrimaryKeyRelatedField(source='course', queryset=Course.objects.all())

    class Meta:
        model = Unit
        fields = ['id', 'course_id', 'name', 'description', 'order', 'duration', 'xp_points', 'created_at']
        read_only_fields = ['id', 'created_at']


class LearningBlockSerializer(serializers.ModelSerializer):
    unit_id = serializers.PrimaryKeyRelatedField(source='unit', queryset=Unit.objects.all())

    class Meta:
        model = LearningBlock
        fields = [
            'id', 'unit_id', 'type', 'title', 'content', 'video_url', 'image_url',
            'interactive_data', 'order', 'xp_points', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']


class AssessmentSerializer(serializers.ModelSerializer):
    unit_id = serializers.PrimaryKeyRelatedField(source='unit', queryset=Unit.objects.all())

    class Meta:
        model = Assessment
        fields = [
            'id', 'unit_id', 'title', 'description', 'passing_score', 'xp_points', 'time_limit', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate_passing_score(self, value):
        if value is not None and not 0 <= value <= 100:
            raise serializers.ValidationError('Passing score must be between 0 and 100')
        return value


class QuestionSerializer(serializers.ModelSerializer):
    assessment_id = serializers.PrimaryKeyRelatedField(source='assessment', queryset=Assessment.objects.all())

    class Meta:
        model = Question
        fields = [
            'id', 'assessment_id', 'question_text', 'question_type', 'options', 'correct_answer', 'order', 'created_at',
        ]
        read_only_fields = ['id', 'created_at']

    def validate(self, attrs):
        question_type = attrs.get('question_type', getattr(self.instance, 'question_type', 'mcq'))
        options = attrs.get('options', getattr(self.instance, 'options', None))
        if question_type == 'mcq' and options is not None and not isinstance(options, list):
            raise serializers.ValidationError({'options': 'Options must be a list'})
        if question_type == 'true_false':
            correct = attrs.get('correct_answer', getattr(self.instance, 'correct_answer', ''))
            if str(correct).lower() not in ('true', 'false'):
                raise serializers.ValidationError({'correct_answer': 'Answer must be "true" or "false"'})
        return attrs
