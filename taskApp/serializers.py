from rest_framework import serializers
from farmApp.models import Field
from workerApp.models import Worker
from .models import Task, is_in_the_past


class TaskSerializer(serializers.ModelSerializer):
    """Task row joined with the name of its field."""
    field_id = serializers.IntegerField(read_only=True)
    assignee_id = serializers.IntegerField(read_only=True)
    field_name = serializers.CharField(source='field.name', read_only=True)

    class Meta:
        model = Task
        fields = [
            'id', 'description', 'scheduled_date', 'status',
            'field_id', 'assignee_id', 'field_name'
        ]


class TaskWriteSerializer(serializers.ModelSerializer):
    field_id = serializers.PrimaryKeyRelatedField(source='field', queryset=Field.objects.all())
    assignee_id = serializers.PrimaryKeyRelatedField(source='assignee', queryset=Worker.objects.all())

    class Meta:
        model = Task
        fields = ['description', 'scheduled_date', 'status', 'field_id', 'assignee_id']

    def validate_description(self, value):
        if not value.strip():
            raise serializers.ValidationError("Description cannot be empty")
        return value.strip()

    def validate_scheduled_date(self, value):
        # Only new tasks are checked, existing ones may already lie in the past
        if self.instance is None and is_in_the_past(value):
            raise serializers.ValidationError("A task cannot be scheduled in the past")
        return value


class TaskStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Task.STATUS_CHOICES)
