from rest_framework import serializers
from workerApp.models import Worker
from .models import Recommendation


class RecommendationSerializer(serializers.ModelSerializer):
    """Recommendation joined with the name of its field."""
    field_id = serializers.IntegerField(read_only=True)
    assignee_id = serializers.IntegerField(read_only=True)
    field_name = serializers.CharField(source='field.name', read_only=True)

    class Meta:
        model = Recommendation
        fields = [
            'id', 'description', 'timestamp', 'status',
            'field_id', 'assignee_id', 'field_name'
        ]


class AcceptRecommendationSerializer(serializers.Serializer):
    actorId = serializers.PrimaryKeyRelatedField(
        queryset=Worker.objects.all(),
        error_messages={'does_not_exist': 'Worker "{pk_value}" does not exist.'}
    )
