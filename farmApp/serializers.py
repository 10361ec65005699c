from rest_framework import serializers
from .models import DEFAULT_FARM_ID, Farm, Field, Variety


class FarmSerializer(serializers.ModelSerializer):
    class Meta:
        model = Farm
        fields = ['id', 'name', 'location', 'owner']
        read_only_fields = ['id']


class FieldSerializer(serializers.ModelSerializer):
    farm_id = serializers.PrimaryKeyRelatedField(
        source='farm',
        queryset=Farm.objects.all(),
        required=False
    )

    class Meta:
        model = Field
        fields = ['id', 'name', 'area_ha', 'status', 'farm_id']
        read_only_fields = ['id']

    def validate_name(self, value):
        """Reject blank field names"""
        if not value.strip():
            raise serializers.ValidationError("Field name cannot be empty")
        return value.strip()

    def validate(self, data):
        """Fields created without a farm go to the default farm, which must exist"""
        if self.instance is None and 'farm' not in data:
            if not Farm.objects.filter(id=DEFAULT_FARM_ID).exists():
                raise serializers.ValidationError(
                    {'farm_id': "No farm given and the default farm does not exist"}
                )
        return data


class FieldSummarySerializer(serializers.ModelSerializer):
    """Field row annotated with linked sensor and pending task counts."""
    farm_id = serializers.IntegerField(read_only=True)
    sensor_count = serializers.IntegerField(read_only=True)
    pending_task_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Field
        fields = [
            'id', 'name', 'area_ha', 'status', 'farm_id',
            'sensor_count', 'pending_task_count'
        ]


class VarietySerializer(serializers.ModelSerializer):
    class Meta:
        model = Variety
        fields = ['id', 'name', 'description']
        read_only_fields = ['id']
