from rest_framework import serializers
from farmApp.models import Field
from .models import Sensor, SensorReading


class SensorSerializer(serializers.ModelSerializer):
    field_id = serializers.PrimaryKeyRelatedField(source='field', queryset=Field.objects.all())
    field_name = serializers.CharField(source='field.name', read_only=True)
    last_reading = serializers.SerializerMethodField()

    class Meta:
        model = Sensor
        fields = ['id', 'kind', 'location', 'status', 'field_id', 'field_name', 'last_reading']
        read_only_fields = ['id']

    def get_last_reading(self, obj):
        # readings are ordered newest first; slicing reuses a prefetched cache
        latest = list(obj.readings.all()[:1])
        return SensorReadingSerializer(latest[0]).data if latest else None


class SensorReadingSerializer(serializers.ModelSerializer):
    sensor_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = SensorReading
        fields = ['id', 'sensor_id', 'value', 'timestamp']
        read_only_fields = ['id']
