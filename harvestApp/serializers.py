from rest_framework import serializers
from plantingApp.models import Planting
from .models import Harvest


class HarvestSerializer(serializers.ModelSerializer):
    """Harvest joined with the field and variety of its planting."""
    planting_id = serializers.IntegerField(read_only=True)
    field_name = serializers.CharField(source='planting.field.name', read_only=True)
    variety_name = serializers.CharField(source='planting.variety.name', read_only=True)

    class Meta:
        model = Harvest
        fields = [
            'id',
            'planting_id',
            'date',
            'quantity_kg',
            'quality',
            'field_name',
            'variety_name'
        ]


class HarvestCreateSerializer(serializers.ModelSerializer):
    """Serializer for registering harvest records"""
    planting_id = serializers.PrimaryKeyRelatedField(
        source='planting',
        queryset=Planting.objects.all()
    )

    class Meta:
        model = Harvest
        fields = [
            'planting_id',
            'date',
            'quantity_kg',
            'quality'
        ]

    def validate_quantity_kg(self, value):
        """Validate that harvest quantity is positive"""
        if value is not None and value < 0:
            raise serializers.ValidationError("Harvest quantity cannot be negative")
        return value

    def validate(self, attrs):
        planting = attrs.get('planting')
        date = attrs.get('date')
        if planting and date and date < planting.date:
            raise serializers.ValidationError(
                {'date': "A harvest cannot be dated before its planting"}
            )
        return attrs


class HarvestUpdateSerializer(HarvestCreateSerializer):
    """Serializer for updating harvest records"""

    def validate(self, attrs):
        if self.instance is not None:
            attrs.setdefault('planting', self.instance.planting)
            attrs.setdefault('date', self.instance.date)
        return super().validate(attrs)
