from django.db.models import Min
from rest_framework import serializers
from farmApp.models import Field, Variety
from .models import Planting


class PlantingSerializer(serializers.ModelSerializer):
    field_id = serializers.PrimaryKeyRelatedField(source='field', queryset=Field.objects.all())
    variety_id = serializers.PrimaryKeyRelatedField(source='variety', queryset=Variety.objects.all())

    class Meta:
        model = Planting
        fields = ['id', 'date', 'plant_count', 'field_id', 'variety_id']
        read_only_fields = ['id']

    def validate_field_id(self, value):
        """Plantings cannot go on a retired field"""
        if value.status == 'Retired':
            raise serializers.ValidationError("Cannot plant on a retired field")
        return value

    def validate_date(self, value):
        """An existing planting cannot move past its first harvest"""
        if self.instance is not None:
            first_harvest = self.instance.harvests.aggregate(first=Min('date'))['first']
            if first_harvest is not None and value > first_harvest:
                raise serializers.ValidationError(
                    f"Planting date cannot be later than its first harvest ({first_harvest})"
                )
        return value


class PlantingDetailSerializer(serializers.ModelSerializer):
    """Planting joined with its variety and field."""
    field_id = serializers.IntegerField(read_only=True)
    variety_id = serializers.IntegerField(read_only=True)
    variety_name = serializers.CharField(source='variety.name', read_only=True)
    variety_description = serializers.CharField(source='variety.description', read_only=True)
    field_name = serializers.CharField(source='field.name', read_only=True)
    field_area_ha = serializers.DecimalField(
        source='field.area_ha', max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = Planting
        fields = [
            'id', 'date', 'plant_count', 'field_id', 'variety_id',
            'variety_name', 'variety_description', 'field_name', 'field_area_ha'
        ]
