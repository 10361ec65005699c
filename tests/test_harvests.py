from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from harvestApp.models import Harvest


class TestHarvestRegistration:
    def test_register_returns_new_id(self, planting):
        harvest_id = Harvest.objects.register(
            planting=planting,
            date=date(2024, 6, 1),
            quantity_kg=Decimal('120.50'),
            quality='High'
        )

        harvest = Harvest.objects.get(id=harvest_id)
        assert harvest.quantity_kg == Decimal('120.50')
        assert harvest.planting_id == planting.id

    def test_register_before_planting_date_fails(self, planting):
        with pytest.raises(ValidationError):
            Harvest.objects.register(planting=planting, date=date(2023, 12, 1), quantity_kg=10)


class TestHarvestEndpoints:
    def test_post_returns_id(self, api_client, planting):
        response = api_client.post(
            '/api/harvests/',
            {'planting_id': planting.id, 'date': '2024-05-20', 'quantity_kg': '80.00', 'quality': 'Medium'},
            format='json'
        )

        assert response.status_code == 201
        assert response.data['success'] is True
        assert Harvest.objects.filter(id=response.data['id']).exists()

    def test_negative_quantity_is_rejected(self, api_client, planting):
        response = api_client.post(
            '/api/harvests/',
            {'planting_id': planting.id, 'date': '2024-05-20', 'quantity_kg': '-1'},
            format='json'
        )

        assert response.status_code == 400

    def test_list_joins_field_and_variety(self, api_client, planting):
        Harvest.objects.register(planting=planting, date=date(2024, 3, 2), quantity_kg=Decimal('40'))

        response = api_client.get('/api/harvests/')

        assert response.status_code == 200
        assert response.data[0]['field_name'] == 'North Plot'
        assert response.data[0]['variety_name'] == 'Caturra'

    def test_planting_with_harvests_cannot_be_deleted(self, api_client, planting):
        Harvest.objects.register(planting=planting, date=date(2024, 3, 2), quantity_kg=Decimal('40'))

        response = api_client.delete(f'/api/plantings/{planting.id}/')

        assert response.status_code == 400
        assert 'harvests' in response.data['error']

    def test_update_and_delete(self, api_client, planting):
        harvest_id = Harvest.objects.register(planting=planting, date=date(2024, 3, 2), quantity_kg=Decimal('40'))

        updated = api_client.put(f'/api/harvests/{harvest_id}/', {'quality': 'Low'}, format='json')
        deleted = api_client.delete(f'/api/harvests/{harvest_id}/')

        assert updated.status_code == 200
        assert deleted.status_code == 200
        assert not Harvest.objects.filter(id=harvest_id).exists()
