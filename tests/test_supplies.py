from decimal import Decimal

from supplyApp.models import Supply


class TestSupplyStatus:
    def test_low_stock_needs_restock(self, db):
        supply = Supply.objects.create(name='Urea', kind='Fertilizer', stock=Decimal('49.99'))

        assert supply.status == Supply.STATUS_RESTOCK

    def test_threshold_is_optimal(self, db):
        supply = Supply.objects.create(name='Urea', kind='Fertilizer', stock=Decimal('50'))

        assert supply.status == Supply.STATUS_OPTIMAL

    def test_update_recomputes_status(self, api_client, db):
        created = api_client.post(
            '/api/supplies/', {'name': 'Glyphosate', 'kind': 'Herbicide', 'stock': '200', 'unit': 'l'}, format='json'
        )
        supply_id = created.data['id']

        response = api_client.put(f'/api/supplies/{supply_id}/', {'stock': '10'}, format='json')

        assert response.status_code == 200
        assert response.data['status'] == 'Urgent restock'
        assert Supply.objects.get(id=supply_id).status == 'Urgent restock'

    def test_status_is_read_only(self, api_client, db):
        created = api_client.post(
            '/api/supplies/', {'name': 'Copper', 'kind': 'Pesticide', 'stock': '5', 'status': 'Optimal'}, format='json'
        )

        assert created.status_code == 201
        assert Supply.objects.get(id=created.data['id']).status == 'Urgent restock'

    def test_negative_stock_rejected(self, api_client, db):
        response = api_client.post('/api/supplies/', {'name': 'Lime', 'stock': '-3'}, format='json')

        assert response.status_code == 400
