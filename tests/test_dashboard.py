from datetime import date
from decimal import Decimal

from harvestApp.models import Harvest


def _harvest(planting, day, kg):
    Harvest.objects.create(planting=planting, date=day, quantity_kg=Decimal(kg), quality='High')


class TestDashboard:
    def test_stats_for_year(self, api_client, planting, worker):
        _harvest(planting, date(2024, 3, 1), '100.00')
        _harvest(planting, date(2024, 4, 1), '50.50')
        _harvest(planting, date(2025, 1, 10), '999.00')

        response = api_client.get('/api/dashboard/stats/', {'year': 2024})

        assert response.status_code == 200
        assert response.data == {
            'year': 2024,
            'total_production_kg': 150.5,
            'active_plants': 400,
            'worker_count': 1,
        }

    def test_stats_on_empty_store_are_zero(self, api_client, db):
        response = api_client.get('/api/dashboard/stats/', {'year': 2024})

        assert response.data['total_production_kg'] == 0
        assert response.data['active_plants'] == 0
        assert response.data['worker_count'] == 0

    def test_invalid_year(self, api_client, db):
        response = api_client.get('/api/dashboard/stats/', {'year': 'last'})

        assert response.status_code == 400

    def test_monthly_production(self, api_client, planting):
        _harvest(planting, date(2024, 3, 1), '100.00')
        _harvest(planting, date(2024, 3, 20), '20.00')
        _harvest(planting, date(2024, 7, 5), '5.00')

        response = api_client.get('/api/dashboard/monthly-production/', {'year': 2024})

        assert response.data == [
            {'month': 3, 'total_kg': 120.0},
            {'month': 7, 'total_kg': 5.0},
        ]

    def test_annual_summary_per_variety(self, api_client, planting):
        _harvest(planting, date(2024, 3, 1), '100.00')
        _harvest(planting, date(2024, 9, 1), '60.00')
        _harvest(planting, date(2025, 2, 1), '30.00')

        response = api_client.get('/api/dashboard/annual-summary/')

        assert response.data == [
            {'year': 2025, 'variety': 'Caturra', 'total_kg': 30.0, 'harvest_count': 1},
            {'year': 2024, 'variety': 'Caturra', 'total_kg': 160.0, 'harvest_count': 2},
        ]
